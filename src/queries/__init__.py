"""
Query layer over in-memory delivery sequences.

- DeliveryQueries: abstract surface
- QueryHelper: default implementation
- paging / page_count: generic paging helpers
"""

from .base import DeliveryQueries
from .config import MissingArrivalPolicy, QueryConfig
from .errors import InvalidArgumentError, MissingDataError, QueryError
from .outputs import AverageGapsInfo, DeliveryShortInfo, StatusCounts
from .paging import DEFAULT_PAGE_SIZE, page_count, paging
from .query_helper import QueryHelper, status_then_loading_start_key

__all__ = [
    "DeliveryQueries",
    "QueryHelper",
    "status_then_loading_start_key",
    "QueryConfig",
    "MissingArrivalPolicy",
    "QueryError",
    "InvalidArgumentError",
    "MissingDataError",
    "DeliveryShortInfo",
    "AverageGapsInfo",
    "StatusCounts",
    "paging",
    "page_count",
    "DEFAULT_PAGE_SIZE",
]
