from __future__ import annotations


class QueryError(ValueError):
    """Base class for query-layer failures."""


class InvalidArgumentError(QueryError):
    """Raised when an operation receives an out-of-domain scalar (e.g. page_number < 1)."""


class MissingDataError(QueryError):
    """
    A delivery lacks a timestamp an aggregate needs.

    Attributes
    ----------
    delivery_id : id of the offending delivery
    field       : dotted name of the missing field, e.g. "arrival_period.start"
    """

    def __init__(self, delivery_id: str, field: str) -> None:
        self.delivery_id = delivery_id
        self.field = field
        super().__init__(f"Delivery '{delivery_id}' has no {field}.")
