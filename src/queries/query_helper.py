# src/queries/query_helper.py
from __future__ import annotations

import logging
from math import fsum
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple, TypeVar

from src.business_objects.common import FINISHED_STATUSES, DeliveryType
from src.business_objects.delivery import Delivery

from .base import DeliveryQueries
from .config import MissingArrivalPolicy, QueryConfig
from .errors import MissingDataError
from .outputs import AverageGapsInfo, DeliveryShortInfo, StatusCounts
from .paging import paging as _paging


logger = logging.getLogger(__name__)

TElement = TypeVar("TElement")
TOrderingKey = TypeVar("TOrderingKey")


def status_then_loading_start_key(d: Delivery) -> Tuple:
    """
    Sort key: status ordinal, then loading start.
    A missing loading start sorts before any known start of the same status.
    """
    start = d.loading_period.start
    if start is None:
        return (d.status.ordinal, 0)
    return (d.status.ordinal, 1, start)


class QueryHelper(DeliveryQueries):
    """
    Default in-memory implementation of DeliveryQueries.

    Holds only its validated, frozen QueryConfig, so one instance can be shared
    between callers. Filters and projections are generators that walk the
    input once, on demand; nothing is cached between calls.
    """

    def __init__(self, config: Optional[QueryConfig] = None) -> None:
        self.config = config if config is not None else QueryConfig()
        self.config.validate()

    # ----------------------------- filters -----------------------------

    def paid(self, deliveries: Iterable[Delivery]) -> Iterator[Delivery]:
        return (d for d in deliveries if d.payment_id)

    def not_finished(self, deliveries: Iterable[Delivery]) -> Iterator[Delivery]:
        return (d for d in deliveries if d.status not in FINISHED_STATUSES)

    def delivery_infos_by_client(self, deliveries: Iterable[Delivery], client_id: str) -> Iterator[DeliveryShortInfo]:
        return (DeliveryShortInfo.from_delivery(d) for d in deliveries if d.client_id == client_id)

    def deliveries_by_city_and_type(
        self, deliveries: Iterable[Delivery], city_name: str, type: DeliveryType
    ) -> Iterator[Delivery]:
        # No built-in limit; compose with paging(count_on_page=10) for "first ten".
        return (d for d in deliveries if d.start_city == city_name and d.type == type)

    # ----------------------------- ordering ----------------------------

    def order_by_status_then_by_start_loading(self, deliveries: Iterable[Delivery]) -> Iterator[Delivery]:
        yield from sorted(deliveries, key=status_then_loading_start_key)

    # ---------------------------- aggregates ---------------------------

    def count_uniq_cargo_types(self, deliveries: Iterable[Delivery]) -> int:
        n = len({d.cargo_type for d in deliveries})
        logger.debug("count_uniq_cargo_types → %d", n)
        return n

    def counts_by_delivery_status(self, deliveries: Iterable[Delivery]) -> StatusCounts:
        counts: StatusCounts = {}
        for d in deliveries:
            counts[d.status] = counts.get(d.status, 0) + 1
        logger.debug("counts_by_delivery_status → %d statuses", len(counts))
        return counts

    def average_travel_time_per_direction(self, deliveries: Iterable[Delivery]) -> Iterator[AverageGapsInfo]:
        """
        Group by (origin, destination) and average arrival.start - loading.end, in minutes.

        Deliveries lacking either timestamp follow `config.missing_arrival`:
          - RAISE: MissingDataError on the first one (raised while iterating)
          - SKIP : left out of the mean; a direction with no usable delivery yields no row
        """
        gaps: Dict[Tuple[str, str], List[float]] = {}
        skipped = 0

        for d in deliveries:
            key = d.direction.as_tuple()
            gap = self._gap_minutes(d)
            if gap is None:
                skipped += 1
                continue
            gaps.setdefault(key, []).append(gap)

        if skipped:
            logger.debug("average_travel_time_per_direction: skipped %d deliveries", skipped)

        for (start_city, end_city), values in gaps.items():
            yield AverageGapsInfo(
                start_city=start_city,
                end_city=end_city,
                average_gap=fsum(values) / len(values),
            )

    def _gap_minutes(self, d: Delivery) -> Optional[float]:
        """Minutes between loading end and arrival start, or None if skipped."""
        if d.loading_period.end is None:
            missing = "loading_period.end"
        elif d.arrival_period.start is None:
            missing = "arrival_period.start"
        else:
            return (d.arrival_period.start - d.loading_period.end).total_seconds() / 60.0

        if self.config.missing_arrival == MissingArrivalPolicy.RAISE:
            raise MissingDataError(d.id, missing)
        logger.warning("Skipping delivery '%s' in travel-time average: no %s", d.id, missing)
        return None

    # ------------------------------ paging -----------------------------

    def paging(
        self,
        elements: Iterable[TElement],
        ordering: Callable[[TElement], TOrderingKey],
        filter: Optional[Callable[[TElement], bool]] = None,
        count_on_page: Optional[int] = None,
        page_number: int = 1,
    ) -> Iterator[TElement]:
        """See src.queries.paging.paging; page size defaults to config.default_page_size."""
        size = self.config.default_page_size if count_on_page is None else count_on_page
        return _paging(elements, ordering, filter=filter, count_on_page=size, page_number=page_number)
