# src/queries/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Iterable, Iterator, Optional, TypeVar

from src.business_objects.common import DeliveryType
from src.business_objects.delivery import Delivery

from .outputs import AverageGapsInfo, DeliveryShortInfo, StatusCounts


TElement = TypeVar("TElement")
TOrderingKey = TypeVar("TOrderingKey")


# ──────────────────────────────────────────────────────────────────────────────
# Abstract query surface
# ──────────────────────────────────────────────────────────────────────────────

class DeliveryQueries(ABC):
    """
    Business questions over an in-memory delivery sequence.

    Contract:
      - Read-only: never mutate the input sequence or its deliveries
      - Sequence results are lazy, single-pass iterators; wrap in list() to reuse
      - Aggregates (int / dict) are computed eagerly
    """

    @abstractmethod
    def paid(self, deliveries: Iterable[Delivery]) -> Iterator[Delivery]:
        """Deliveries that have been paid (non-empty payment id)."""
        ...

    @abstractmethod
    def not_finished(self, deliveries: Iterable[Delivery]) -> Iterator[Delivery]:
        """Deliveries still being processed (neither Done nor Cancelled)."""
        ...

    @abstractmethod
    def delivery_infos_by_client(self, deliveries: Iterable[Delivery], client_id: str) -> Iterator[DeliveryShortInfo]:
        """Short infos for the deliveries of one client (exact id match)."""
        ...

    @abstractmethod
    def deliveries_by_city_and_type(
        self, deliveries: Iterable[Delivery], city_name: str, type: DeliveryType
    ) -> Iterator[Delivery]:
        """All deliveries starting in `city_name` with the given type."""
        ...

    @abstractmethod
    def order_by_status_then_by_start_loading(self, deliveries: Iterable[Delivery]) -> Iterator[Delivery]:
        """Stable order: status (declared order), then loading start."""
        ...

    @abstractmethod
    def count_uniq_cargo_types(self, deliveries: Iterable[Delivery]) -> int:
        ...

    @abstractmethod
    def counts_by_delivery_status(self, deliveries: Iterable[Delivery]) -> StatusCounts:
        ...

    @abstractmethod
    def average_travel_time_per_direction(self, deliveries: Iterable[Delivery]) -> Iterator[AverageGapsInfo]:
        """Mean (arrival start - loading end) in minutes per origin/destination pair."""
        ...

    @abstractmethod
    def paging(
        self,
        elements: Iterable[TElement],
        ordering: Callable[[TElement], TOrderingKey],
        filter: Optional[Callable[[TElement], bool]] = None,
        count_on_page: Optional[int] = None,
        page_number: int = 1,
    ) -> Iterator[TElement]:
        ...
