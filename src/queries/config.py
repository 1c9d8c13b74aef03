from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .paging import DEFAULT_PAGE_SIZE


class MissingArrivalPolicy(str, Enum):
    """What the travel-time aggregate does with deliveries lacking timestamps."""
    RAISE = "raise"   # fail the call with MissingDataError
    SKIP = "skip"     # leave the delivery out of the mean (logged)


@dataclass(frozen=True)
class QueryConfig:
    """
    Knobs read by QueryHelper. Frozen once built; use dataclasses.replace() for variants.

    `missing_arrival` accepts the enum or its string value ("raise" / "skip").
    """
    default_page_size: int = DEFAULT_PAGE_SIZE
    missing_arrival: Union[MissingArrivalPolicy, str] = MissingArrivalPolicy.RAISE

    def __post_init__(self) -> None:
        if isinstance(self.missing_arrival, str) and not isinstance(self.missing_arrival, MissingArrivalPolicy):
            try:
                policy = MissingArrivalPolicy(self.missing_arrival.lower())
            except ValueError as e:
                allowed = [p.value for p in MissingArrivalPolicy]
                raise ValueError(f"query.missing_arrival must be one of {allowed}. Got '{self.missing_arrival}'.") from e
            object.__setattr__(self, "missing_arrival", policy)

    def validate(self) -> None:
        if isinstance(self.default_page_size, bool) or not isinstance(self.default_page_size, int):
            raise ValueError("query.default_page_size must be an integer.")
        if self.default_page_size < 1:
            raise ValueError("query.default_page_size must be >= 1.")
        if not isinstance(self.missing_arrival, MissingArrivalPolicy):
            raise ValueError("query.missing_arrival must be a MissingArrivalPolicy.")
