from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Tuple


# -------------------------
# Helper: date validation
# -------------------------

def _validate_iso_date(s: str, *, field_name: str) -> None:
    try:
        date.fromisoformat(s)
    except ValueError as e:
        raise ValueError(f"{field_name} must be 'YYYY-MM-DD'. Got '{s}'.") from e


def _validate_range(bounds: Tuple[int, int], *, field_name: str, minimum: int) -> None:
    lo, hi = bounds
    if not (minimum <= lo <= hi):
        raise ValueError(f"{field_name} must satisfy {minimum} <= min <= max.")


# -------------------------
# Deliveries config
# -------------------------

@dataclass
class DeliveryGenConfig:
    """
    Controls generation of a synthetic delivery set.

    - cities: pool for origins and destinations (origin != destination when possible)
    - paid_fraction: probability a delivery carries a payment id
    - missing_arrival_fraction: probability an unfinished delivery has no known arrival start
    - loading_minutes / transit_minutes: inclusive ranges, in minutes
    """
    seed: int = 123
    num_deliveries: int = 40
    num_clients: int = 8
    cities: List[str] = field(default_factory=lambda: ["Haifa", "Tel Aviv", "Jerusalem", "Beer Sheva", "Eilat"])
    cargo_types: List[str] = field(default_factory=lambda: ["Food", "Electronics", "Furniture", "Chemicals", "Textile"])
    paid_fraction: float = 0.60
    missing_arrival_fraction: float = 0.15
    day_start: str = "2025-01-06"
    loading_minutes: Tuple[int, int] = (15, 120)
    transit_minutes: Tuple[int, int] = (30, 600)

    def validate(self) -> None:
        if not isinstance(self.seed, int):
            raise ValueError("seed must be an integer.")
        if self.num_deliveries < 0:
            raise ValueError("deliveries.num_deliveries must be >= 0.")
        if self.num_clients < 1:
            raise ValueError("deliveries.num_clients must be >= 1.")
        if not self.cities:
            raise ValueError("deliveries.cities must not be empty.")
        if not self.cargo_types:
            raise ValueError("deliveries.cargo_types must not be empty.")
        if not (0.0 <= self.paid_fraction <= 1.0):
            raise ValueError("deliveries.paid_fraction must be in [0,1].")
        if not (0.0 <= self.missing_arrival_fraction <= 1.0):
            raise ValueError("deliveries.missing_arrival_fraction must be in [0,1].")
        _validate_iso_date(self.day_start, field_name="deliveries.day_start")
        _validate_range(self.loading_minutes, field_name="deliveries.loading_minutes", minimum=0)
        _validate_range(self.transit_minutes, field_name="deliveries.transit_minutes", minimum=0)
