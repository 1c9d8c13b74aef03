from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from src.business_objects.common import DeliveryStatus, DeliveryType, Period
from src.business_objects.delivery import Delivery


# Status → number of deliveries in that status (only statuses present)
StatusCounts = Dict[DeliveryStatus, int]


def _iso(ts) -> str:
    return ts.isoformat() if ts is not None else ""


@dataclass(frozen=True)
class DeliveryShortInfo:
    """Flat projection of a Delivery for client-facing listings."""
    id: str
    start_city: str
    end_city: str
    client_id: str
    type: DeliveryType
    loading_period: Period
    arrival_period: Period
    status: DeliveryStatus
    cargo_type: str

    @classmethod
    def from_delivery(cls, d: Delivery) -> "DeliveryShortInfo":
        return cls(
            id=d.id,
            start_city=d.start_city,
            end_city=d.end_city,
            client_id=d.client_id,
            type=d.type,
            loading_period=d.loading_period,
            arrival_period=d.arrival_period,
            status=d.status,
            cargo_type=d.cargo_type,
        )

    def as_row(self) -> dict:
        """Row for CSV export."""
        return {
            "id": self.id,
            "start_city": self.start_city,
            "end_city": self.end_city,
            "client_id": self.client_id,
            "type": self.type.value,
            "loading_start": _iso(self.loading_period.start),
            "loading_end": _iso(self.loading_period.end),
            "arrival_start": _iso(self.arrival_period.start),
            "arrival_end": _iso(self.arrival_period.end),
            "status": self.status.value,
            "cargo_type": self.cargo_type,
        }


@dataclass(frozen=True)
class AverageGapsInfo:
    """Mean gap (minutes) between end of loading and start of arrival for one direction."""
    start_city: str
    end_city: str
    average_gap: float

    def as_row(self) -> dict:
        return {
            "start_city": self.start_city,
            "end_city": self.end_city,
            "average_gap_min": round(float(self.average_gap), 3),
        }
