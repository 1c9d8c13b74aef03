from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .common import City, DeliveryStatus, DeliveryType, Direction, Period


@dataclass(frozen=True)
class Delivery:
    """
    A single delivery record.

    Notes
    -----
    - `payment_id` is None or "" while the delivery is unpaid.
    - `arrival_period` endpoints are often unknown for deliveries still on the road.
    - Instances are frozen; the query layer only ever reads them.
    """

    # Identifiers
    id: str
    client_id: str
    payment_id: Optional[str]

    # Classification
    status: DeliveryStatus
    type: DeliveryType
    cargo_type: str

    # Route
    direction: Direction

    # Time windows
    loading_period: Period = field(default_factory=Period)
    arrival_period: Period = field(default_factory=Period)

    # ------------------------------------------------------------------ #
    # Convenience
    # ------------------------------------------------------------------ #

    @property
    def is_paid(self) -> bool:
        return bool(self.payment_id)

    @property
    def start_city(self) -> str:
        return self.direction.origin.name

    @property
    def end_city(self) -> str:
        return self.direction.destination.name

    # ------------------------------------------------------------------ #
    # JSON constructors
    # ------------------------------------------------------------------ #

    @classmethod
    def from_json(cls, data: dict) -> "Delivery":
        """
        Build a Delivery from a JSON dict.

        Expected keys (export-compatible):
            - "id", "client_id": str
            - "payment_id": str | null (missing → unpaid)
            - "status", "type": enum value ("InProgress") or name ("IN_PROGRESS")
            - "cargo_type": str
            - "direction": {"origin": {"name": ...}, "destination": {"name": ...}}
            - "loading_period" / "arrival_period": {"start": ISO | null, "end": ISO | null}
        """
        direction = data["direction"]
        if not isinstance(direction, dict):
            raise TypeError("deliveries JSON must include 'direction' as a dict with 'origin' and 'destination'")

        payment = data.get("payment_id")

        return cls(
            id=str(data["id"]),
            client_id=str(data["client_id"]),
            payment_id=None if payment is None else str(payment),
            status=DeliveryStatus.parse(data["status"]),
            type=DeliveryType.parse(data["type"]),
            cargo_type=str(data["cargo_type"]),
            direction=Direction(
                origin=City(name=str(direction["origin"]["name"])),
                destination=City(name=str(direction["destination"]["name"])),
            ),
            loading_period=Period.from_json(data.get("loading_period")),
            arrival_period=Period.from_json(data.get("arrival_period")),
        )

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "client_id": self.client_id,
            "payment_id": self.payment_id,
            "status": self.status.value,
            "type": self.type.value,
            "cargo_type": self.cargo_type,
            "direction": {
                "origin": {"name": self.start_city},
                "destination": {"name": self.end_city},
            },
            "loading_period": self.loading_period.to_json(),
            "arrival_period": self.arrival_period.to_json(),
        }


def load_deliveries_from_json_list(json_list: list[dict]) -> List[Delivery]:
    if not isinstance(json_list, list):
        raise TypeError("deliveries JSON must be a list of delivery objects")
    return [Delivery.from_json(rec) for rec in json_list]
