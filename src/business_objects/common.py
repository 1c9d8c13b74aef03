from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional, Tuple, Type, TypeVar


E = TypeVar("E", bound="OrderedEnum")


class OrderedEnum(str, Enum):
    """
    String-valued enum that also knows its declared position.

    Members compare as strings (lexical), so anything that needs the
    domain order must sort by `ordinal` instead.
    """

    @property
    def ordinal(self) -> int:
        return list(type(self)).index(self)

    @classmethod
    def parse(cls: Type[E], raw: object) -> E:
        """Accept a member, its value ("InProgress") or its name ("IN_PROGRESS")."""
        if isinstance(raw, cls):
            return raw
        text = str(raw)
        for member in cls:
            if text == member.value or text.upper() == member.name:
                return member
        raise ValueError(f"Unknown {cls.__name__} '{raw}'. Allowed: {[m.value for m in cls]}")


class DeliveryStatus(OrderedEnum):
    """Lifecycle of a delivery, in declared order."""
    CREATED = "Created"
    IN_PROGRESS = "InProgress"
    DONE = "Done"
    CANCELLED = "Cancelled"


class DeliveryType(OrderedEnum):
    """Delivery categories."""
    STANDARD = "Standard"
    EXPRESS = "Express"
    REFRIGERATED = "Refrigerated"
    OVERSIZED = "Oversized"


FINISHED_STATUSES = frozenset({DeliveryStatus.DONE, DeliveryStatus.CANCELLED})


@dataclass(frozen=True)
class City:
    name: str


@dataclass(frozen=True)
class Direction:
    """Origin → destination pair of a delivery."""
    origin: City
    destination: City

    def as_tuple(self) -> Tuple[str, str]:
        return (self.origin.name, self.destination.name)


@dataclass(frozen=True)
class Period:
    """
    Time window with optional endpoints.
    Either side may be unknown (None); callers check presence before arithmetic.
    """
    start: Optional[datetime] = None
    end: Optional[datetime] = None

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None

    def duration(self) -> Optional[timedelta]:
        """end - start, or None if an endpoint is missing."""
        if not self.is_complete:
            return None
        return self.end - self.start

    @classmethod
    def from_json(cls, data: Optional[dict]) -> "Period":
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise TypeError("period JSON must be a dict with optional 'start' / 'end' ISO timestamps")
        return cls(start=_parse_ts(data.get("start")), end=_parse_ts(data.get("end")))

    def to_json(self) -> dict:
        return {
            "start": self.start.isoformat() if self.start is not None else None,
            "end": self.end.isoformat() if self.end is not None else None,
        }


def _parse_ts(raw: object) -> Optional[datetime]:
    if raw is None or raw == "":
        return None
    if isinstance(raw, datetime):
        return raw
    try:
        return datetime.fromisoformat(str(raw))
    except ValueError as e:
        raise ValueError(f"Timestamp must be ISO-8601. Got '{raw}'.") from e
