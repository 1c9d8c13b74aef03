"""
Domain model package for the delivery query layer.

This package defines the records the queries read:
- Delivery
- City, Direction, Period value types

It also exposes the DeliveryStatus / DeliveryType enums from common.py.
"""

from .common import (
    OrderedEnum,
    DeliveryStatus,
    DeliveryType,
    FINISHED_STATUSES,
    City,
    Direction,
    Period,
)
from .delivery import Delivery, load_deliveries_from_json_list

__all__ = [
    # common
    "OrderedEnum",
    "DeliveryStatus",
    "DeliveryType",
    "FINISHED_STATUSES",
    "City",
    "Direction",
    "Period",
    # entities
    "Delivery",
    "load_deliveries_from_json_list",
]
