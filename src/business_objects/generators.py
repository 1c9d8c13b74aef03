# src/business_objects/generators.py
from __future__ import annotations

import json
import logging
import os
import random
from datetime import datetime, timedelta
from typing import Iterable, List, Sequence

from .common import City, DeliveryStatus, DeliveryType, Direction, Period
from .config import DeliveryGenConfig
from .delivery import Delivery


logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Public API
# -------------------------------------------------------------------

def make_deliveries(cfg: DeliveryGenConfig) -> List[Delivery]:
    """
    Generate a synthetic delivery set guided by `cfg`.
    The same seed always yields the same list.

    Per delivery:
      1) client, status, type, cargo type
      2) origin/destination from the city pool
      3) loading window spread over the week starting at `day_start`
      4) arrival window after loading end (start may be unknown for open deliveries)
      5) payment id with probability `paid_fraction`
    """
    cfg.validate()
    rng = random.Random(cfg.seed)

    clients = [f"C{i:03d}" for i in range(1, cfg.num_clients + 1)]
    day0 = datetime.fromisoformat(cfg.day_start)

    deliveries: List[Delivery] = []
    for i in range(1, cfg.num_deliveries + 1):
        status = rng.choice(list(DeliveryStatus))
        loading = _gen_loading(rng, cfg, day0)
        deliveries.append(
            Delivery(
                id=f"DL{i:04d}",
                client_id=rng.choice(clients),
                payment_id=f"P{i:04d}" if rng.random() < cfg.paid_fraction else None,
                status=status,
                type=rng.choice(list(DeliveryType)),
                cargo_type=rng.choice(cfg.cargo_types),
                direction=_gen_direction(rng, cfg.cities),
                loading_period=loading,
                arrival_period=_gen_arrival(rng, cfg, loading, status),
            )
        )

    logger.debug("Generated %d deliveries (seed=%d)", len(deliveries), cfg.seed)
    return deliveries


# -------------------------------------------------------------------
# Pieces
# -------------------------------------------------------------------

def _gen_direction(rng: random.Random, cities: Sequence[str]) -> Direction:
    origin = rng.choice(cities)
    others = [c for c in cities if c != origin]
    destination = rng.choice(others) if others else origin
    return Direction(origin=City(origin), destination=City(destination))


def _gen_loading(rng: random.Random, cfg: DeliveryGenConfig, day0: datetime) -> Period:
    # loading starts on one of 7 days, between 06:00 and 18:00, on a 5-minute grid
    start = day0 + timedelta(days=rng.randint(0, 6), minutes=6 * 60 + 5 * rng.randint(0, 144))
    end = start + timedelta(minutes=rng.randint(*cfg.loading_minutes))
    return Period(start=start, end=end)


def _gen_arrival(rng: random.Random, cfg: DeliveryGenConfig, loading: Period, status: DeliveryStatus) -> Period:
    if status != DeliveryStatus.DONE and rng.random() < cfg.missing_arrival_fraction:
        return Period()
    start = loading.end + timedelta(minutes=rng.randint(*cfg.transit_minutes))
    end = start + timedelta(minutes=rng.randint(10, 60)) if status == DeliveryStatus.DONE else None
    return Period(start=start, end=end)


# -------------------------------------------------------------------
# JSON helpers
# -------------------------------------------------------------------

def export_as_jsonable_dicts(deliveries: Iterable[Delivery]) -> List[dict]:
    """Convert deliveries into plain dicts so you can dump them to JSON."""
    return [d.to_json() for d in deliveries]


def save_json_files(deliveries: Iterable[Delivery], output_dir: str) -> str:
    """
    Save a delivery set as `deliveries.json` inside `output_dir`
    (created if it does not exist). Returns the written path.
    """
    data = export_as_jsonable_dicts(deliveries)

    os.makedirs(output_dir, exist_ok=True)
    filename = os.path.join(output_dir, "deliveries.json")
    with open(filename, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    logger.info("Saved %d deliveries to %s", len(data), filename)
    return filename
