# tests/business_objects_test.py
from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from src.business_objects import (
    City,
    Delivery,
    DeliveryStatus,
    DeliveryType,
    Direction,
    Period,
    load_deliveries_from_json_list,
)


def build_record(**overrides) -> dict:
    rec = {
        "id": "DL0001",
        "client_id": "C001",
        "payment_id": "P0001",
        "status": "InProgress",
        "type": "Express",
        "cargo_type": "Food",
        "direction": {"origin": {"name": "Haifa"}, "destination": {"name": "Eilat"}},
        "loading_period": {"start": "2025-01-06T08:00:00", "end": "2025-01-06T09:00:00"},
        "arrival_period": {"start": "2025-01-06T14:00:00", "end": None},
    }
    rec.update(overrides)
    return rec


# ───────────────────────── enums ───────────────────────── #

def test_status_ordinal_follows_declaration():
    assert [s.ordinal for s in DeliveryStatus] == [0, 1, 2, 3]
    assert DeliveryStatus.CREATED.ordinal < DeliveryStatus.IN_PROGRESS.ordinal < DeliveryStatus.DONE.ordinal
    # lexical order would put "Cancelled" first
    assert min(DeliveryStatus, key=lambda s: s.ordinal) is DeliveryStatus.CREATED


def test_enum_parse_by_value_or_name():
    assert DeliveryStatus.parse("InProgress") is DeliveryStatus.IN_PROGRESS
    assert DeliveryStatus.parse("in_progress") is DeliveryStatus.IN_PROGRESS
    assert DeliveryType.parse(DeliveryType.OVERSIZED) is DeliveryType.OVERSIZED
    with pytest.raises(ValueError):
        DeliveryType.parse("Teleport")


# ───────────────────────── value types ───────────────────────── #

def test_period_duration_and_missing_endpoints():
    t = datetime(2025, 1, 6, 8, 0)
    assert Period(t, t + timedelta(minutes=45)).duration() == timedelta(minutes=45)
    assert Period(t, None).duration() is None
    assert Period().is_complete is False


def test_value_types_compare_structurally():
    assert Direction(City("A"), City("B")) == Direction(City("A"), City("B"))
    assert Direction(City("A"), City("B")).as_tuple() == ("A", "B")
    assert hash(City("A")) == hash(City("A"))


# ───────────────────────── JSON ───────────────────────── #

def test_delivery_from_json():
    d = Delivery.from_json(build_record())
    assert d.id == "DL0001"
    assert d.status is DeliveryStatus.IN_PROGRESS
    assert d.type is DeliveryType.EXPRESS
    assert (d.start_city, d.end_city) == ("Haifa", "Eilat")
    assert d.loading_period.start == datetime(2025, 1, 6, 8, 0)
    assert d.arrival_period.end is None
    assert d.is_paid


def test_delivery_json_round_trip():
    rec = build_record()
    assert Delivery.from_json(rec).to_json() == rec


def test_unpaid_and_missing_periods():
    d = Delivery.from_json(build_record(payment_id=None, arrival_period=None))
    assert not d.is_paid
    assert d.arrival_period == Period()
    assert not Delivery.from_json(build_record(payment_id="")).is_paid


def test_from_json_errors():
    rec = build_record()
    del rec["client_id"]
    with pytest.raises(KeyError):
        Delivery.from_json(rec)
    with pytest.raises(TypeError):
        Delivery.from_json(build_record(direction="Haifa-Eilat"))
    with pytest.raises(ValueError):
        Delivery.from_json(build_record(loading_period={"start": "yesterday", "end": None}))
    with pytest.raises(ValueError):
        Delivery.from_json(build_record(status="Lost"))


def test_load_list_preserves_order():
    recs = [build_record(id=f"DL{i}") for i in (3, 1, 2)]
    assert [d.id for d in load_deliveries_from_json_list(recs)] == ["DL3", "DL1", "DL2"]
    with pytest.raises(TypeError):
        load_deliveries_from_json_list({"id": "DL1"})
