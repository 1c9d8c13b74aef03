# tests/export_test.py
from __future__ import annotations

import csv
from datetime import datetime

from src.business_objects.common import City, DeliveryStatus, DeliveryType, Direction, Period
from src.business_objects.delivery import Delivery
from src.queries import AverageGapsInfo, DeliveryShortInfo
from src.reports.export import (
    export_average_gaps_csv,
    export_reports,
    export_short_infos_csv,
    export_status_counts_csv,
)


def build_info() -> DeliveryShortInfo:
    d = Delivery(
        id="DL1", client_id="C1", payment_id=None,
        status=DeliveryStatus.IN_PROGRESS, type=DeliveryType.EXPRESS, cargo_type="Food",
        direction=Direction(City("Haifa"), City("Eilat")),
        loading_period=Period(datetime(2025, 1, 6, 8), datetime(2025, 1, 6, 9)),
        arrival_period=Period(),
    )
    return DeliveryShortInfo.from_delivery(d)


def read_rows(path) -> list[list[str]]:
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.reader(f))


def test_short_infos_csv(tmp_path):
    path = export_short_infos_csv([build_info()], tmp_path / "out" / "short.csv")
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows == [{
        "id": "DL1", "start_city": "Haifa", "end_city": "Eilat", "client_id": "C1",
        "type": "Express", "loading_start": "2025-01-06T08:00:00", "loading_end": "2025-01-06T09:00:00",
        "arrival_start": "", "arrival_end": "", "status": "InProgress", "cargo_type": "Food",
    }]


def test_status_counts_follow_declared_order(tmp_path):
    counts = {DeliveryStatus.CANCELLED: 2, DeliveryStatus.CREATED: 1, DeliveryStatus.DONE: 4}
    path = export_status_counts_csv(counts, tmp_path / "status.csv")
    assert read_rows(path) == [["status", "count"], ["Created", "1"], ["Done", "4"], ["Cancelled", "2"]]


def test_empty_result_writes_marker_row(tmp_path):
    path = export_average_gaps_csv([], tmp_path / "gaps.csv")
    assert read_rows(path) == [["no_data"]]


def test_export_reports_writes_all_files(tmp_path):
    paths = export_reports(
        tmp_path,
        short_infos=[build_info()],
        average_gaps=[AverageGapsInfo("Haifa", "Eilat", 100.0 / 3)],
        status_counts={DeliveryStatus.IN_PROGRESS: 1},
    )
    assert set(paths) == {"short_infos", "average_gaps", "status_counts"}
    assert read_rows(paths["average_gaps"]) == [
        ["start_city", "end_city", "average_gap_min"],
        ["Haifa", "Eilat", "33.333"],
    ]
