# src/reports/export.py
from __future__ import annotations

import csv
import logging
import os
from pathlib import Path
from typing import Dict, Iterable, List

from src.queries.outputs import AverageGapsInfo, DeliveryShortInfo, StatusCounts


logger = logging.getLogger(__name__)

SHORT_INFO_COLS = [
    "id", "start_city", "end_city", "client_id", "type",
    "loading_start", "loading_end", "arrival_start", "arrival_end",
    "status", "cargo_type",
]
AVERAGE_GAP_COLS = ["start_city", "end_city", "average_gap_min"]
STATUS_COUNT_COLS = ["status", "count"]


def _write_rows(path: str | Path, cols: List[str], rows: List[dict]) -> str:
    path = Path(path)
    os.makedirs(path.parent, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        if rows:
            w = csv.DictWriter(f, fieldnames=cols)
            w.writeheader()
            w.writerows(rows)
        else:
            csv.writer(f).writerow(["no_data"])
    logger.info("Wrote %d rows to %s", len(rows), path)
    return str(path)


def export_short_infos_csv(infos: Iterable[DeliveryShortInfo], filepath: str | Path) -> str:
    """One row per DeliveryShortInfo; timestamps as ISO strings, missing ones empty."""
    return _write_rows(filepath, SHORT_INFO_COLS, [i.as_row() for i in infos])


def export_average_gaps_csv(gaps: Iterable[AverageGapsInfo], filepath: str | Path) -> str:
    return _write_rows(filepath, AVERAGE_GAP_COLS, [g.as_row() for g in gaps])


def export_status_counts_csv(counts: StatusCounts, filepath: str | Path) -> str:
    # rows follow the declared status order, not dict order
    rows = [
        {"status": status.value, "count": int(n)}
        for status, n in sorted(counts.items(), key=lambda kv: kv[0].ordinal)
    ]
    return _write_rows(filepath, STATUS_COUNT_COLS, rows)


def export_reports(
    dir_path: str | Path,
    *,
    short_infos: Iterable[DeliveryShortInfo],
    average_gaps: Iterable[AverageGapsInfo],
    status_counts: StatusCounts,
) -> Dict[str, str]:
    """
    Write the standard report set into `dir_path`:
      - short_infos.csv
      - average_gaps.csv
      - status_counts.csv
    Returns {report name: written path}.
    """
    base = Path(dir_path)
    return {
        "short_infos": export_short_infos_csv(short_infos, base / "short_infos.csv"),
        "average_gaps": export_average_gaps_csv(average_gaps, base / "average_gaps.csv"),
        "status_counts": export_status_counts_csv(status_counts, base / "status_counts.csv"),
    }
