"""Utility functions for loading delivery sets and configuring script output."""

import json
import logging
from pathlib import Path
from typing import List

from src.business_objects.delivery import Delivery, load_deliveries_from_json_list


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_deliveries(base_dir: str = "data/sample") -> List[Delivery]:
    """
    Load deliveries from `<base_dir>/deliveries.json` (as written by save_json_files).
    """
    base = Path(base_dir)
    if not base.exists():
        raise FileNotFoundError(f"{base} not found")

    with (base / "deliveries.json").open(encoding="utf-8") as f:
        data = json.load(f)
    return load_deliveries_from_json_list(data)
