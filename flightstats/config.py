# flightstats/config.py

import json
import os
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

PROJECT_ROOT = Path(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
DEFAULT_DATASET_PATH = PROJECT_ROOT / "var" / "input.jsonl"
AIRLINES_PATH = Path(__file__).resolve().parent / "data" / "airlines.json"

# A landing counts as missed only when it is strictly later than this.
LANDING_THRESHOLD_MINUTES = 5
TOP_FLIGHTS_COUNT = 3

NO_MISSED_LANDINGS = "No missed landings found."
NO_OVERNIGHT_STAYS = "No flights with overnight stays found."
UNKNOWN_AIRLINE = "Unknown Airline"


@lru_cache(maxsize=None)
def load_airline_table(path: Optional[Union[str, Path]] = None) -> Mapping[str, str]:
    """
    Loads the registration -> airline name table.

    Args:
        path: Optional JSON file overriding the packaged table.

    Returns:
        A read-only mapping keyed by upper-cased registration, shared by every caller.
    """
    table_path = Path(path) if path else AIRLINES_PATH
    with table_path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    return MappingProxyType({str(reg).strip().upper(): str(name) for reg, name in data.items()})
