from typing import Mapping, Optional

from flightstats.config import UNKNOWN_AIRLINE, load_airline_table


def lookup_airline(registration: str, table: Optional[Mapping[str, str]] = None) -> str:
    """Resolves the operating airline for an aircraft registration.

    Unknown registrations resolve to UNKNOWN_AIRLINE rather than failing.
    """
    if table is None:
        table = load_airline_table()
    return table.get(registration.strip().upper(), UNKNOWN_AIRLINE)
