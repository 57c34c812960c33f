import json
import logging
import os
from pathlib import Path
from typing import Callable, Iterator, Optional, Tuple, Union

import pandas as pd

from flightstats.airlines import lookup_airline
from flightstats.errors import FileAccessError, ParseError
from flightstats.schema import FlightRecord

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    'registration', 'from', 'to',
    'scheduled_start', 'scheduled_end', 'actual_start', 'actual_end',
)
TIMESTAMP_FIELDS = ('scheduled_start', 'scheduled_end', 'actual_start', 'actual_end')


def parse_timestamp(value, field: str, line_number: Optional[int] = None) -> pd.Timestamp:
    """
    Parses an ISO-8601 timestamp that carries its own UTC offset.

    Args:
        value: The raw JSON value.
        field: Field name, used in error messages.
        line_number: Line the value came from, if known.

    Returns:
        A timezone-aware pandas Timestamp in the offset given by the input.
    """
    if not isinstance(value, str):
        raise ParseError(f"'{field}' must be a string, got {type(value).__name__}", line_number)
    try:
        ts = pd.to_datetime(value, format='ISO8601')
    except (ValueError, TypeError) as exc:
        raise ParseError(f"'{field}' is not an ISO-8601 timestamp: {value!r}", line_number) from exc

    if pd.isna(ts):
        raise ParseError(f"'{field}' is not an ISO-8601 timestamp: {value!r}", line_number)
    if ts.tzinfo is None:
        raise ParseError(f"'{field}' has no UTC offset: {value!r}", line_number)
    return ts


def parse_flight(
    line: str,
    line_number: Optional[int] = None,
    lookup: Callable[[str], str] = lookup_airline,
) -> FlightRecord:
    """
    Decodes one JSON line into a FlightRecord.

    Args:
        line: A single JSON object as text.
        line_number: 1-based position in the dataset, for error reporting.
        lookup: Resolves the airline name from the registration.

    Returns:
        The decoded record. Nothing partial is returned: any bad field raises ParseError.
    """
    try:
        data = json.loads(line)
    except json.JSONDecodeError as exc:
        raise ParseError(f"invalid JSON ({exc.msg})", line_number) from exc

    if not isinstance(data, dict):
        raise ParseError(f"expected a JSON object, got {type(data).__name__}", line_number)

    missing = [name for name in REQUIRED_FIELDS if name not in data]
    if missing:
        raise ParseError(f"missing field(s): {', '.join(missing)}", line_number)

    for name in ('registration', 'from', 'to'):
        if not isinstance(data[name], str):
            raise ParseError(f"'{name}' must be a string, got {type(data[name]).__name__}", line_number)

    times = {name: parse_timestamp(data[name], name, line_number) for name in TIMESTAMP_FIELDS}

    return FlightRecord(
        registration=data['registration'],
        airline_name=lookup(data['registration']),
        origin=data['from'],
        destination=data['to'],
        scheduled_start=times['scheduled_start'],
        scheduled_end=times['scheduled_end'],
        actual_start=times['actual_start'],
        actual_end=times['actual_end'],
    )


def iter_lines(path: Union[str, Path]) -> Iterator[Tuple[int, str]]:
    """
    Lazily yields (line_number, text) pairs from a UTF-8 text file.
    The trailing newline is removed; nothing else is stripped.
    """
    if not os.path.exists(path):
        raise FileAccessError(path, "file not found")
    if not os.path.isfile(path):
        raise FileAccessError(path, "not a regular file")

    try:
        handle = open(path, 'rb')
    except OSError as exc:
        raise FileAccessError(path, exc.strerror or str(exc)) from exc

    with handle:
        try:
            for line_number, raw in enumerate(handle, start=1):
                try:
                    line = raw.decode('utf-8')
                except UnicodeDecodeError as exc:
                    raise ParseError("line is not valid UTF-8 text", line_number) from exc
                yield line_number, line.rstrip('\r\n')
        except OSError as exc:
            raise FileAccessError(path, exc.strerror or str(exc)) from exc


def load_flights(
    path: Union[str, Path],
    lookup: Callable[[str], str] = lookup_airline,
) -> Iterator[FlightRecord]:
    """
    Streams flight records from a line-delimited JSON file.

    Args:
        path: The dataset file.
        lookup: Resolves the airline name from the registration.

    Returns:
        A generator of FlightRecord; the first malformed line raises ParseError.
    """
    logger.info("Loading flights from: %s", path)
    for line_number, line in iter_lines(path):
        flight = parse_flight(line, line_number, lookup)
        logger.debug("Decoded line %d: %s", line_number, flight.registration)
        yield flight
