"""Shared fixtures for flightstats tests."""

import pandas as pd
import pytest

from flightstats.schema import FlightRecord


def build_flight(
    registration="TEST-REG",
    airline_name="Test Airline",
    origin="Test Airport From",
    destination="Test Airport To",
    scheduled_start="2023-01-01T10:00:00+00:00",
    scheduled_end="2023-01-01T12:00:00+00:00",
    actual_start="2023-01-01T10:30:00+00:00",
    actual_end="2023-01-01T12:00:00+00:00",
):
    return FlightRecord(
        registration=registration,
        airline_name=airline_name,
        origin=origin,
        destination=destination,
        scheduled_start=pd.Timestamp(scheduled_start),
        scheduled_end=pd.Timestamp(scheduled_end),
        actual_start=pd.Timestamp(actual_start),
        actual_end=pd.Timestamp(actual_end),
    )


def build_flight_with_duration(minutes, registration="TEST-REG", **kwargs):
    """On-time flight whose actual duration is exactly `minutes`."""
    start = pd.Timestamp("2023-01-01T10:00:00+00:00")
    end = start + pd.Timedelta(minutes=minutes)
    return build_flight(
        registration=registration,
        scheduled_start=start.isoformat(),
        scheduled_end=end.isoformat(),
        actual_start=start.isoformat(),
        actual_end=end.isoformat(),
        **kwargs,
    )


@pytest.fixture
def make_flight():
    return build_flight


@pytest.fixture
def make_flight_with_duration():
    return build_flight_with_duration


@pytest.fixture
def write_jsonl(tmp_path):
    """Writes lines to a dataset file and returns its path."""

    def _write(lines, name="input.jsonl"):
        path = tmp_path / name
        path.write_text("\n".join(lines), encoding="utf-8")
        return path

    return _write
