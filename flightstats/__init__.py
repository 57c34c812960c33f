"""Batch statistics over a line-delimited log of completed flights."""

from flightstats.errors import FileAccessError, FlightStatsError, ParseError
from flightstats.kpis import FlightAggregator, aggregate_flights
from flightstats.load import load_flights, parse_flight
from flightstats.report import FlightReport, build_report
from flightstats.schema import FlightRecord

__all__ = [
    "FileAccessError",
    "FlightAggregator",
    "FlightRecord",
    "FlightReport",
    "FlightStatsError",
    "ParseError",
    "aggregate_flights",
    "build_report",
    "load_flights",
    "parse_flight",
]
