from flightstats.config import LANDING_THRESHOLD_MINUTES
from flightstats.schema import FlightRecord


def _elapsed_minutes(start, end) -> int:
    # Whole minutes, floored: 119.5 minutes counts as 119.
    return int((end - start).total_seconds() // 60)


def actual_duration_minutes(flight: FlightRecord) -> int:
    """
    Calculates the actual time in the air, from actual_start to actual_end.

    Args:
        flight: The flight record.

    Returns:
        The full elapsed duration in whole minutes (days and hours included).
    """
    return _elapsed_minutes(flight.actual_start, flight.actual_end)


def arrival_delay_minutes(flight: FlightRecord) -> int:
    """Signed arrival delay in whole minutes; negative for early arrivals."""
    return _elapsed_minutes(flight.scheduled_end, flight.actual_end)


def is_landing_missed(flight: FlightRecord) -> bool:
    """
    A landing is missed when the flight arrives more than LANDING_THRESHOLD_MINUTES
    after its scheduled arrival. Arriving exactly on the threshold is not a miss.
    """
    return arrival_delay_minutes(flight) > LANDING_THRESHOLD_MINUTES


def has_overnight_stay(flight: FlightRecord) -> bool:
    """
    True when the actual arrival falls on a later calendar date than the scheduled
    arrival. Each date is taken in the timestamp's own UTC offset.
    """
    scheduled_date = flight.scheduled_end.strftime('%Y-%m-%d')
    actual_date = flight.actual_end.strftime('%Y-%m-%d')
    return actual_date > scheduled_date
