from dataclasses import dataclass, field
from typing import List, Tuple

from flightstats.config import NO_MISSED_LANDINGS, NO_OVERNIGHT_STAYS
from flightstats.kpis import FlightAggregator, FrequencyCounter, TopKTracker


def top_flights(tracker: TopKTracker) -> List[Tuple[str, int]]:
    """
    Drains the tracker into (registration, duration_minutes) pairs,
    longest first with earlier arrivals ahead on ties.
    """
    return [(flight.registration, duration) for flight, duration in tracker.drain()]


def most_missed_landings_airline(counter: FrequencyCounter) -> str:
    airline = counter.argmax()
    return NO_MISSED_LANDINGS if airline is None else airline


def most_overnight_stays_destination(counter: FrequencyCounter) -> str:
    destination = counter.argmax()
    return NO_OVERNIGHT_STAYS if destination is None else destination


@dataclass
class FlightReport:
    top_flights: List[Tuple[str, int]] = field(default_factory=list)
    missed_landings_airline: str = NO_MISSED_LANDINGS
    overnight_stays_destination: str = NO_OVERNIGHT_STAYS

    def lines(self) -> List[str]:
        """Renders the report as the exact output lines of the command."""
        out = ["Top Three Longest Flights:"]
        for registration, duration in self.top_flights:
            out.append(f"Flight: {registration} Duration: {duration} minutes")
        out.append("Airline with Most Missed Landings:")
        out.append(self.missed_landings_airline)
        out.append("Destination with Most Overnight Stays:")
        out.append(self.overnight_stays_destination)
        return out

    def to_text(self) -> str:
        return "\n".join(self.lines()) + "\n"


def build_report(aggregator: FlightAggregator) -> FlightReport:
    """
    Extracts the final answers from an aggregator.

    This drains the aggregator's top-flights tracker, so call it once per run.
    """
    return FlightReport(
        top_flights=top_flights(aggregator.top_flights),
        missed_landings_airline=most_missed_landings_airline(aggregator.missed_landings),
        overnight_stays_destination=most_overnight_stays_destination(aggregator.overnight_stays),
    )
