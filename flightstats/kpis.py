import heapq
import logging
from collections import Counter
from itertools import count
from typing import Hashable, Iterable, List, Optional, Tuple

from flightstats.config import TOP_FLIGHTS_COUNT
from flightstats.preprocess import actual_duration_minutes, has_overnight_stay, is_landing_missed
from flightstats.schema import FlightRecord

logger = logging.getLogger(__name__)


class TopKTracker:
    """
    Keeps the k longest flights seen so far without buffering the whole stream.

    Entries live in a min-heap keyed on (duration, -arrival). The root is the
    shortest duration and, among equal durations, the latest arrival, so that
    is the entry evicted first and earlier arrivals win ties.
    """

    def __init__(self, k: int = TOP_FLIGHTS_COUNT):
        if k < 1:
            raise ValueError(f"k must be at least 1, got {k}")
        self.k = k
        self._heap: List[Tuple[int, int, FlightRecord]] = []
        self._arrivals = count()

    def __len__(self) -> int:
        return len(self._heap)

    def offer(self, flight: FlightRecord, duration: int) -> bool:
        """
        Offers a flight with its duration.

        Returns:
            True if the flight is now held, False if it was rejected.
        """
        entry = (duration, -next(self._arrivals), flight)
        if len(self._heap) < self.k:
            heapq.heappush(self._heap, entry)
            return True
        # Equal to the current minimum does not evict.
        if duration > self._heap[0][0]:
            heapq.heapreplace(self._heap, entry)
            return True
        return False

    def drain(self) -> List[Tuple[FlightRecord, int]]:
        """
        Removes and returns every held flight, longest first.
        Equal durations come out in arrival order. The tracker is empty afterwards.
        """
        ordered = sorted(self._heap, key=lambda entry: (entry[0], entry[1]), reverse=True)
        self._heap = []
        return [(flight, duration) for duration, _, flight in ordered]


class FrequencyCounter:
    """
    Counts keys while remembering the order they were first seen.
    On a tie for the highest count, argmax returns the key inserted first.
    """

    def __init__(self):
        self._counts: Counter = Counter()

    def __len__(self) -> int:
        return len(self._counts)

    def increment(self, key: Hashable) -> int:
        self._counts[key] += 1
        return self._counts[key]

    def count(self, key: Hashable) -> int:
        return self._counts.get(key, 0)

    def items(self) -> List[Tuple[Hashable, int]]:
        return list(self._counts.items())

    def argmax(self) -> Optional[Hashable]:
        if not self._counts:
            return None
        # most_common keeps first-encountered order among equal counts.
        return self._counts.most_common(1)[0][0]


class FlightAggregator:
    """
    Folds flight records into the three run statistics in a single pass.

    Args:
        top_flights: Tracker for the longest flights.
        missed_landings: Counter keyed by airline name.
        overnight_stays: Counter keyed by destination.
    """

    def __init__(
        self,
        top_flights: Optional[TopKTracker] = None,
        missed_landings: Optional[FrequencyCounter] = None,
        overnight_stays: Optional[FrequencyCounter] = None,
    ):
        self.top_flights = top_flights if top_flights is not None else TopKTracker()
        self.missed_landings = missed_landings if missed_landings is not None else FrequencyCounter()
        self.overnight_stays = overnight_stays if overnight_stays is not None else FrequencyCounter()
        self.processed = 0

    def process(self, flight: FlightRecord) -> None:
        self.top_flights.offer(flight, actual_duration_minutes(flight))

        if is_landing_missed(flight):
            self.missed_landings.increment(flight.airline_name)

        if has_overnight_stay(flight):
            self.overnight_stays.increment(flight.destination)

        self.processed += 1

    def process_all(self, flights: Iterable[FlightRecord]) -> int:
        """
        Processes every flight in order.

        Returns:
            The number of flights processed by this call.
        """
        before = self.processed
        for flight in flights:
            self.process(flight)
        folded = self.processed - before
        logger.info("Processed %d flights.", folded)
        return folded


def aggregate_flights(flights: Iterable[FlightRecord]) -> FlightAggregator:
    """Builds a fresh aggregator and folds the whole flight stream into it."""
    aggregator = FlightAggregator()
    aggregator.process_all(flights)
    return aggregator
