# cli.py
import logging
import sys

from flightstats.config import DEFAULT_DATASET_PATH
from flightstats.errors import FlightStatsError
from flightstats.kpis import aggregate_flights
from flightstats.load import load_flights
from flightstats.report import build_report

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if len(argv) > 1:
        print("Usage: flight-stats [<flights.jsonl>]", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    filepath = argv[0] if argv else DEFAULT_DATASET_PATH
    try:
        aggregator = aggregate_flights(load_flights(filepath))
    except FlightStatsError as e:
        logger.error("%s", e)
        return 1

    report = build_report(aggregator)
    sys.stdout.write(report.to_text())
    return 0


if __name__ == "__main__":
    sys.exit(main())
