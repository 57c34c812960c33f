# flightstats/schema.py

import json
from dataclasses import dataclass
from typing import Dict

import pandas as pd


@dataclass(frozen=True)
class FlightRecord:
    registration: str
    airline_name: str
    origin: str
    destination: str
    scheduled_start: pd.Timestamp
    scheduled_end: pd.Timestamp
    actual_start: pd.Timestamp
    actual_end: pd.Timestamp

    def to_dict(self) -> Dict[str, str]:
        """
        Encodes the record with the dataset's field names.
        The airline is derived from the registration on decode, so it is not written.
        """
        return {
            'registration': self.registration,
            'from': self.origin,
            'to': self.destination,
            'scheduled_start': _format_timestamp(self.scheduled_start),
            'scheduled_end': _format_timestamp(self.scheduled_end),
            'actual_start': _format_timestamp(self.actual_start),
            'actual_end': _format_timestamp(self.actual_end),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


def _format_timestamp(ts: pd.Timestamp) -> str:
    return ts.isoformat(timespec='seconds')
