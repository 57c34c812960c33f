from typing import Optional


class FlightStatsError(Exception):
    """Base class for failures that abort a run."""


class FileAccessError(FlightStatsError):
    """The dataset file is missing or cannot be read."""

    def __init__(self, path, reason: str = "file not found"):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Error opening dataset file {self.path}: {reason}")


class ParseError(FlightStatsError):
    """A line of the dataset could not be decoded into a flight."""

    def __init__(self, reason: str, line_number: Optional[int] = None):
        self.reason = reason
        self.line_number = line_number
        if line_number is None:
            message = f"Invalid flight record: {reason}"
        else:
            message = f"Invalid flight record on line {line_number}: {reason}"
        super().__init__(message)
