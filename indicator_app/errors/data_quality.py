"""
Data quality error classifications for market data snapshots.

These exceptions describe problems with the data a provider assembled into an
indicator context, as opposed to faults in the calculations themselves.
"""

from typing import Any, Optional


class DataQualityError(Exception):
    """Base class for problems in a provider-assembled context; the caller may rebuild it."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class TemporalDataError(DataQualityError):
    """Price history is not in ascending chronological order."""

    def __init__(self, message: str, timestamp: Optional[Any] = None,
                 expected_timestamp: Optional[Any] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.timestamp = timestamp
        self.expected_timestamp = expected_timestamp


class MalformedDataError(DataQualityError):
    """A price record breaks a basic OHLCV invariant (negative, not finite, high < low)."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format
