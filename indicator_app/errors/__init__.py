"""
Error classification for indicator calculation.

Data quality problems describe a context that cannot be trusted; system
failures describe faults inside the engine or a calculator.
"""

from .data_quality import (
    DataQualityError,
    TemporalDataError,
    MalformedDataError,
)
from .system_failures import (
    SystemFailureError,
    IndicatorCalculationError,
    RegistrationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "TemporalDataError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "IndicatorCalculationError",
    "RegistrationError",
]
