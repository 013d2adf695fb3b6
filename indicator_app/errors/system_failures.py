"""
System failure error classifications.

These exceptions represent faults inside the engine or one of its
calculators rather than problems with the market data itself.
"""

from typing import Any, Optional


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class IndicatorCalculationError(SystemFailureError):
    """Unexpected fault while a calculator was producing its result."""

    def __init__(self, message: str, indicator_name: Optional[str] = None,
                 calculation_input: Optional[dict[str, Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.indicator_name = indicator_name
        self.calculation_input = calculation_input


class RegistrationError(SystemFailureError):
    """Calculator set handed to the engine is inconsistent."""

    def __init__(self, message: str, indicator_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.indicator_name = indicator_name
