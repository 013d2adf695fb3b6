"""
Indicator result models.

Immutable value objects every calculator returns.
"""

from .indicators import IndicatorCategory, IndicatorResult, SignalDirection

__all__ = ["IndicatorCategory", "IndicatorResult", "SignalDirection"]
