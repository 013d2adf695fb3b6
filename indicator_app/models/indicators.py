"""Data models for indicator calculation results"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class IndicatorCategory(str, Enum):
    """Categories for grouping indicators."""
    TECHNICAL = "Technical"
    FUNDAMENTAL = "Fundamental"
    CHIP = "Chip"


class SignalDirection(str, Enum):
    """Signal direction consumed by the scoring layer."""
    STRONG_BULLISH = "StrongBullish"
    BULLISH = "Bullish"
    NEUTRAL = "Neutral"
    BEARISH = "Bearish"
    STRONG_BEARISH = "StrongBearish"


@dataclass(frozen=True)
class IndicatorResult:
    """
    Result of a single indicator calculation.

    ``sub_values`` keys (e.g. "UpperBand", "K", "Histogram") are matched on by
    downstream consumers; a missing key means the value was not computed.
    """
    name: str
    category: IndicatorCategory
    value: float
    signal: str
    direction: SignalDirection
    score: int
    reason: str
    sub_values: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        if not self.name:
            raise ValueError("Indicator result requires a name")
        if not 0 <= self.score <= 100:
            raise ValueError(f"{self.name} score must be within 0..100, got {self.score}")
        if not self.signal or not self.reason:
            raise ValueError(f"{self.name} result requires non-empty signal and reason")
        object.__setattr__(self, "sub_values", MappingProxyType(dict(self.sub_values)))

    @property
    def is_bullish(self) -> bool:
        return self.direction in (SignalDirection.BULLISH, SignalDirection.STRONG_BULLISH)

    @property
    def is_bearish(self) -> bool:
        return self.direction in (SignalDirection.BEARISH, SignalDirection.STRONG_BEARISH)

    def to_dict(self) -> dict[str, Any]:
        """Plain representation for the report layer."""
        return {
            "name": self.name,
            "category": self.category.value,
            "value": self.value,
            "sub_values": dict(self.sub_values),
            "signal": self.signal,
            "direction": self.direction.value,
            "score": self.score,
            "reason": self.reason,
        }
