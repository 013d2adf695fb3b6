"""
Calculator contract shared by every indicator.

A calculator is a pure function of an IndicatorContext: ``can_calculate`` is a
cheap data-sufficiency check that never raises, and ``calculate`` is only
invoked after it returned True.
"""

from abc import ABC, abstractmethod
from typing import Callable, Iterable, Mapping, NamedTuple

from ..data.models import IndicatorContext
from ..models.indicators import IndicatorCategory, IndicatorResult, SignalDirection


class Outcome(NamedTuple):
    """Classification of an indicator reading."""
    signal: str
    direction: SignalDirection
    score: int


class Band(NamedTuple):
    """One row of an ordered band table."""
    applies: Callable[[float], bool]
    outcome: Outcome


def below(limit: float, signal: str, direction: SignalDirection, score: int) -> Band:
    return Band(lambda value: value < limit, Outcome(signal, direction, score))


def at_most(limit: float, signal: str, direction: SignalDirection, score: int) -> Band:
    return Band(lambda value: value <= limit, Outcome(signal, direction, score))


def above(limit: float, signal: str, direction: SignalDirection, score: int) -> Band:
    return Band(lambda value: value > limit, Outcome(signal, direction, score))


def at_least(limit: float, signal: str, direction: SignalDirection, score: int) -> Band:
    return Band(lambda value: value >= limit, Outcome(signal, direction, score))


def equal_to(target: float, signal: str, direction: SignalDirection, score: int) -> Band:
    return Band(lambda value: value == target, Outcome(signal, direction, score))


def classify(value: float, bands: Iterable[Band], fallback: Outcome) -> Outcome:
    """Return the outcome of the first band that applies, else the fallback."""
    for band in bands:
        if band.applies(value):
            return band.outcome
    return fallback


class IndicatorCalculator(ABC):
    """Strategy interface for a single indicator."""

    name: str = ""
    category: IndicatorCategory

    @abstractmethod
    def can_calculate(self, context: IndicatorContext) -> bool:
        """Whether the context carries enough data for this indicator."""

    @abstractmethod
    def calculate(self, context: IndicatorContext) -> IndicatorResult:
        """Compute the indicator; only valid when can_calculate returned True."""

    def _result(self, value: float, outcome: Outcome, reason: str,
                sub_values: Mapping[str, float]) -> IndicatorResult:
        return IndicatorResult(
            name=self.name,
            category=self.category,
            value=value,
            signal=outcome.signal,
            direction=outcome.direction,
            score=outcome.score,
            reason=reason,
            sub_values=sub_values,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class PriceHistoryCalculator(IndicatorCalculator):
    """Technical indicator that only needs a minimum number of daily prices."""

    category = IndicatorCategory.TECHNICAL

    @property
    @abstractmethod
    def min_history(self) -> int:
        """Fewest daily prices the indicator needs."""

    def can_calculate(self, context: IndicatorContext) -> bool:
        return len(context.prices) >= self.min_history
