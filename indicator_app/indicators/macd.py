"""MACD (Moving Average Convergence Divergence) with crossover detection"""

from enum import Enum
from typing import Optional

from ..config.defaults import MACDParams
from ..data.models import IndicatorContext
from ..models.indicators import IndicatorResult, SignalDirection
from .base import Outcome, PriceHistoryCalculator
from .series import macd


class Crossover(str, Enum):
    GOLDEN = "golden_cross"
    DEATH = "death_cross"
    NONE = "none"


def detect_crossover(macd_value: float, signal: float,
                     previous: Optional[tuple[float, float, float]]) -> Crossover:
    """Compare the latest MACD/signal pair with the previous bar's pair."""
    if previous is None:
        return Crossover.NONE

    prev_macd, prev_signal, _ = previous
    if prev_macd <= prev_signal and macd_value > signal:
        return Crossover.GOLDEN
    if prev_macd >= prev_signal and macd_value < signal:
        return Crossover.DEATH
    return Crossover.NONE


def classify_macd(macd_value: float, histogram: float, crossover: Crossover) -> Outcome:
    if crossover == Crossover.GOLDEN:
        return Outcome("MACD golden cross, buy signal", SignalDirection.STRONG_BULLISH, 85)
    if crossover == Crossover.DEATH:
        return Outcome("MACD death cross, sell signal", SignalDirection.STRONG_BEARISH, 15)

    if macd_value > 0 and histogram > 0:
        return Outcome("MACD positive, momentum strengthening", SignalDirection.BULLISH, 70)
    if macd_value > 0 and histogram < 0:
        return Outcome("MACD positive, momentum fading", SignalDirection.NEUTRAL, 55)
    if macd_value < 0 and histogram < 0:
        return Outcome("MACD negative, downside momentum strengthening", SignalDirection.BEARISH, 30)
    if macd_value < 0 and histogram > 0:
        return Outcome("MACD negative, downside momentum fading", SignalDirection.NEUTRAL, 45)

    return Outcome("MACD neutral", SignalDirection.NEUTRAL, 50)


class MACDCalculator(PriceHistoryCalculator):
    """EMA(12) - EMA(26) with a 9-period signal line."""

    name = "MACD"

    def __init__(self, params: Optional[MACDParams] = None):
        self.params = params or MACDParams()

    @property
    def min_history(self) -> int:
        # One bar beyond the first computable value so the previous bar exists
        return self.params.slow + self.params.signal

    def _macd(self, closes) -> Optional[tuple[float, float, float]]:
        return macd(closes, self.params.fast, self.params.slow, self.params.signal)

    def calculate(self, context: IndicatorContext) -> IndicatorResult:
        closes = context.closing_prices
        macd_value, signal, histogram = self._macd(closes)

        crossover = detect_crossover(macd_value, signal, self._macd(closes[:-1]))
        outcome = classify_macd(macd_value, histogram, crossover)

        return self._result(
            macd_value,
            outcome,
            f"MACD={macd_value:.4f}, Signal={signal:.4f}, "
            f"Histogram={histogram:.4f}, {outcome.signal}",
            {
                "MACD": macd_value,
                "Signal": signal,
                "Histogram": histogram,
                "DIF": macd_value,  # DIF naming convention for the MACD line
            },
        )
