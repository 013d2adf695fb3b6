"""KD stochastic oscillator (Taiwan convention, 1/3 smoothing)"""

from enum import Enum
from typing import Optional

from ..config.defaults import KDParams
from ..data.models import IndicatorContext
from ..models.indicators import IndicatorResult, SignalDirection
from .base import Outcome, PriceHistoryCalculator
from .series import raw_stochastic_value, stochastic_kd

OVERBOUGHT = 80.0
OVERSOLD = 20.0


class KDCrossover(str, Enum):
    GOLDEN_LOW = "golden_cross_low"
    GOLDEN_HIGH = "golden_cross_high"
    DEATH_HIGH = "death_cross_high"
    DEATH_LOW = "death_cross_low"
    NONE = "none"


def detect_crossover(k: float, d: float, prev_k: float, prev_d: float) -> KDCrossover:
    """K crossing D between the previous and latest bar, split at K = 50."""
    if prev_k <= prev_d and k > d:
        return KDCrossover.GOLDEN_LOW if k < 50 else KDCrossover.GOLDEN_HIGH
    if prev_k >= prev_d and k < d:
        return KDCrossover.DEATH_HIGH if k > 50 else KDCrossover.DEATH_LOW
    return KDCrossover.NONE


CROSSOVER_OUTCOMES = {
    KDCrossover.GOLDEN_LOW: Outcome("KD golden cross at low level, strong buy signal",
                                    SignalDirection.STRONG_BULLISH, 90),
    KDCrossover.GOLDEN_HIGH: Outcome("KD golden cross at high level, leaning bullish",
                                     SignalDirection.BULLISH, 65),
    KDCrossover.DEATH_HIGH: Outcome("KD death cross at high level, strong sell signal",
                                    SignalDirection.STRONG_BEARISH, 10),
    KDCrossover.DEATH_LOW: Outcome("KD death cross at low level, leaning bearish",
                                   SignalDirection.BEARISH, 35),
}


def classify_kd(k: float, d: float, crossover: KDCrossover) -> Outcome:
    if crossover in CROSSOVER_OUTCOMES:
        return CROSSOVER_OUTCOMES[crossover]

    if k > OVERBOUGHT and d > OVERBOUGHT:
        return Outcome("KD overbought, watch for pullback", SignalDirection.BEARISH, 25)
    if k < OVERSOLD and d < OVERSOLD:
        return Outcome("KD oversold, watch for rebound", SignalDirection.BULLISH, 75)
    if k > d:
        return Outcome("K above D, leaning bullish", SignalDirection.BULLISH, 60)

    return Outcome("K below D, leaning bearish", SignalDirection.BEARISH, 40)


class KDCalculator(PriceHistoryCalculator):
    """RSV(9) smoothed into K and D."""

    name = "KD"

    def __init__(self, params: Optional[KDParams] = None):
        self.params = params or KDParams()

    @property
    def min_history(self) -> int:
        return self.params.rsv_period + self.params.k_smooth + self.params.d_smooth

    def _kd(self, highs, lows, closes, end_index: int) -> Optional[tuple[float, float]]:
        return stochastic_kd(highs, lows, closes, end_index, self.params.rsv_period,
                             self.params.k_smooth, self.params.d_smooth)

    def calculate(self, context: IndicatorContext) -> IndicatorResult:
        highs = context.high_prices
        lows = context.low_prices
        closes = context.closing_prices
        last = len(closes) - 1

        k, d = self._kd(highs, lows, closes, last)
        prev_k, prev_d = self._kd(highs, lows, closes, last - 1)
        outcome = classify_kd(k, d, detect_crossover(k, d, prev_k, prev_d))

        rsv = raw_stochastic_value(highs, lows, closes, last, self.params.rsv_period)

        return self._result(
            k,
            outcome,
            f"K={k:.2f}, D={d:.2f}, {outcome.signal}",
            {"K": k, "D": d, "RSV": rsv},
        )
