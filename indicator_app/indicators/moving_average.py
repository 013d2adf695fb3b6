"""Moving average trend alignment (MA5 / MA20 / MA60)"""

from typing import Optional

from ..config.defaults import MAParams
from ..data.models import IndicatorContext
from ..models.indicators import IndicatorResult, SignalDirection
from .base import Outcome, PriceHistoryCalculator
from .series import simple_moving_average


def classify_alignment(close: float, ma_short: float, ma_mid: float,
                       ma_long: Optional[float]) -> Outcome:
    """
    Classify the ordering of close and the moving averages.

    When the long average is missing only the short/mid pair is compared.
    """
    above_short = close > ma_short
    above_mid = close > ma_mid
    short_above_mid = ma_short > ma_mid

    if ma_long is not None:
        above_long = close > ma_long
        mid_above_long = ma_mid > ma_long

        if above_short and short_above_mid and mid_above_long:
            return Outcome("Bullish alignment: close above rising MA stack",
                           SignalDirection.STRONG_BULLISH, 90)
        if not above_short and not short_above_mid and not mid_above_long:
            return Outcome("Bearish alignment: close below falling MA stack",
                           SignalDirection.STRONG_BEARISH, 10)
        if above_short and above_mid and above_long:
            return Outcome("Above all moving averages, leaning bullish",
                           SignalDirection.BULLISH, 70)
        if not above_short and not above_mid and not above_long:
            return Outcome("Below all moving averages, leaning bearish",
                           SignalDirection.BEARISH, 30)
    else:
        if above_short and short_above_mid:
            return Outcome("Short-term bullish trend", SignalDirection.BULLISH, 75)
        if not above_short and not short_above_mid:
            return Outcome("Short-term bearish trend", SignalDirection.BEARISH, 25)

    if above_mid:
        return Outcome("Mid-term bullish, short-term consolidation", SignalDirection.NEUTRAL, 55)

    return Outcome("Moving averages tangled", SignalDirection.NEUTRAL, 50)


class MovingAverageCalculator(PriceHistoryCalculator):
    """Calculates MA5, MA20 and (when history allows) MA60 and their alignment."""

    name = "MA"

    def __init__(self, params: Optional[MAParams] = None):
        self.params = params or MAParams()

    @property
    def min_history(self) -> int:
        return self.params.mid

    def calculate(self, context: IndicatorContext) -> IndicatorResult:
        closes = context.closing_prices
        latest_close = closes[-1]

        ma_short = simple_moving_average(closes, self.params.short)
        ma_mid = simple_moving_average(closes, self.params.mid)
        ma_long = simple_moving_average(closes, self.params.long)

        outcome = classify_alignment(latest_close, ma_short, ma_mid, ma_long)

        # Key names are fixed; configured windows only change the averages
        sub_values = {"MA5": ma_short, "MA20": ma_mid}
        parts = [
            f"Close {latest_close:.2f}",
            f"MA{self.params.short}={ma_short:.2f}",
            f"MA{self.params.mid}={ma_mid:.2f}",
        ]
        if ma_long is not None:
            sub_values["MA60"] = ma_long
            parts.append(f"MA{self.params.long}={ma_long:.2f}")

        return self._result(ma_mid, outcome, ", ".join(parts), sub_values)
