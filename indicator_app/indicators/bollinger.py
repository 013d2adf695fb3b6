"""Bollinger Bands (MA20 +/- 2 population standard deviations)"""

from typing import Optional

from ..config.defaults import BollingerParams
from ..data.models import IndicatorContext
from ..models.indicators import IndicatorResult, SignalDirection
from .base import Outcome, PriceHistoryCalculator
from .series import population_std

SQUEEZE_BANDWIDTH = 5.0


def classify_position(close: float, upper: float, lower: float,
                      percent_b: float, bandwidth: float) -> Outcome:
    if close >= upper:
        return Outcome("Broke above upper band, possibly overheated", SignalDirection.BEARISH, 25)
    if close <= lower:
        return Outcome("Broke below lower band, possibly oversold", SignalDirection.BULLISH, 75)
    if percent_b > 90:
        return Outcome("Near upper band, watch resistance", SignalDirection.BEARISH, 35)
    if percent_b < 10:
        return Outcome("Near lower band, watch support", SignalDirection.BULLISH, 65)
    if bandwidth < SQUEEZE_BANDWIDTH:
        return Outcome("Bands squeezing, breakout may follow", SignalDirection.NEUTRAL, 50)
    if percent_b > 50:
        return Outcome("Above middle band, leaning bullish", SignalDirection.BULLISH, 60)

    return Outcome("Below middle band, leaning bearish", SignalDirection.BEARISH, 40)


class BollingerBandCalculator(PriceHistoryCalculator):
    """Middle, upper and lower bands with bandwidth and %B."""

    name = "BollingerBands"

    def __init__(self, params: Optional[BollingerParams] = None):
        self.params = params or BollingerParams()

    @property
    def min_history(self) -> int:
        return self.params.period

    def calculate(self, context: IndicatorContext) -> IndicatorResult:
        closes = context.closing_prices
        latest_close = closes[-1]

        window = closes[-self.params.period:]
        middle = sum(window) / len(window)
        std_dev = population_std(window, middle)

        upper = middle + self.params.multiplier * std_dev
        lower = middle - self.params.multiplier * std_dev
        width = upper - lower

        bandwidth = width / middle * 100.0 if middle > 0 else 0.0
        percent_b = (latest_close - lower) / width * 100.0 if width > 0 else 50.0

        outcome = classify_position(latest_close, upper, lower, percent_b, bandwidth)

        return self._result(
            percent_b,
            outcome,
            f"Upper={upper:.2f}, Middle={middle:.2f}, Lower={lower:.2f}, "
            f"%B={percent_b:.1f}%, {outcome.signal}",
            {
                "UpperBand": upper,
                "MiddleBand": middle,
                "LowerBand": lower,
                "Bandwidth": bandwidth,
                "%B": percent_b,
            },
        )
