"""Relative Strength Index with Wilder's smoothing"""

from typing import Optional

from ..config.defaults import RSIParams
from ..data.models import IndicatorContext
from ..models.indicators import IndicatorResult, SignalDirection
from .base import Outcome, PriceHistoryCalculator, at_least, at_most, classify
from .series import wilder_rsi

# High RSI is treated as a caution signal, not a buy signal.
RSI_BANDS = (
    at_least(80, "Extremely overbought, pullback risk", SignalDirection.STRONG_BEARISH, 15),
    at_least(70, "Overbought, be cautious", SignalDirection.BEARISH, 30),
    at_most(20, "Extremely oversold, rebound likely", SignalDirection.STRONG_BULLISH, 85),
    at_most(30, "Oversold, watch for entry", SignalDirection.BULLISH, 70),
    at_least(50, "Neutral, leaning bullish", SignalDirection.BULLISH, 60),
)
RSI_FALLBACK = Outcome("Neutral, leaning bearish", SignalDirection.BEARISH, 40)


class RSICalculator(PriceHistoryCalculator):
    """Standard 14-period RSI."""

    name = "RSI"

    def __init__(self, params: Optional[RSIParams] = None):
        self.params = params or RSIParams()

    @property
    def min_history(self) -> int:
        # Needs period + 1 prices to have period changes
        return self.params.period + 1

    def calculate(self, context: IndicatorContext) -> IndicatorResult:
        period = self.params.period
        rsi = wilder_rsi(context.closing_prices, period)
        outcome = classify(rsi, RSI_BANDS, RSI_FALLBACK)

        return self._result(
            rsi,
            outcome,
            f"RSI({period})={rsi:.2f}, {outcome.signal}",
            {"RSI14": rsi},
        )
