"""Valuation ratios: P/E, P/B and dividend yield"""

from typing import Optional

from ..data.models import IndicatorContext
from ..models.indicators import IndicatorCategory, IndicatorResult, SignalDirection
from .base import IndicatorCalculator, Outcome, at_most, below, classify

PE_BANDS = (
    below(0, "Negative P/E, company is loss-making", SignalDirection.STRONG_BEARISH, 20),
    below(10, "P/E low, stock relatively cheap", SignalDirection.BULLISH, 70),
    below(15, "P/E reasonable to low", SignalDirection.BULLISH, 65),
    below(20, "P/E reasonable", SignalDirection.NEUTRAL, 55),
    below(30, "P/E elevated, watch valuation risk", SignalDirection.BEARISH, 40),
    below(50, "P/E high", SignalDirection.BEARISH, 35),
)
PE_FALLBACK = Outcome("P/E far too high, heavy valuation risk", SignalDirection.STRONG_BEARISH, 25)

PB_BANDS = (
    below(0.5, "P/B extremely low, possible asset value", SignalDirection.BULLISH, 70),
    below(1.0, "Trading below book value, relatively cheap", SignalDirection.BULLISH, 65),
    below(1.5, "P/B reasonable", SignalDirection.NEUTRAL, 55),
    below(3.0, "P/B somewhat high", SignalDirection.NEUTRAL, 45),
    below(5.0, "P/B high, market pays a premium", SignalDirection.BEARISH, 38),
)
PB_FALLBACK = Outcome("P/B far too high, expensive valuation", SignalDirection.BEARISH, 30)

DIVIDEND_BANDS = (
    at_most(0, "No dividend", SignalDirection.BEARISH, 30),
    below(2, "Dividend yield low", SignalDirection.NEUTRAL, 45),
    below(4, "Dividend yield moderate", SignalDirection.NEUTRAL, 55),
    below(6, "Dividend yield attractive", SignalDirection.BULLISH, 65),
    below(8, "High dividend yield, generous payout", SignalDirection.BULLISH, 72),
)
DIVIDEND_FALLBACK = Outcome("Dividend yield extremely high, check sustainability",
                            SignalDirection.BULLISH, 68)


def resolve_pb_ratio(raw: float, latest_close: Optional[float]) -> float:
    """
    Return the P/B ratio, reinterpreting ``raw`` as book value per share when
    it is smaller than the latest close and close / raw is a plausible ratio.

    Some upstream sources publish book value per share in the P/B field.
    """
    if latest_close is not None and latest_close > 0 and 0 < raw < latest_close:
        computed = latest_close / raw
        if 0.1 < computed < 200:
            return computed
    return raw


class PERatioCalculator(IndicatorCalculator):
    """Price to earnings."""

    name = "PERatio"
    category = IndicatorCategory.FUNDAMENTAL

    def can_calculate(self, context: IndicatorContext) -> bool:
        fund = context.fundamentals
        return fund is not None and fund.pe_ratio is not None and fund.pe_ratio > 0

    def calculate(self, context: IndicatorContext) -> IndicatorResult:
        fund = context.fundamentals
        pe = fund.pe_ratio
        outcome = classify(pe, PE_BANDS, PE_FALLBACK)

        sub_values = {"PERatio": pe}
        details = []
        if fund.trailing_eps is not None:
            sub_values["TrailingEPS"] = fund.trailing_eps
            details.append(f"EPS={fund.trailing_eps:.2f}")
        if fund.eps_data_period:
            details.append(fund.eps_data_period)

        reason = f"P/E={pe:.2f}"
        if details:
            reason += f" ({', '.join(details)})"
        reason += f", {outcome.signal}"

        return self._result(pe, outcome, reason, sub_values)


class PBRatioCalculator(IndicatorCalculator):
    """Price to book."""

    name = "PBRatio"
    category = IndicatorCategory.FUNDAMENTAL

    def can_calculate(self, context: IndicatorContext) -> bool:
        fund = context.fundamentals
        return fund is not None and fund.pb_ratio is not None and fund.pb_ratio > 0

    def calculate(self, context: IndicatorContext) -> IndicatorResult:
        pb = resolve_pb_ratio(context.fundamentals.pb_ratio, context.latest_close)
        outcome = classify(pb, PB_BANDS, PB_FALLBACK)

        return self._result(pb, outcome, f"P/B={pb:.2f}, {outcome.signal}", {"PBRatio": pb})


class DividendYieldCalculator(IndicatorCalculator):
    """Cash dividend yield in percent; zero is a valid reading."""

    name = "DividendYield"
    category = IndicatorCategory.FUNDAMENTAL

    def can_calculate(self, context: IndicatorContext) -> bool:
        fund = context.fundamentals
        return fund is not None and fund.dividend_yield is not None

    def calculate(self, context: IndicatorContext) -> IndicatorResult:
        dy = context.fundamentals.dividend_yield
        outcome = classify(dy, DIVIDEND_BANDS, DIVIDEND_FALLBACK)

        return self._result(dy, outcome, f"Dividend yield={dy:.2f}%, {outcome.signal}",
                            {"DividendYield": dy})
