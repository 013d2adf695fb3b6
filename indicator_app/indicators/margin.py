"""Margin trading (long margin / short sale) leverage and sentiment"""

from ..data.models import IndicatorContext
from ..models.indicators import IndicatorCategory, IndicatorResult, SignalDirection
from .base import IndicatorCalculator, Outcome


def classify_margin(utilization: float, margin_change: int, short_change: int,
                    short_margin_ratio: float, offset_volume: int) -> Outcome:
    # High short/margin ratio means short-squeeze fuel
    if short_margin_ratio > 30:
        return Outcome("High short/margin ratio, strong short-squeeze potential",
                       SignalDirection.BULLISH, 75)
    if short_margin_ratio > 20:
        return Outcome("Elevated short/margin ratio, watch for short squeeze",
                       SignalDirection.BULLISH, 65)

    if utilization > 80:
        return Outcome("Margin utilization extremely high, retail over-leveraged",
                       SignalDirection.STRONG_BEARISH, 15)
    if utilization > 60:
        return Outcome("Margin utilization high, watch the risk", SignalDirection.BEARISH, 30)

    if margin_change > 1000:
        return Outcome("Margin balance jumped, retail chasing", SignalDirection.BEARISH, 35)
    if margin_change < -1000:
        return Outcome("Margin balance dropped sharply, holdings settling",
                       SignalDirection.BULLISH, 70)

    if short_change > 500:
        return Outcome("Short balance rising, selling pressure building",
                       SignalDirection.BEARISH, 35)

    if offset_volume > 500:
        return Outcome("Heavy margin/short offset, day trading active", SignalDirection.NEUTRAL, 50)

    if utilization < 20:
        return Outcome("Margin utilization low, healthy holdings", SignalDirection.BULLISH, 65)

    return Outcome("Margin and short balances normal", SignalDirection.NEUTRAL, 50)


class MarginIndicatorCalculator(IndicatorCalculator):
    """Margin utilization, balance changes and short/margin ratio."""

    name = "MarginTrading"
    category = IndicatorCategory.CHIP

    def can_calculate(self, context: IndicatorContext) -> bool:
        chips = context.chips
        return chips is not None and chips.margin_balance is not None and chips.margin_balance > 0

    def calculate(self, context: IndicatorContext) -> IndicatorResult:
        chips = context.chips

        margin_balance = chips.margin_balance
        margin_limit = chips.margin_limit or 0
        short_balance = chips.short_balance or 0
        margin_prev = chips.margin_previous_balance if chips.margin_previous_balance is not None else margin_balance
        short_prev = chips.short_previous_balance if chips.short_previous_balance is not None else short_balance
        offset_volume = chips.offset_volume or 0

        utilization = round(margin_balance / margin_limit * 100, 2) if margin_limit > 0 else 0.0
        margin_change = margin_balance - margin_prev
        short_change = short_balance - short_prev
        short_margin_ratio = round(short_balance / margin_balance * 100, 2)

        outcome = classify_margin(utilization, margin_change, short_change,
                                  short_margin_ratio, offset_volume)

        return self._result(
            utilization,
            outcome,
            f"Margin balance={margin_balance:,} lots (change {margin_change:+,}), "
            f"short balance={short_balance:,} lots, short/margin ratio={short_margin_ratio:.2f}%, "
            f"margin utilization={utilization:.2f}%, {outcome.signal}",
            {
                "MarginBalance": margin_balance,
                "MarginChange": margin_change,
                "MarginUtilization": utilization,
                "ShortBalance": short_balance,
                "ShortChange": short_change,
                "ShortMarginRatio": short_margin_ratio,
                "OffsetVolume": offset_volume,
            },
        )
