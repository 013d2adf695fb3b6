"""Earnings: EPS level and monthly revenue growth"""

from ..data.models import IndicatorContext
from ..models.indicators import IndicatorCategory, IndicatorResult, SignalDirection
from .base import IndicatorCalculator, Outcome, below, classify

EPS_BANDS = (
    below(0, "Negative EPS, company is losing money", SignalDirection.STRONG_BEARISH, 20),
    below(0.5, "EPS low, weak profitability", SignalDirection.BEARISH, 35),
    below(1.0, "EPS acceptable", SignalDirection.NEUTRAL, 45),
    below(2.0, "EPS moderate", SignalDirection.NEUTRAL, 55),
    below(5.0, "EPS solid, steady profitability", SignalDirection.BULLISH, 65),
    below(10.0, "EPS excellent, strong profitability", SignalDirection.BULLISH, 72),
)
EPS_FALLBACK = Outcome("EPS outstanding", SignalDirection.STRONG_BULLISH, 78)


def classify_revenue_growth(yoy: float, mom: float) -> Outcome:
    if yoy > 20 and mom > 0:
        return Outcome("Revenue growing strongly year over year and month over month",
                       SignalDirection.STRONG_BULLISH, 80)
    if yoy > 10:
        return Outcome("Revenue up double digits year over year", SignalDirection.BULLISH, 70)
    if yoy > 0 and mom > 0:
        return Outcome("Revenue up year over year and month over month",
                       SignalDirection.BULLISH, 62)
    if yoy > 0:
        return Outcome("Revenue up year over year", SignalDirection.NEUTRAL, 55)
    if yoy > -10:
        return Outcome("Revenue slightly down", SignalDirection.NEUTRAL, 45)
    if yoy > -20:
        return Outcome("Revenue clearly declining", SignalDirection.BEARISH, 35)

    return Outcome("Revenue falling sharply", SignalDirection.STRONG_BEARISH, 25)


class EPSCalculator(IndicatorCalculator):
    """Earnings per share."""

    name = "EPS"
    category = IndicatorCategory.FUNDAMENTAL

    def can_calculate(self, context: IndicatorContext) -> bool:
        fund = context.fundamentals
        return fund is not None and fund.eps is not None

    def calculate(self, context: IndicatorContext) -> IndicatorResult:
        fund = context.fundamentals
        eps = fund.eps
        outcome = classify(eps, EPS_BANDS, EPS_FALLBACK)

        sub_values = {"EPS": eps}
        if fund.operating_income is not None:
            sub_values["OperatingIncome"] = fund.operating_income
        if fund.net_income is not None:
            sub_values["NetIncome"] = fund.net_income

        reason = f"EPS={eps:.2f}"
        if fund.fiscal_period:
            reason += f" ({fund.fiscal_period})"

        return self._result(eps, outcome, f"{reason}, {outcome.signal}", sub_values)


class RevenueGrowthCalculator(IndicatorCalculator):
    """Monthly revenue YoY and MoM growth; the primary value is YoY."""

    name = "RevenueGrowth"
    category = IndicatorCategory.FUNDAMENTAL

    def can_calculate(self, context: IndicatorContext) -> bool:
        fund = context.fundamentals
        return (fund is not None
                and fund.monthly_revenue is not None
                and fund.revenue_yoy is not None)

    def calculate(self, context: IndicatorContext) -> IndicatorResult:
        fund = context.fundamentals
        yoy = fund.revenue_yoy
        has_mom = fund.revenue_mom is not None
        mom = fund.revenue_mom if has_mom else 0.0
        revenue = fund.monthly_revenue

        outcome = classify_revenue_growth(yoy, mom)

        sub_values = {"Revenue": revenue, "RevenueYoY": yoy}
        growth = f"YoY={yoy:.1f}%"
        if has_mom:
            sub_values["RevenueMoM"] = mom
            growth += f", MoM={mom:.1f}%"

        # Providers format revenue with their own units and period
        label = fund.revenue_label or f"Revenue={revenue:.0f}"

        return self._result(yoy, outcome, f"{label}, {growth}, {outcome.signal}", sub_values)
