"""Insider trading activity from SEC Form 4 filings (US market only)"""

from ..data.models import IndicatorContext, InsiderTradingSummary
from ..models.indicators import IndicatorCategory, IndicatorResult, SignalDirection
from .base import IndicatorCalculator, Outcome


def classify_insider_activity(insider: InsiderTradingSummary) -> Outcome:
    net = insider.net_buying_shares
    purchases = insider.purchase_count
    sales = insider.sale_count

    if insider.total_activity < 3 and abs(net) < 5_000:
        return Outcome("Little insider activity, no clear signal", SignalDirection.NEUTRAL, 50)

    if net > 100_000 and purchases > sales * 2:
        return Outcome("Heavy insider buying, strong confidence in outlook",
                       SignalDirection.STRONG_BULLISH, 80)
    if net > 50_000 and purchases > sales:
        return Outcome("Sustained insider buying", SignalDirection.BULLISH, 70)
    if net > 10_000:
        return Outcome("Insiders net buyers, leaning bullish", SignalDirection.BULLISH, 62)
    if net > 0:
        return Outcome("Insiders slight net buyers", SignalDirection.NEUTRAL, 55)

    if net < -100_000 and sales > purchases * 2:
        return Outcome("Heavy insider selling, strongly negative",
                       SignalDirection.STRONG_BEARISH, 25)
    if net < -50_000 and sales > purchases:
        return Outcome("Sustained insider selling", SignalDirection.BEARISH, 35)
    if net < -10_000:
        return Outcome("Insiders net sellers, leaning bearish", SignalDirection.BEARISH, 40)

    return Outcome("Insiders slight net sellers", SignalDirection.NEUTRAL, 45)


class InsiderTradingCalculator(IndicatorCalculator):
    """Net insider buying over the reporting window."""

    name = "InsiderTrading"
    category = IndicatorCategory.CHIP

    def can_calculate(self, context: IndicatorContext) -> bool:
        insider = context.insider_trading
        if insider is None:
            return False
        return bool(insider.recent_transactions) or insider.total_activity > 0

    def calculate(self, context: IndicatorContext) -> IndicatorResult:
        insider = context.insider_trading
        outcome = classify_insider_activity(insider)

        sub_values = {
            "PurchaseCount": insider.purchase_count,
            "SaleCount": insider.sale_count,
            "NetBuyingShares": insider.net_buying_shares,
        }
        parts = []
        if insider.net_buying_value is not None:
            sub_values["NetBuyingValue"] = insider.net_buying_value
            parts.append(f"Net value={insider.net_buying_value / 1_000_000:+,.1f}M USD")

        parts.extend([
            f"{insider.purchase_count} purchases",
            f"{insider.sale_count} sales",
            f"net shares={insider.net_buying_shares:+,.0f}",
            outcome.signal,
        ])

        return self._result(insider.net_buying_shares, outcome, ", ".join(parts), sub_values)
