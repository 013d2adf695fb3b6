"""Foreign investor holding level"""

from ..data.models import IndicatorContext
from ..models.indicators import IndicatorCategory, IndicatorResult, SignalDirection
from .base import IndicatorCalculator, Outcome, above, classify

FOREIGN_BANDS = (
    above(70, "Foreign holding very high, strong institutional backing but watch selling pressure",
          SignalDirection.NEUTRAL, 55),
    above(50, "Foreign holding above half, high institutional recognition",
          SignalDirection.BULLISH, 70),
    above(30, "Foreign holding substantial, follow institutional moves",
          SignalDirection.BULLISH, 65),
    above(15, "Foreign holding moderate", SignalDirection.NEUTRAL, 50),
    above(5, "Foreign holding low", SignalDirection.NEUTRAL, 45),
)
FOREIGN_FALLBACK = Outcome("Foreign holding very low, little institutional interest",
                           SignalDirection.BEARISH, 35)


class ForeignHoldingCalculator(IndicatorCalculator):
    """Foreign ownership percentage and distance to the investment cap."""

    name = "ForeignHolding"
    category = IndicatorCategory.CHIP

    def can_calculate(self, context: IndicatorContext) -> bool:
        chips = context.chips
        return (chips is not None
                and chips.foreign_holding_percentage is not None
                and chips.foreign_holding_percentage > 0)

    def calculate(self, context: IndicatorContext) -> IndicatorResult:
        chips = context.chips
        holding_pct = chips.foreign_holding_percentage
        upper_limit = chips.foreign_upper_limit if chips.foreign_upper_limit is not None else 100.0

        near_limit = round(holding_pct / upper_limit * 100, 2) if upper_limit > 0 else 0.0

        outcome = classify(holding_pct, FOREIGN_BANDS, FOREIGN_FALLBACK)

        return self._result(
            holding_pct,
            outcome,
            f"Foreign holding={holding_pct:.2f}%, cap={upper_limit:.0f}%, {outcome.signal}",
            {
                "HoldingPercentage": holding_pct,
                "UpperLimit": upper_limit,
                "NearLimitRatio": near_limit,
                "HoldingShares": chips.foreign_holding_shares or 0,
            },
        )
