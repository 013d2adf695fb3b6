"""Director/supervisor share pledge ratio"""

from ..data.models import IndicatorContext
from ..models.indicators import IndicatorCategory, IndicatorResult, SignalDirection
from .base import IndicatorCalculator, Outcome, above, classify, equal_to

# Pledged shares can be force-sold when the price drops
PLEDGE_BANDS = (
    above(50, "Director pledge ratio extremely high, forced-sale risk",
          SignalDirection.STRONG_BEARISH, 10),
    above(30, "Director pledge ratio high, watch the risk", SignalDirection.BEARISH, 25),
    above(15, "Director pledge ratio moderate, needs attention", SignalDirection.NEUTRAL, 45),
    above(5, "Director pledge ratio low, normal range", SignalDirection.NEUTRAL, 55),
    equal_to(0, "Directors hold zero pledge, management confident", SignalDirection.BULLISH, 75),
)
PLEDGE_FALLBACK = Outcome("Director pledge ratio very low, sound condition",
                          SignalDirection.BULLISH, 70)


class DirectorPledgeCalculator(IndicatorCalculator):
    """Share of director holdings pledged as loan collateral."""

    name = "DirectorPledge"
    category = IndicatorCategory.CHIP

    def can_calculate(self, context: IndicatorContext) -> bool:
        chips = context.chips
        return chips is not None and bool(chips.director_holdings)

    def calculate(self, context: IndicatorContext) -> IndicatorResult:
        chips = context.chips
        pledge_ratio = chips.director_pledge_ratio
        director_count = len(chips.director_holdings)

        outcome = classify(pledge_ratio, PLEDGE_BANDS, PLEDGE_FALLBACK)

        return self._result(
            pledge_ratio,
            outcome,
            f"{director_count} directors hold {chips.total_director_shares:,} shares, "
            f"{chips.total_director_pledged:,} pledged ({pledge_ratio:.2f}%), {outcome.signal}",
            {
                "PledgeRatio": pledge_ratio,
                "TotalDirectorShares": chips.total_director_shares,
                "TotalPledgedShares": chips.total_director_pledged,
                "DirectorCount": director_count,
            },
        )
