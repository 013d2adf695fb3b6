"""Volume ratio: recent average volume against the longer-term average"""

from typing import Optional

from ..config.defaults import VolumeParams
from ..data.models import IndicatorContext
from ..models.indicators import IndicatorResult, SignalDirection
from .base import Outcome, PriceHistoryCalculator
from .series import simple_moving_average


def classify_volume(volume_ratio: float, today_vs_avg: float) -> Outcome:
    # Direction of a volume spike depends on price, which this indicator ignores
    if today_vs_avg > 2.0:
        return Outcome("Extreme volume, trading abnormally heavy", SignalDirection.NEUTRAL, 50)
    if volume_ratio > 1.5:
        return Outcome("Volume expanding sharply", SignalDirection.BULLISH, 65)
    if volume_ratio > 1.2:
        return Outcome("Volume expanding moderately", SignalDirection.BULLISH, 60)
    if volume_ratio < 0.5:
        return Outcome("Volume shrinking severely", SignalDirection.BEARISH, 35)
    if volume_ratio < 0.8:
        return Outcome("Volume shrinking", SignalDirection.NEUTRAL, 45)

    return Outcome("Volume normal", SignalDirection.NEUTRAL, 50)


class VolumeRatioCalculator(PriceHistoryCalculator):
    """Compares 5-day and today's volume with the 20-day average."""

    name = "VolumeRatio"

    def __init__(self, params: Optional[VolumeParams] = None):
        self.params = params or VolumeParams()

    @property
    def min_history(self) -> int:
        return self.params.long

    def calculate(self, context: IndicatorContext) -> IndicatorResult:
        volumes = [float(v) for v in context.volumes]
        short, long = self.params.short, self.params.long

        avg_short = simple_moving_average(volumes, short)
        avg_long = simple_moving_average(volumes, long)
        today = volumes[-1]

        volume_ratio = avg_short / avg_long if avg_long > 0 else 1.0
        today_vs_avg = today / avg_long if avg_long > 0 else 1.0

        outcome = classify_volume(volume_ratio, today_vs_avg)

        return self._result(
            volume_ratio,
            outcome,
            f"{short}-day avg / {long}-day avg={volume_ratio:.2f}, "
            f"today / {long}-day avg={today_vs_avg:.2f}, {outcome.signal}",
            {
                "VolumeRatio_5_20": volume_ratio,
                "TodayVsAvg20": today_vs_avg,
                "AvgVolume5": avg_short,
                "AvgVolume20": avg_long,
                "TodayVolume": today,
            },
        )
