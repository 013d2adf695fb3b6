"""Indicator calculators: technical, fundamental and chip"""

from .base import IndicatorCalculator, Outcome, PriceHistoryCalculator
from .bollinger import BollingerBandCalculator
from .director_pledge import DirectorPledgeCalculator
from .earnings import EPSCalculator, RevenueGrowthCalculator
from .foreign_holding import ForeignHoldingCalculator
from .insider import InsiderTradingCalculator
from .kd import KDCalculator
from .macd import MACDCalculator
from .margin import MarginIndicatorCalculator
from .moving_average import MovingAverageCalculator
from .rsi import RSICalculator
from .valuation import DividendYieldCalculator, PBRatioCalculator, PERatioCalculator
from .volume import VolumeRatioCalculator

__all__ = [
    "IndicatorCalculator",
    "PriceHistoryCalculator",
    "Outcome",
    "MovingAverageCalculator",
    "RSICalculator",
    "MACDCalculator",
    "KDCalculator",
    "BollingerBandCalculator",
    "VolumeRatioCalculator",
    "MarginIndicatorCalculator",
    "ForeignHoldingCalculator",
    "DirectorPledgeCalculator",
    "PERatioCalculator",
    "PBRatioCalculator",
    "DividendYieldCalculator",
    "RevenueGrowthCalculator",
    "EPSCalculator",
    "InsiderTradingCalculator",
]
