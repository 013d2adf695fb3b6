"""Tests for price-history indicators: MA, RSI, MACD, KD, Bollinger, volume"""

import pytest

from indicator_app.config.defaults import MACDParams, MAParams, RSIParams, VolumeParams
from indicator_app.indicators.bollinger import BollingerBandCalculator
from indicator_app.indicators.kd import (
    KDCalculator,
    KDCrossover,
    classify_kd,
    detect_crossover as detect_kd_crossover,
)
from indicator_app.indicators.macd import (
    Crossover,
    MACDCalculator,
    classify_macd,
    detect_crossover,
)
from indicator_app.indicators.moving_average import MovingAverageCalculator, classify_alignment
from indicator_app.indicators.rsi import RSICalculator
from indicator_app.indicators.volume import VolumeRatioCalculator
from indicator_app.models.indicators import IndicatorCategory, SignalDirection


class TestMovingAverage:
    """Test MA calculator"""

    def test_requires_twenty_days(self, make_context):
        calculator = MovingAverageCalculator()
        assert not calculator.can_calculate(make_context(range(1, 20)))
        assert calculator.can_calculate(make_context(range(1, 21)))

    def test_one_to_twenty(self, make_context):
        """MA20 of 1..20 is 10.5 and MA60 is not computed"""
        result = MovingAverageCalculator().calculate(make_context([float(i) for i in range(1, 21)]))

        assert result.name == "MA"
        assert result.category == IndicatorCategory.TECHNICAL
        assert result.value == 10.5
        assert result.sub_values["MA20"] == 10.5
        assert result.sub_values["MA5"] == 18.0
        assert "MA60" not in result.sub_values
        assert result.direction == SignalDirection.BULLISH
        assert result.score == 75

    def test_full_bullish_alignment(self, make_context, uptrend_closes):
        result = MovingAverageCalculator().calculate(make_context(uptrend_closes))

        assert "MA60" in result.sub_values
        assert result.direction == SignalDirection.STRONG_BULLISH
        assert result.score == 90

    def test_full_bearish_alignment(self, make_context, downtrend_closes):
        result = MovingAverageCalculator().calculate(make_context(downtrend_closes))

        assert result.direction == SignalDirection.STRONG_BEARISH
        assert result.score == 10

    def test_custom_windows_keep_keys(self, make_context):
        """Custom windows change the averages, not the key names"""
        calculator = MovingAverageCalculator(MAParams(short=3, mid=10, long=30))
        result = calculator.calculate(make_context([float(i) for i in range(1, 21)]))

        assert set(result.sub_values) == {"MA5", "MA20"}
        assert result.sub_values["MA5"] == 19.0  # mean(18..20)
        assert result.sub_values["MA20"] == 15.5  # mean(11..20)

    def test_alignment_fallbacks(self):
        # Above MA20 but below MA5 without MA60
        assert classify_alignment(10.0, 11.0, 9.0, None).score == 55
        # Close above all three but MA20 below MA60
        assert classify_alignment(20.0, 15.0, 10.0, 12.0).score == 70
        # Close below all three but MA5 above MA20
        assert classify_alignment(5.0, 15.0, 10.0, 12.0).score == 30
        # Close below MA20, above MA5, MA5 below MA20
        assert classify_alignment(9.0, 8.0, 10.0, None).score == 50


class TestRSI:
    """Test RSI calculator"""

    def test_requires_more_than_period(self, make_context):
        calculator = RSICalculator()
        assert not calculator.can_calculate(make_context(range(1, 15)))
        assert calculator.can_calculate(make_context(range(1, 16)))

    def test_rising_prices_are_overbought(self, make_context):
        result = RSICalculator().calculate(make_context([float(i) for i in range(1, 31)]))

        assert result.value > 90
        assert result.direction == SignalDirection.STRONG_BEARISH
        assert result.score == 15
        assert "RSI14" in result.sub_values

    def test_falling_prices_are_oversold(self, make_context):
        result = RSICalculator().calculate(make_context([float(100 - i) for i in range(30)]))

        assert result.value < 10
        assert result.direction == SignalDirection.STRONG_BULLISH
        assert result.score == 85

    def test_custom_period_keeps_key(self, make_context):
        """Sub-value key names do not follow the configured period"""
        result = RSICalculator(RSIParams(period=6)).calculate(make_context(range(1, 11)))
        assert set(result.sub_values) == {"RSI14"}
        assert "RSI(6)" in result.reason


class TestMACD:
    """Test MACD calculator and crossover rules"""

    def test_requires_thirty_five_days(self, make_context):
        calculator = MACDCalculator()
        assert not calculator.can_calculate(make_context(range(1, 35)))
        assert calculator.can_calculate(make_context(range(1, 36)))

    def test_threshold_follows_params(self, make_context):
        calculator = MACDCalculator(MACDParams(fast=5, slow=10, signal=4))
        assert calculator.min_history == 14
        assert calculator.can_calculate(make_context(range(1, 15)))

    def test_result_shape(self, make_context, uptrend_closes):
        result = MACDCalculator().calculate(make_context(uptrend_closes))

        for key in ("MACD", "Signal", "Histogram", "DIF"):
            assert key in result.sub_values
        assert result.sub_values["DIF"] == result.sub_values["MACD"]
        assert result.sub_values["Histogram"] == pytest.approx(
            result.sub_values["MACD"] - result.sub_values["Signal"])
        assert result.value > 0
        assert "MACD=" in result.reason
        assert "Signal=" in result.reason

    def test_downtrend_negative(self, make_context, downtrend_closes):
        result = MACDCalculator().calculate(make_context(downtrend_closes))
        assert result.value < 0

    def test_golden_cross(self):
        assert detect_crossover(1.0, 0.5, (0.4, 0.5, -0.1)) == Crossover.GOLDEN
        outcome = classify_macd(1.0, 0.5, Crossover.GOLDEN)
        assert outcome.direction == SignalDirection.STRONG_BULLISH
        assert outcome.score == 85

    def test_death_cross(self):
        assert detect_crossover(0.4, 0.5, (0.6, 0.5, 0.1)) == Crossover.DEATH
        assert classify_macd(0.4, -0.1, Crossover.DEATH).score == 15

    def test_no_previous_bar(self):
        assert detect_crossover(1.0, 0.5, None) == Crossover.NONE

    def test_non_cross_bands(self):
        assert classify_macd(1.0, 0.2, Crossover.NONE).score == 70
        assert classify_macd(1.0, -0.2, Crossover.NONE).score == 55
        assert classify_macd(-1.0, -0.2, Crossover.NONE).score == 30
        assert classify_macd(-1.0, 0.2, Crossover.NONE).score == 45
        assert classify_macd(0.0, 0.0, Crossover.NONE).score == 50


class TestKD:
    """Test KD calculator and crossover rules"""

    def test_requires_fifteen_days(self, make_context):
        calculator = KDCalculator()
        assert not calculator.can_calculate(make_context(range(1, 15)))
        assert calculator.can_calculate(make_context(range(1, 16)))

    def test_uptrend(self, make_context, uptrend_closes):
        result = KDCalculator().calculate(make_context(uptrend_closes))

        assert result.value > 50
        assert 0 <= result.sub_values["K"] <= 100
        assert 0 <= result.sub_values["D"] <= 100
        assert "RSV" in result.sub_values
        assert "K=" in result.reason

    def test_downtrend(self, make_context, downtrend_closes):
        result = KDCalculator().calculate(make_context(downtrend_closes))
        assert result.value < 50

    def test_crossovers(self):
        assert detect_kd_crossover(30.0, 25.0, 20.0, 22.0) == KDCrossover.GOLDEN_LOW
        assert detect_kd_crossover(60.0, 55.0, 50.0, 52.0) == KDCrossover.GOLDEN_HIGH
        assert detect_kd_crossover(70.0, 75.0, 80.0, 78.0) == KDCrossover.DEATH_HIGH
        assert detect_kd_crossover(40.0, 45.0, 50.0, 48.0) == KDCrossover.DEATH_LOW
        assert detect_kd_crossover(60.0, 55.0, 58.0, 54.0) == KDCrossover.NONE

    def test_classification(self):
        assert classify_kd(30.0, 25.0, KDCrossover.GOLDEN_LOW).score == 90
        assert classify_kd(60.0, 55.0, KDCrossover.GOLDEN_HIGH).score == 65
        assert classify_kd(70.0, 75.0, KDCrossover.DEATH_HIGH).score == 10
        assert classify_kd(40.0, 45.0, KDCrossover.DEATH_LOW).score == 35
        assert classify_kd(85.0, 82.0, KDCrossover.NONE).score == 25
        assert classify_kd(15.0, 18.0, KDCrossover.NONE).score == 75
        assert classify_kd(55.0, 50.0, KDCrossover.NONE).score == 60
        assert classify_kd(45.0, 50.0, KDCrossover.NONE).score == 40


class TestBollingerBands:
    """Test Bollinger band calculator"""

    def test_identical_closes(self, make_context):
        result = BollingerBandCalculator().calculate(make_context([100.0] * 25))

        assert result.sub_values["Bandwidth"] == 0.0
        assert result.sub_values["%B"] == 50.0
        assert result.value == 50.0

    def test_band_ordering(self, make_context):
        closes = [100 + (i % 5) * 2.5 - (i % 3) for i in range(30)]
        result = BollingerBandCalculator().calculate(make_context(closes))

        upper = result.sub_values["UpperBand"]
        middle = result.sub_values["MiddleBand"]
        lower = result.sub_values["LowerBand"]
        assert upper >= middle >= lower

    def test_breakout_above_upper_band(self, make_context):
        result = BollingerBandCalculator().calculate(make_context([100.0] * 19 + [130.0]))

        assert result.sub_values["MiddleBand"] == pytest.approx(101.5)
        assert result.direction == SignalDirection.BEARISH
        assert result.score == 25
        assert "upper band" in result.signal

    def test_breakdown_below_lower_band(self, make_context):
        result = BollingerBandCalculator().calculate(make_context([100.0] * 19 + [70.0]))

        assert result.direction == SignalDirection.BULLISH
        assert result.score == 75
        assert "lower band" in result.signal


class TestVolumeRatio:
    """Test volume ratio calculator"""

    def test_requires_twenty_days(self, make_context):
        calculator = VolumeRatioCalculator()
        assert not calculator.can_calculate(make_context([10.0] * 19))
        assert calculator.can_calculate(make_context([10.0] * 20))

    def test_normal_volume(self, make_context):
        result = VolumeRatioCalculator().calculate(make_context([10.0] * 20, volumes=[1000] * 20))

        assert result.value == 1.0
        assert result.sub_values["TodayVsAvg20"] == 1.0
        assert result.sub_values["AvgVolume5"] == 1000.0
        assert result.sub_values["TodayVolume"] == 1000.0
        assert result.signal == "Volume normal"
        assert result.score == 50

    def test_extreme_volume_today(self, make_context):
        volumes = [1000] * 19 + [3000]
        result = VolumeRatioCalculator().calculate(make_context([10.0] * 20, volumes=volumes))

        assert result.sub_values["TodayVsAvg20"] > 2.0
        assert result.direction == SignalDirection.NEUTRAL
        assert "Extreme volume" in result.signal

    def test_expanding_volume(self, make_context):
        volumes = [1000] * 15 + [2000] * 5
        result = VolumeRatioCalculator().calculate(make_context([10.0] * 20, volumes=volumes))

        assert result.sub_values["VolumeRatio_5_20"] == pytest.approx(1.6)
        assert result.direction == SignalDirection.BULLISH
        assert result.score == 65

    def test_shrinking_volume(self, make_context):
        volumes = [1000] * 15 + [300] * 5
        result = VolumeRatioCalculator().calculate(make_context([10.0] * 20, volumes=volumes))

        assert result.direction == SignalDirection.BEARISH
        assert result.score == 35
        assert "shrinking" in result.signal

    def test_custom_windows_keep_keys(self, make_context):
        calculator = VolumeRatioCalculator(VolumeParams(short=3, long=10))
        result = calculator.calculate(make_context([10.0] * 20, volumes=[1000] * 20))

        assert set(result.sub_values) == {"VolumeRatio_5_20", "TodayVsAvg20", "AvgVolume5",
                                          "AvgVolume20", "TodayVolume"}

    def test_zero_average_volume(self, make_context):
        result = VolumeRatioCalculator().calculate(make_context([10.0] * 20, volumes=[0] * 20))
        assert result.value == 1.0
