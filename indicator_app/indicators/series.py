"""
Time-series math shared by the technical indicators.

All functions take plain sequences ordered oldest first and recompute their
full path on every call; nothing is cached between calls.
"""

import math
from typing import Optional, Sequence


def simple_moving_average(values: Sequence[float], period: int) -> Optional[float]:
    """
    Mean of the last ``period`` values.

    Returns:
        SMA value or None if insufficient data
    """
    if period <= 0 or len(values) < period:
        return None

    window = values[-period:]
    return sum(window) / period


def population_std(values: Sequence[float], mean: Optional[float] = None) -> float:
    """Population standard deviation (divides by N)."""
    if not values:
        return 0.0

    if mean is None:
        mean = sum(values) / len(values)

    sum_of_squares = sum((v - mean) * (v - mean) for v in values)
    return math.sqrt(sum_of_squares / len(values))


def exponential_moving_average(values: Sequence[float], period: int) -> list[float]:
    """
    EMA series seeded with the simple average of the first ``period`` values.

    ema[i] = (price[i] - ema[i-1]) * 2 / (period + 1) + ema[i-1]

    Returns:
        EMA values aligned with values[period-1:], empty if insufficient data
    """
    if period <= 0 or len(values) < period:
        return []

    multiplier = 2.0 / (period + 1.0)
    ema = [sum(values[:period]) / period]

    for price in values[period:]:
        ema.append((price - ema[-1]) * multiplier + ema[-1])

    return ema


def macd(closes: Sequence[float], fast: int = 12, slow: int = 26,
         signal: int = 9) -> Optional[tuple[float, float, float]]:
    """
    Calculate the latest MACD line, signal line and histogram.

    The fast and slow EMA series are aligned on their common tail before
    subtracting; the signal line is the EMA of the resulting MACD series.

    Returns:
        (macd, signal, histogram) or None if insufficient data
    """
    fast_ema = exponential_moving_average(closes, fast)
    slow_ema = exponential_moving_average(closes, slow)
    common = min(len(fast_ema), len(slow_ema))
    if common == 0:
        return None

    macd_line = [f - s for f, s in zip(fast_ema[-common:], slow_ema[-common:])]
    signal_line = exponential_moving_average(macd_line, signal)
    if not signal_line:
        return None

    macd_value = macd_line[-1]
    signal_value = signal_line[-1]
    return macd_value, signal_value, macd_value - signal_value


def wilder_rsi(closes: Sequence[float], period: int = 14) -> Optional[float]:
    """
    Relative Strength Index with Wilder's smoothing.

    The first average gain/loss is the simple mean of the first ``period``
    changes; each later change updates avg = (avg * (period - 1) + x) / period.

    Returns:
        RSI value or None if insufficient data
    """
    if len(closes) <= period:
        return None

    changes = [closes[i + 1] - closes[i] for i in range(len(closes) - 1)]

    avg_gain = sum(c for c in changes[:period] if c > 0) / period
    avg_loss = sum(-c for c in changes[:period] if c < 0) / period

    for change in changes[period:]:
        gain = change if change > 0 else 0.0
        loss = -change if change < 0 else 0.0
        avg_gain = (avg_gain * (period - 1) + gain) / period
        avg_loss = (avg_loss * (period - 1) + loss) / period

    if avg_loss == 0:
        return 100.0

    rs = avg_gain / avg_loss
    return 100.0 - 100.0 / (1.0 + rs)


def raw_stochastic_value(highs: Sequence[float], lows: Sequence[float],
                         closes: Sequence[float], index: int, period: int = 9) -> float:
    """
    RSV at ``index`` over the trailing ``period`` bars.

    RSV = (close - lowest low) / (highest high - lowest low) * 100, or 50 when
    the range is zero or the window does not fit.
    """
    if index < period - 1:
        return 50.0

    start = index - period + 1
    highest_high = max(highs[start:index + 1])
    lowest_low = min(lows[start:index + 1])

    if highest_high == lowest_low:
        return 50.0

    return (closes[index] - lowest_low) / (highest_high - lowest_low) * 100.0


def stochastic_kd(highs: Sequence[float], lows: Sequence[float], closes: Sequence[float],
                  end_index: int, rsv_period: int = 9, k_smooth: int = 3,
                  d_smooth: int = 3) -> Optional[tuple[float, float]]:
    """
    K and D at ``end_index``, smoothed from an initial value of 50.

    K = ((k_smooth - 1) * K_prev + RSV) / k_smooth
    D = ((d_smooth - 1) * D_prev + K) / d_smooth

    Returns:
        (k, d) or None if the RSV window does not fit
    """
    if end_index < rsv_period - 1:
        return None

    k = 50.0
    d = 50.0
    for i in range(rsv_period - 1, end_index + 1):
        rsv = raw_stochastic_value(highs, lows, closes, i, rsv_period)
        k = ((k_smooth - 1) * k + rsv) / k_smooth
        d = ((d_smooth - 1) * d + k) / d_smooth

    return k, d
