"""Default configuration parameters for the indicator calculators."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MAParams:
    """Moving average windows."""
    short: int = 5
    mid: int = 20                      # Also the minimum history required
    long: int = 60                     # Only computed when history allows


@dataclass(frozen=True)
class RSIParams:
    """RSI parameters."""
    period: int = 14


@dataclass(frozen=True)
class MACDParams:
    """MACD EMA periods."""
    fast: int = 12
    slow: int = 26
    signal: int = 9


@dataclass(frozen=True)
class KDParams:
    """Stochastic oscillator parameters."""
    rsv_period: int = 9
    k_smooth: int = 3
    d_smooth: int = 3


@dataclass(frozen=True)
class BollingerParams:
    """Bollinger band parameters."""
    period: int = 20
    multiplier: float = 2.0


@dataclass(frozen=True)
class VolumeParams:
    """Volume ratio averaging windows."""
    short: int = 5
    long: int = 20


@dataclass(frozen=True)
class IndicatorDefaults:
    """Complete default configuration."""
    ma: MAParams
    rsi: RSIParams
    macd: MACDParams
    kd: KDParams
    bollinger: BollingerParams
    volume: VolumeParams


def get_default_config() -> IndicatorDefaults:
    """Get the default configuration instance."""
    return IndicatorDefaults(
        ma=MAParams(),
        rsi=RSIParams(),
        macd=MACDParams(),
        kd=KDParams(),
        bollinger=BollingerParams(),
        volume=VolumeParams(),
    )


def build_config(values: dict) -> IndicatorDefaults:
    """Build a configuration from a merged mapping, e.g. ConfigLoader.merge_config output."""
    return IndicatorDefaults(
        ma=MAParams(**values.get("ma", {})),
        rsi=RSIParams(**values.get("rsi", {})),
        macd=MACDParams(**values.get("macd", {})),
        kd=KDParams(**values.get("kd", {})),
        bollinger=BollingerParams(**values.get("bollinger", {})),
        volume=VolumeParams(**values.get("volume", {})),
    )
