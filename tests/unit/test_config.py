"""Unit tests for configuration management."""

import pytest
from pathlib import Path

from indicator_app.config.defaults import IndicatorDefaults, build_config, get_default_config
from indicator_app.config.loader import ConfigLoader
from indicator_app.config.validation import ConfigValidator
from indicator_app.engine import build_default_calculators


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.ma.short == 5
        assert config.ma.mid == 20
        assert config.ma.long == 60
        assert config.rsi.period == 14
        assert (config.macd.fast, config.macd.slow, config.macd.signal) == (12, 26, 9)
        assert (config.kd.rsv_period, config.kd.k_smooth, config.kd.d_smooth) == (9, 3, 3)
        assert config.bollinger.multiplier == 2.0
        assert config.volume.long == 20

    def test_build_config_round_trip(self) -> None:
        """Test that a merged mapping builds back into IndicatorDefaults."""
        loader = ConfigLoader.create()
        config = build_config(loader.merge_config("UNKNOWN", {"rsi": {"period": 9}}))

        assert isinstance(config, IndicatorDefaults)
        assert config.rsi.period == 9
        assert config.macd == get_default_config().macd

    def test_build_config_partial_mapping(self) -> None:
        config = build_config({"bollinger": {"multiplier": 2.5}})
        assert config.bollinger.multiplier == 2.5
        assert config.bollinger.period == 20


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_bundled_markets_keep_defaults(self) -> None:
        """Test the shipped markets.yaml leaves every market on the default windows."""
        loader = ConfigLoader.create()

        for market in ("TW", "US"):
            assert loader.load_market_config(market) == {}
            config = build_config(loader.merge_config(market))
            assert config == get_default_config()

            kd = next(c for c in build_default_calculators(config) if c.name == "KD")
            assert kd.min_history == 15

    def test_merge_config_defaults_only(self, tmp_path) -> None:
        """Test config merging with no override file."""
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config("TW")

        assert config["kd"]["rsv_period"] == 9
        assert config["macd"]["slow"] == 26

    def test_market_overrides(self, tmp_path) -> None:
        (tmp_path / "markets.yaml").write_text(
            "markets:\n  US:\n    kd:\n      rsv_period: 14\n    rsi:\n      period: 10\n",
            encoding="utf-8",
        )
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config("US")

        assert config["kd"]["rsv_period"] == 14
        assert config["kd"]["k_smooth"] == 3  # untouched keys survive the deep merge
        assert config["rsi"]["period"] == 10

    def test_request_overrides_win(self, tmp_path) -> None:
        """Test per-request overrides take precedence over market overrides."""
        (tmp_path / "markets.yaml").write_text(
            "markets:\n  US:\n    kd:\n      rsv_period: 14\n", encoding="utf-8")
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config("US", {"kd": {"rsv_period": 5}})

        assert config["kd"]["rsv_period"] == 5

    def test_unknown_market(self, tmp_path) -> None:
        (tmp_path / "markets.yaml").write_text("markets:\n  TW: {}\n", encoding="utf-8")
        loader = ConfigLoader.create(tmp_path)
        assert loader.load_market_config("JP") == {}

    def test_empty_file(self, tmp_path) -> None:
        (tmp_path / "markets.yaml").write_text("", encoding="utf-8")
        assert ConfigLoader.create(tmp_path).load_market_config("TW") == {}


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_defaults_are_valid(self) -> None:
        loader = ConfigLoader.create()
        assert ConfigValidator.validate_config(loader.merge_config("TW")) == []

    @pytest.mark.parametrize("value", [0, -3, 2.5, "14", True])
    def test_invalid_period(self, value) -> None:
        errors = ConfigValidator.validate_config({"rsi": {"period": value}})

        assert len(errors) == 1
        assert errors[0].field == "rsi.period"
        assert errors[0].value == value

    def test_macd_fast_not_below_slow(self) -> None:
        errors = ConfigValidator.validate_macd_params({"fast": 26, "slow": 12, "signal": 9})

        assert len(errors) == 1
        assert errors[0].field == "macd.fast"

    def test_ma_window_order(self) -> None:
        errors = ConfigValidator.validate_ma_params({"short": 20, "mid": 10, "long": 60})

        assert len(errors) == 1
        assert errors[0].field == "ma"

    def test_bollinger_multiplier(self) -> None:
        errors = ConfigValidator.validate_bollinger_params({"period": 20, "multiplier": 0})

        assert [e.field for e in errors] == ["bollinger.multiplier"]

    def test_errors_accumulate(self) -> None:
        errors = ConfigValidator.validate_config({
            "macd": {"fast": 30, "slow": 26, "signal": 9},
            "kd": {"rsv_period": 0},
            "volume": {"short": -1, "long": 20},
        })
        assert {e.field for e in errors} == {"macd.fast", "kd.rsv_period", "volume.short"}
