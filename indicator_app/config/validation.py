"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class ConfigValidator:
    """Validates indicator configuration parameters."""

    @staticmethod
    def validate_periods(section: str, params: dict[str, Any]) -> list[ValidationError]:
        """Every integer window in a section must be a positive integer."""
        errors = []

        for name, value in params.items():
            if name == "multiplier":
                continue
            if not _is_positive_int(value):
                errors.append(ValidationError(
                    field=f"{section}.{name}",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_ma_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate moving average windows."""
        errors = ConfigValidator.validate_periods("ma", params)
        if errors:
            return errors

        short, mid, long = params.get("short", 5), params.get("mid", 20), params.get("long", 60)
        if not short < mid < long:
            errors.append(ValidationError(
                field="ma",
                message="Windows must satisfy short < mid < long",
                value=(short, mid, long)
            ))

        return errors

    @staticmethod
    def validate_macd_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate MACD periods."""
        errors = ConfigValidator.validate_periods("macd", params)
        if errors:
            return errors

        fast, slow = params.get("fast", 12), params.get("slow", 26)
        if fast >= slow:
            errors.append(ValidationError(
                field="macd.fast",
                message="Fast period must be shorter than slow period",
                value=fast
            ))

        return errors

    @staticmethod
    def validate_bollinger_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate Bollinger band parameters."""
        errors = ConfigValidator.validate_periods("bollinger", params)

        if "multiplier" in params:
            value = params["multiplier"]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                errors.append(ValidationError(
                    field="bollinger.multiplier",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "ma" in config:
            errors.extend(ConfigValidator.validate_ma_params(config["ma"]))

        if "macd" in config:
            errors.extend(ConfigValidator.validate_macd_params(config["macd"]))

        if "bollinger" in config:
            errors.extend(ConfigValidator.validate_bollinger_params(config["bollinger"]))

        for section in ("rsi", "kd", "volume"):
            if section in config:
                errors.extend(ConfigValidator.validate_periods(section, config[section]))

        return errors
