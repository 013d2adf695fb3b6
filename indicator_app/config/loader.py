"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .defaults import IndicatorDefaults, get_default_config

MARKETS_FILE = "markets.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """
    Resolves indicator parameters for one analysis request.

    Market overrides live in ``<config_dir>/markets.yaml`` under a top-level
    ``markets`` key, one mapping per market id mirroring IndicatorDefaults.
    """

    config_dir: Path
    defaults: IndicatorDefaults

    @classmethod
    def create(cls, config_dir: Optional[Union[str, Path]] = None) -> "ConfigLoader":
        """Create a ConfigLoader, defaulting to the repository's config directory."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_market_config(self, market: str) -> dict[str, Any]:
        """Load the overrides for one market; empty when none are defined."""
        markets_file = self.config_dir / MARKETS_FILE

        if not markets_file.exists():
            return {}

        with open(markets_file, encoding="utf-8") as f:
            document = yaml.safe_load(f) or {}

        return (document.get("markets") or {}).get(market) or {}

    def merge_config(
        self,
        market: str,
        request_overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-request overrides (highest priority)
        2. Market-specific overrides
        3. Global defaults (lowest priority)
        """
        merged = asdict(self.defaults)
        merged = _deep_merge(merged, self.load_market_config(market))

        if request_overrides:
            merged = _deep_merge(merged, request_overrides)

        return merged


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` with ``override`` merged in, recursing into nested mappings."""
    result = dict(base)

    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = _deep_merge(current, value)
        else:
            result[key] = value

    return result
