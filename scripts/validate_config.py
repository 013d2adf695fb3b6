#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from typing import List, Optional

from indicator_app.config.loader import ConfigLoader
from indicator_app.config.validation import ConfigValidator, ValidationError


def validate_market_config(loader: ConfigLoader, market: str,
                           overrides: Optional[dict] = None) -> List[ValidationError]:
    """Validate the merged configuration for a market."""
    config = loader.merge_config(market, overrides)
    return ConfigValidator.validate_config(config)


def main(config_dir: Optional[str] = None) -> int:
    """Main validation function."""
    print("Validating indicator configuration...")

    loader = ConfigLoader.create(config_dir)

    # Markets listed in markets.yaml plus one that falls back to defaults
    markets = ["TW", "US", "UNKNOWN-MARKET"]

    all_valid = True

    for market in markets:
        print(f"\nValidating {market}...")
        errors = validate_market_config(loader, market)

        if errors:
            print(f"Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  - {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"{market} configuration is valid")

    print("\nTesting request-level overrides...")
    errors = validate_market_config(loader, "TW", {"macd": {"fast": 8, "slow": 17, "signal": 9}})
    if errors:
        print("Request override validation failed:")
        for error in errors:
            print(f"  - {error.field}: {error.message}")
        all_valid = False
    else:
        print("Request override validation passed")

    if all_valid:
        print("\nAll configurations are valid")
        return 0

    print("\nConfiguration validation failed")
    return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else None))
