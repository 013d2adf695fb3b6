#!/usr/bin/env python3
"""
Basic Usage Example - Indicator Engine

This script demonstrates the basic usage of the indicator engine with
simulated market data. It shows how to:
- Build a context from daily prices, fundamentals and chip data
- Run every indicator, one category, or a single indicator
- Read the scored results

Run: python examples/basic_usage.py
"""

import json
import math
from datetime import date, timedelta
from typing import List

from indicator_app.data.models import ChipData, DailyPrice, FundamentalData, IndicatorContext
from indicator_app.engine import IndicatorEngine
from indicator_app.logging import configure_logging
from indicator_app.models.indicators import IndicatorCategory


def create_daily_prices(days: int = 90, start_price: float = 580.0) -> List[DailyPrice]:
    """Create a gently rising, oscillating price series."""
    prices = []
    start = date(2024, 1, 2)

    for i in range(days):
        close = start_price + i * 0.8 + math.sin(i / 4) * 12
        prices.append(DailyPrice(
            date=start + timedelta(days=i),
            open=close - 2,
            high=close + 5,
            low=close - 6,
            close=round(close, 2),
            volume=25_000 + (i % 10) * 1_500,
        ))

    return prices


def main():
    configure_logging(level="INFO")

    context = IndicatorContext.create(
        stock_code="2330",
        prices=create_daily_prices(),
        fundamentals=FundamentalData(pe_ratio=18.5, pb_ratio=5.2, dividend_yield=2.1,
                                     monthly_revenue=236_000_000.0, revenue_yoy=39.6,
                                     revenue_mom=5.2, eps=9.56, fiscal_period="2024Q3"),
        chips=ChipData(margin_previous_balance=25_100, margin_balance=25_380,
                       margin_limit=6_400_000, short_balance=420, short_previous_balance=410,
                       foreign_holding_percentage=72.4),
    )

    engine = IndicatorEngine()

    print("=== All indicators ===")
    for result in engine.calculate_all(context):
        print(f"{result.name:<15} {result.direction.value:<14} {result.score:>3}  {result.reason}")

    print("\n=== Chip indicators ===")
    for result in engine.calculate_by_category(context, IndicatorCategory.CHIP):
        print(f"{result.name:<15} {result.signal}")

    print("\n=== Single indicator ===")
    rsi = engine.calculate_by_name(context, "RSI")
    if rsi is not None:
        print(json.dumps(rsi.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
