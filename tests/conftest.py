"""Pytest configuration and shared fixtures."""

import pytest
from datetime import date, timedelta
from typing import Callable, List, Optional, Sequence

from indicator_app.data.models import (
    ChipData,
    DailyPrice,
    DirectorHolding,
    FundamentalData,
    IndicatorContext,
    InsiderTradingSummary,
)


def _build_prices(closes: Sequence[float], volumes: Optional[Sequence[int]] = None,
                  spread: float = 1.0, start: date = date(2024, 1, 1)) -> List[DailyPrice]:
    prices = []
    for i, close in enumerate(closes):
        prices.append(DailyPrice(
            date=start + timedelta(days=i),
            open=close,
            high=close + spread,
            low=max(close - spread, 0.0),
            close=close,
            volume=volumes[i] if volumes is not None else 1000,
        ))
    return prices


@pytest.fixture
def make_prices() -> Callable[..., List[DailyPrice]]:
    """Factory for daily prices from a list of closes, one day apart."""
    return _build_prices


@pytest.fixture
def make_context() -> Callable[..., IndicatorContext]:
    """Factory for contexts from a list of closes plus optional data."""
    def factory(closes: Sequence[float] = (), volumes: Optional[Sequence[int]] = None,
                stock_code: str = "2330", **kwargs) -> IndicatorContext:
        return IndicatorContext(
            stock_code=stock_code,
            prices=tuple(_build_prices(closes, volumes)),
            **kwargs,
        )
    return factory


@pytest.fixture
def uptrend_closes() -> List[float]:
    """60 strictly increasing closes."""
    return [100.0 + i for i in range(60)]


@pytest.fixture
def downtrend_closes() -> List[float]:
    """60 strictly decreasing closes."""
    return [200.0 - i for i in range(60)]


@pytest.fixture
def sample_fundamentals() -> FundamentalData:
    """Fundamentals with every calculator input populated."""
    return FundamentalData(
        pe_ratio=18.5,
        pb_ratio=2.1,
        dividend_yield=3.2,
        monthly_revenue=250_000_000.0,
        revenue_yoy=15.3,
        revenue_mom=-2.1,
        eps=8.7,
        trailing_eps=32.4,
        operating_income=120_000_000.0,
        net_income=95_000_000.0,
        fiscal_period="2024Q3",
    )


@pytest.fixture
def sample_chips() -> ChipData:
    """Chip data with margin, foreign and director records."""
    return ChipData(
        margin_previous_balance=4800,
        margin_balance=5000,
        margin_limit=10000,
        short_previous_balance=200,
        short_balance=200,
        offset_volume=10,
        foreign_holding_percentage=72.5,
        foreign_holding_shares=18_800_000_000,
        foreign_upper_limit=100.0,
        director_holdings=(
            DirectorHolding(title="Chairman", name="Director A", current_shares=1_000_000,
                            pledged_shares=0, pledge_ratio="0.00%"),
            DirectorHolding(title="Director", name="Director B", current_shares=500_000,
                            pledged_shares=0, pledge_ratio="0.00%"),
        ),
        total_director_shares=1_500_000,
        total_director_pledged=0,
        director_pledge_ratio=0.0,
    )


@pytest.fixture
def sample_insider() -> InsiderTradingSummary:
    """Insider summary with heavy net buying."""
    return InsiderTradingSummary(
        purchase_count=5,
        sale_count=1,
        net_buying_shares=150_000,
        net_buying_value=2_500_000.0,
        stock_code="AAPL",
    )


@pytest.fixture
def full_context(make_context, uptrend_closes, sample_fundamentals, sample_chips,
                 sample_insider) -> IndicatorContext:
    """60 days of prices plus every optional data block."""
    return make_context(
        uptrend_closes,
        fundamentals=sample_fundamentals,
        chips=sample_chips,
        insider_trading=sample_insider,
    )
