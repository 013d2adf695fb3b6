"""
Canonical data models for market data snapshots.

This module defines immutable data structures that external data providers
populate before an analysis request. Indicator calculators only ever read them.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class DailyPrice:
    """Daily OHLCV record."""
    date: date
    open: float
    high: float
    low: float
    close: float
    volume: int
    turnover: Optional[int] = None      # Traded value in local currency
    transactions: Optional[int] = None  # Number of trades


@dataclass(frozen=True)
class FundamentalData:
    """Fundamental data points; every field may be missing."""
    pe_ratio: Optional[float] = None
    pb_ratio: Optional[float] = None            # Some sources send book value per share here
    dividend_yield: Optional[float] = None      # Percent
    monthly_revenue: Optional[float] = None     # Thousands of local currency
    revenue_yoy: Optional[float] = None         # Percent
    revenue_mom: Optional[float] = None         # Percent
    eps: Optional[float] = None
    trailing_eps: Optional[float] = None        # Sum of the last four quarters
    operating_income: Optional[float] = None
    net_income: Optional[float] = None
    fiscal_period: Optional[str] = None         # e.g. "2024Q3"
    eps_data_period: Optional[str] = None       # Period the EPS figures cover
    revenue_month: Optional[str] = None         # e.g. "11501"
    revenue_label: Optional[str] = None         # Provider-formatted revenue text


@dataclass(frozen=True)
class DirectorHolding:
    """Single director/supervisor holding record."""
    title: str
    name: str
    current_shares: int = 0
    pledged_shares: int = 0
    pledge_ratio: str = ""              # Raw text as published, e.g. "12.5%"


@dataclass(frozen=True)
class ChipData:
    """Ownership and leverage data (margin, short sale, foreign, directors)."""

    # Margin trading, in lots
    margin_buy_volume: int = 0
    margin_sell_volume: int = 0
    margin_cash_repayment: int = 0
    margin_previous_balance: Optional[int] = None
    margin_balance: Optional[int] = None
    margin_limit: Optional[int] = None

    # Short selling, in lots
    short_buy_volume: int = 0
    short_sell_volume: int = 0
    short_cash_repayment: int = 0
    short_previous_balance: Optional[int] = None
    short_balance: Optional[int] = None
    short_limit: Optional[int] = None
    offset_volume: Optional[int] = None

    # Foreign investors
    foreign_holding_percentage: Optional[float] = None
    foreign_holding_shares: Optional[int] = None
    foreign_available_shares: Optional[int] = None
    foreign_upper_limit: Optional[float] = None

    # Securities borrowing and lending
    sbl_available_volume: Optional[int] = None

    # Directors and supervisors
    director_holdings: Optional[tuple[DirectorHolding, ...]] = None
    total_director_shares: int = 0
    total_director_pledged: int = 0
    director_pledge_ratio: float = 0.0  # Percent

    major_shareholders: Optional[tuple[str, ...]] = None
    day_trading_suspended: bool = False


@dataclass(frozen=True)
class InsiderTransaction:
    """Insider transaction reported on an SEC Form 4 filing."""
    owner_name: str
    relationship: str                   # Officer, Director, 10% Owner, Other
    transaction_date: str
    transaction_code: str               # P purchase, S sale, A award, M exercise
    shares: float
    price_per_share: Optional[float] = None
    transaction_value: Optional[float] = None
    shares_owned_after: Optional[float] = None
    filing_date: str = ""
    accession_number: str = ""


@dataclass(frozen=True)
class InsiderTradingSummary:
    """Aggregated insider activity over the reporting window (US market only)."""
    purchase_count: int = 0
    sale_count: int = 0
    net_buying_shares: float = 0.0
    net_buying_value: Optional[float] = None
    stock_code: str = ""
    recent_transactions: tuple[InsiderTransaction, ...] = ()
    total_purchase_value: Optional[float] = None
    total_sale_value: Optional[float] = None
    fetched_at: Optional[datetime] = None

    @property
    def total_activity(self) -> int:
        return self.purchase_count + self.sale_count


@dataclass(frozen=True)
class IndicatorContext:
    """
    Read-only market snapshot shared by every calculator in one analysis run.

    Prices are ordered oldest first; the last element is the latest trading day.
    """
    stock_code: str = ""
    prices: tuple[DailyPrice, ...] = field(default_factory=tuple)
    fundamentals: Optional[FundamentalData] = None
    chips: Optional[ChipData] = None
    insider_trading: Optional[InsiderTradingSummary] = None

    def __post_init__(self):
        if not isinstance(self.prices, tuple):
            object.__setattr__(self, "prices", tuple(self.prices))

    @classmethod
    def create(cls, stock_code: str, prices, fundamentals: Optional[FundamentalData] = None,
               chips: Optional[ChipData] = None,
               insider_trading: Optional[InsiderTradingSummary] = None) -> "IndicatorContext":
        """Build a context and check the price series invariants."""
        from .validators import validate_context

        context = cls(
            stock_code=stock_code,
            prices=tuple(prices),
            fundamentals=fundamentals,
            chips=chips,
            insider_trading=insider_trading,
        )
        validate_context(context)
        return context

    @property
    def closing_prices(self) -> list[float]:
        return [p.close for p in self.prices]

    @property
    def volumes(self) -> list[int]:
        return [p.volume for p in self.prices]

    @property
    def high_prices(self) -> list[float]:
        return [p.high for p in self.prices]

    @property
    def low_prices(self) -> list[float]:
        return [p.low for p in self.prices]

    @property
    def latest_close(self) -> Optional[float]:
        """Latest closing price, None when there is no price history."""
        return self.prices[-1].close if self.prices else None
