"""
Validation for indicator contexts assembled by data providers.

Calculators assume ascending, well-formed price history; these checks let a
provider fail fast instead of producing misleading indicators.
"""

import math

from ..errors import MalformedDataError, TemporalDataError
from .models import DailyPrice, IndicatorContext


def validate_price(price: DailyPrice) -> None:
    """
    Validate a single daily price record.

    Raises:
        MalformedDataError: If a value is negative, not finite, or high < low
    """
    for label, value in (("open", price.open), ("high", price.high),
                         ("low", price.low), ("close", price.close)):
        if not isinstance(value, (int, float)) or math.isnan(value) or math.isinf(value):
            raise MalformedDataError(f"Invalid {label} price on {price.date}: {value!r}",
                                     raw_data=repr(price))
        if value < 0:
            raise MalformedDataError(f"Negative {label} price on {price.date}: {value}",
                                     raw_data=repr(price))

    if price.high < price.low:
        raise MalformedDataError(f"High price below low price on {price.date}",
                                 raw_data=repr(price), expected_format="high >= low")

    if price.volume < 0:
        raise MalformedDataError(f"Negative volume on {price.date}: {price.volume}",
                                 raw_data=repr(price))


def validate_context(context: IndicatorContext) -> None:
    """
    Validate the price series of a context.

    Raises:
        TemporalDataError: If dates are not strictly ascending
        MalformedDataError: If any record is malformed
    """
    previous = None
    for price in context.prices:
        validate_price(price)
        if previous is not None and price.date <= previous.date:
            raise TemporalDataError(
                f"Prices for {context.stock_code or 'unknown'} are not in ascending date order",
                timestamp=price.date,
                expected_timestamp=previous.date,
                context={"stock_code": context.stock_code},
            )
        previous = price
