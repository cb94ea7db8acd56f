"""Per-stock pricing formulas - dividend yield and P/E ratio."""

from __future__ import annotations

import math

from stockmetrics.errors import InvalidTradeType
from stockmetrics.models.trade import StockType


def _divide(numerator: float, denominator: float) -> float:
    """IEEE division: x/0 gives a signed inf (0/0 and nan/0 give nan) instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _stock_type(value: StockType | str) -> StockType:
    if isinstance(value, StockType):
        return value
    try:
        return StockType(value)
    except ValueError:
        raise InvalidTradeType(value) from None


def dividend_yield(
    price: int,
    stock_type: StockType | str,
    last_dividend: float,
    fixed_dividend: float,
    par_value: int,
) -> float:
    """
    Dividend yield for a stock at the given price.

    Common stock yields last_dividend / price. Preferred stock yields
    (fixed_dividend * par_value) / price; fixed_dividend is a fraction of par
    (e.g. 0.02 for 2%). The unused inputs for each type are ignored.
    Raises InvalidTradeType for any other stock type.
    """
    kind = _stock_type(stock_type)
    if kind is StockType.COMMON:
        return _divide(last_dividend, price)
    return _divide(fixed_dividend * par_value, price)


def pe_ratio(price: int, dividend: float) -> float:
    """Price / dividend. A zero dividend yields inf (or nan for a zero price)."""
    return _divide(price, dividend)
