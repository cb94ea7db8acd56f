"""stockmetrics - per-stock pricing formulas and an in-memory trade ledger."""

from stockmetrics.errors import InvalidTradeType, MalformedTimestamp, NoTradesFound, StockMetricsError
from stockmetrics.ledger import TradeLedger
from stockmetrics.models import Side, StockType, Trade
from stockmetrics.pricing import dividend_yield, pe_ratio

__all__ = [
    "TradeLedger",
    "Trade",
    "Side",
    "StockType",
    "dividend_yield",
    "pe_ratio",
    "StockMetricsError",
    "InvalidTradeType",
    "MalformedTimestamp",
    "NoTradesFound",
]
