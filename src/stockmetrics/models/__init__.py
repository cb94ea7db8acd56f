"""Canonical schema (Pydantic) - Trade, Side, StockType."""

from stockmetrics.models.trade import Side, StockType, Trade

__all__ = [
    "Trade",
    "Side",
    "StockType",
]
