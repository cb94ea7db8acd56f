"""Trade ledger and timestamp parsing."""

from stockmetrics.ledger.store import DEFAULT_VWAP_WINDOW, TradeLedger
from stockmetrics.ledger.timestamps import TIMESTAMP_FORMAT, format_timestamp, parse_timestamp

__all__ = [
    "TradeLedger",
    "DEFAULT_VWAP_WINDOW",
    "TIMESTAMP_FORMAT",
    "parse_timestamp",
    "format_timestamp",
]
