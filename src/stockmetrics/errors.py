"""Error taxonomy for pricing formulas and the trade ledger."""


class StockMetricsError(Exception):
    """Base class for all stockmetrics errors."""


class InvalidTradeType(StockMetricsError, ValueError):
    """Stock type is neither Common nor Preferred."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid trade type: {value!r} (expected Common or Preferred)")


class MalformedTimestamp(StockMetricsError, ValueError):
    """Timestamp text does not match YYYY-MM-DD HH:MM:SS."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Malformed timestamp: {value!r} (expected YYYY-MM-DD HH:MM:SS)")


class NoTradesFound(StockMetricsError, LookupError):
    """A ledger query has no qualifying trades."""

    def __init__(self, message: str = "No trades found") -> None:
        super().__init__(message)
