"""In-memory trade ledger - time-ordered trades, windowed VWAP, geometric mean of prices."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Callable, Iterator

import structlog

from stockmetrics.errors import NoTradesFound
from stockmetrics.ledger.timestamps import format_timestamp, parse_timestamp
from stockmetrics.models.trade import Side, Trade

if TYPE_CHECKING:
    from stockmetrics.config.settings import Settings

log = structlog.get_logger(__name__)

DEFAULT_VWAP_WINDOW = timedelta(minutes=15)


class TradeLedger:
    """
    Append-only ledger of trades for a single stock, kept sorted by timestamp.

    Trades sharing a timestamp are all kept; their relative order is not
    significant. Not thread-safe: callers sharing a ledger across threads must
    hold their own lock around every call.
    """

    __slots__ = ("window", "_clock", "_times", "_trades")

    def __init__(
        self,
        window: timedelta = DEFAULT_VWAP_WINDOW,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.window = window
        self._clock = clock
        # Parallel lists: _times[i] is _trades[i].timestamp, ascending
        self._times: list[datetime] = []
        self._trades: list[Trade] = []

    @classmethod
    def from_settings(cls, settings: Settings, clock: Callable[[], datetime] = datetime.now) -> TradeLedger:
        return cls(window=timedelta(minutes=settings.vwap_window_minutes), clock=clock)

    def __len__(self) -> int:
        return len(self._trades)

    def __iter__(self) -> Iterator[Trade]:
        return iter(list(self._trades))

    def record_trade(self, timestamp: str | datetime, quantity: int, side: Side | str, price: int) -> Trade:
        """Parse timestamp (YYYY-MM-DD HH:MM:SS), store the trade in time order and return it."""
        ts = parse_timestamp(timestamp)
        trade = Trade(timestamp=ts, quantity=quantity, side=side, price=price)
        idx = bisect_right(self._times, ts)
        self._times.insert(idx, ts)
        self._trades.insert(idx, trade)
        log.debug("trade_recorded", timestamp=format_timestamp(ts), quantity=quantity, side=trade.side.value, price=price)
        return trade

    def trades_since(self, start: datetime) -> list[Trade]:
        """Trades with timestamp >= start, ascending. No upper bound."""
        return self._trades[bisect_left(self._times, start):]

    def volume_weighted_price(self) -> float:
        """
        Volume-weighted average price over trades not older than the window.

        sum(quantity * price) / sum(quantity) over every trade stamped at or after
        now - window, including trades stamped in the future. Raises NoTradesFound
        when the summed quantity is zero.
        """
        # Whole-second resolution, like the recorded timestamps
        now = self._clock().replace(microsecond=0)
        window_start = now - self.window
        notional = 0
        volume = 0
        for trade in self.trades_since(window_start):
            notional += trade.quantity * trade.price
            volume += trade.quantity
        if volume == 0:
            log.warning("vwap_no_trades", window_start=format_timestamp(window_start), total_trades=len(self._trades))
            raise NoTradesFound(f"No trades with volume since {format_timestamp(window_start)}")
        vwap = notional / volume
        log.debug("vwap_computed", window_start=format_timestamp(window_start), volume=volume, vwap=vwap)
        return vwap

    def geometric_mean(self) -> float:
        """Geometric mean of all recorded prices, accumulated as a mean of logs."""
        n = len(self._trades)
        if n == 0:
            log.warning("geometric_mean_no_trades")
            raise NoTradesFound()
        if any(trade.price == 0 for trade in self._trades):
            log.debug("geometric_mean_computed", trades=n, mean=0.0)
            return 0.0
        mean = math.exp(math.fsum(math.log(trade.price) for trade in self._trades) / n)
        log.debug("geometric_mean_computed", trades=n, mean=mean)
        return mean
