"""Strict parsing of trade timestamps (YYYY-MM-DD HH:MM:SS, local time, no zone)."""

from __future__ import annotations

import re
from datetime import datetime

from stockmetrics.errors import MalformedTimestamp

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# strptime alone accepts unpadded fields ("2024-1-1 9:5:0"); the pattern pins the width
_TIMESTAMP_RE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}")


def parse_timestamp(value: str | datetime) -> datetime:
    """
    Parse a trade timestamp into a naive local datetime.

    datetime values pass through truncated to whole seconds; timezone-aware ones
    are converted to naive local time so they order against parsed text.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone().replace(tzinfo=None)
        return value.replace(microsecond=0)
    if not isinstance(value, str) or not _TIMESTAMP_RE.fullmatch(value):
        raise MalformedTimestamp(value)
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError as exc:
        # Right shape, impossible date (e.g. 2024-02-30 or 25:00:00)
        raise MalformedTimestamp(value) from exc


def format_timestamp(ts: datetime) -> str:
    return ts.strftime(TIMESTAMP_FORMAT)
