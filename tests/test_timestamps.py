"""Strict YYYY-MM-DD HH:MM:SS parsing."""

from datetime import datetime, timezone

import pytest

from stockmetrics.errors import MalformedTimestamp
from stockmetrics.ledger import format_timestamp, parse_timestamp


def test_parse_valid():
    assert parse_timestamp("2024-01-01 23:59:05") == datetime(2024, 1, 1, 23, 59, 5)


def test_datetime_passes_through_truncated():
    ts = datetime(2024, 3, 4, 5, 6, 7, 891011)
    assert parse_timestamp(ts) == datetime(2024, 3, 4, 5, 6, 7)


@pytest.mark.parametrize(
    "bad",
    [
        "",
        "2024-01-01",
        "2024-01-01T10:00:00",
        "2024-1-1 10:00:00",
        "2024-01-01 10:00:00.5",
        "2024-01-01 10:00:00+00:00",
        " 2024-01-01 10:00:00",
        "2024-02-30 10:00:00",
        "2024-01-01 24:00:00",
        None,
        1704103200,
    ],
)
def test_malformed(bad):
    with pytest.raises(MalformedTimestamp):
        parse_timestamp(bad)


def test_format_round_trips_text():
    assert format_timestamp(parse_timestamp("2024-12-31 00:00:01")) == "2024-12-31 00:00:01"


def test_aware_datetime_converted_to_naive_local():
    aware = datetime(2024, 6, 1, 12, 0, 0, 250000, tzinfo=timezone.utc)
    parsed = parse_timestamp(aware)
    assert parsed.tzinfo is None
    assert parsed == aware.astimezone().replace(tzinfo=None, microsecond=0)
