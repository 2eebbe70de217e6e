"""Unit tests for timestamp-with-zone formatting."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from inlinesql.quote.timestamps import format_offset, format_timestamp


def test_offset_suffixes():
    assert format_offset(0) == "Z"
    assert format_offset(19800) == "+05:30"
    assert format_offset(-28800) == "-08:00"
    assert format_offset(-(9 * 3600 + 30 * 60)) == "-09:30"


def test_offset_seconds_are_dropped():
    assert format_offset(3600 + 59) == "+01:00"
    assert format_offset(-45) == "-00:00"


def test_timestamp_truncated_to_seconds_without_microseconds():
    value = datetime(1999, 12, 31, 23, 59, 59, tzinfo=timezone(timedelta(hours=14)))
    assert format_timestamp(value) == "1999-12-31T23:59:59+14:00"


def test_timestamp_microseconds_zero_padded():
    value = datetime(2024, 6, 1, 8, 0, 0, 1, tzinfo=timezone.utc)
    assert format_timestamp(value) == "2024-06-01T08:00:00.000001Z"


def test_early_years_keep_four_digits():
    value = datetime(33, 1, 1, tzinfo=timezone.utc)
    assert format_timestamp(value) == "0033-01-01T00:00:00Z"


def test_naive_datetime_rejected():
    with pytest.raises(ValueError):
        format_timestamp(datetime(2024, 1, 1))
