#!/usr/bin/env python3
"""
Unit tests for UTC date helpers.
"""

from datetime import datetime, timedelta, timezone

import pytest

from campaigen.core.dates import ensure_utc, format_date, parse_date, utc_now


@pytest.mark.unit
class TestDates:
    """Test date parsing and normalisation."""

    def test_utc_now_is_aware_utc(self):
        now = utc_now()
        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)

    def test_naive_datetime_is_treated_as_utc(self):
        result = ensure_utc(datetime(2024, 3, 30, 12, 0))
        assert result == datetime(2024, 3, 30, 12, 0, tzinfo=timezone.utc)

    def test_aware_datetime_is_converted_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        result = ensure_utc(datetime(2024, 3, 30, 12, 0, tzinfo=plus_two))
        assert result == datetime(2024, 3, 30, 10, 0, tzinfo=timezone.utc)
        assert result.tzinfo == timezone.utc

    def test_parse_date_only(self):
        assert parse_date("2024-03-30") == datetime(2024, 3, 30, tzinfo=timezone.utc)

    def test_parse_date_time(self):
        expected = datetime(2024, 3, 30, 14, 5, tzinfo=timezone.utc)
        assert parse_date("2024-03-30 14:05:00") == expected
        assert parse_date("2024-03-30T14:05:00") == expected

    def test_parse_invalid_date_raises(self):
        with pytest.raises(ValueError, match="Invalid date format"):
            parse_date("30/03/2024")

    def test_format_date(self):
        assert format_date(datetime(2024, 3, 30, 23, 59, tzinfo=timezone.utc)) == "2024-03-30"
