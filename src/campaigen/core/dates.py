#!/usr/bin/env python3
"""
Date and Time Helpers

All persisted timestamps are timezone-aware UTC. Naive datetimes coming from
the command line or the database are interpreted as UTC.
"""

from datetime import date, datetime, timezone

# Accepted --date input formats, most specific first
DATE_INPUT_FORMATS = [
    "%Y-%m-%d",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
]


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """
    Normalise a datetime to aware UTC.

    Naive values are assumed to already be UTC; aware values are converted.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_date(value: str) -> datetime:
    """
    Parse a user-supplied date or date-time into aware UTC.

    Args:
        value: Date string such as "2024-03-30" or "2024-03-30 14:05:00"

    Returns:
        Aware UTC datetime (midnight for date-only input)

    Raises:
        ValueError: If the string matches none of DATE_INPUT_FORMATS
    """
    text = value.strip()
    for fmt in DATE_INPUT_FORMATS:
        try:
            return ensure_utc(datetime.strptime(text, fmt))
        except ValueError:
            continue
    raise ValueError(f"Invalid date format: {value}. Use YYYY-MM-DD")


def to_date(value: datetime) -> date:
    """UTC calendar date of a timestamp."""
    return ensure_utc(value).date()


def format_date(value: datetime) -> str:
    """Format as YYYY-MM-DD."""
    return to_date(value).isoformat()
