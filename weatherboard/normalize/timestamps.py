"""Lenient ISO-8601 parsing for provider time arrays."""

from datetime import date, datetime
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def parse_local_time(value: Any) -> datetime | None:
    """Parse an ISO timestamp such as "2024-01-01T05:00". Returns None on failure.

    The wall clock is kept as sent; no timezone conversion happens.
    """
    if not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def parse_local_date(value: Any) -> date | None:
    """Parse "YYYY-MM-DD" (or a full timestamp) into a date. Returns None on failure."""
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        parsed = parse_local_time(value)
        return parsed.date() if parsed is not None else None


def is_after_current_hour(ts: datetime, now: datetime) -> bool:
    """Whether a sample belongs to the "next hours" window.

    Compares hour-of-day and day-of-month only, not full timestamps, so a
    sample on the 1st of next month is not "after" the 31st at the same or
    a later hour.
    """
    return ts.hour > now.hour or ts.day > now.day


def to_location_time(now: datetime, tz_name: Any) -> datetime:
    """Convert an aware instant to the provider's reported timezone.

    Naive instants and unknown zone names are returned unchanged.
    """
    if now.tzinfo is None or not isinstance(tz_name, str) or not tz_name:
        return now
    try:
        return now.astimezone(ZoneInfo(tz_name))
    except (ZoneInfoNotFoundError, ValueError):
        return now
