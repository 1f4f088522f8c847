"""
Date parsing and the 24-hour due-soon classification.

Date-only strings ("2025-07-26") are read as midnight UTC and naive
datetimes are assumed to be UTC, so a scheduled date and a filter bound are
always compared as aware instants.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Any, Optional

DUE_SOON_WINDOW_HOURS = 24


def parse_datetime(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 date or datetime into an aware UTC-based datetime.

    Returns None for anything that is not a valid calendar date.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def is_valid_date(value: Any) -> bool:
    return parse_datetime(value) is not None


def is_within_24_hours(scheduled_date: Any, now: Optional[datetime] = None) -> bool:
    """
    Whether `scheduled_date` falls in the window (now, now + 24h].

    Parameters
    ----------
    scheduled_date : str | date | datetime
        The due date of a payment.
    now : datetime, optional
        Reference instant. Defaults to the current UTC wall clock, read on
        every call.

    Returns
    -------
    bool
        False for past dates, dates more than 24 hours ahead and unparseable
        input.
    """
    when = parse_datetime(scheduled_date)
    if when is None:
        return False

    current = now if now is not None else datetime.now(timezone.utc)
    if current.tzinfo is None:
        current = current.replace(tzinfo=timezone.utc)

    hours = (when - current).total_seconds() / 3600
    return 0 < hours <= DUE_SOON_WINDOW_HOURS


__all__ = ["DUE_SOON_WINDOW_HOURS", "is_valid_date", "is_within_24_hours", "parse_datetime"]
