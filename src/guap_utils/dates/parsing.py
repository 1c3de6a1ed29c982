"""
Module: dates.parsing

Purpose:
    Normalises the date-like values accepted across the dates package
    into ``datetime`` objects.

Accepted inputs:
    - datetime: returned as-is when naive, converted to local time when aware
    - date: midnight of that day
    - int/float: milliseconds since the epoch, local time
    - str: ISO-8601 (``2024-01-15``, ``2024-01-15T10:30:00``, trailing ``Z``)
      or slash dates (``2024/01/15``, ``2024/01/15 10:30[:00]``)

Naive datetimes are local time throughout the package. Offset-aware
values (a trailing ``Z``, ``+08:00``) are converted to naive local time
so that any two results can be compared or subtracted.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Optional, Union

logger = logging.getLogger(__name__)

DateLike = Union[datetime, date, str, int, float, None]

MS_PER_SECOND = 1000
MS_PER_DAY = 24 * 60 * 60 * MS_PER_SECOND

_FALLBACK_FORMATS = (
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d %H:%M",
    "%Y%m%d",
    "%Y%m%d%H%M%S",
)


def parse_date_string(text: str) -> Optional[datetime]:
    """
    Parse a date string.

    Returns:
        datetime, or None if no supported format matches.

    Example:
        >>> parse_date_string("2024/01/15 08:30")
        datetime.datetime(2024, 1, 15, 8, 30)
    """
    value = text.strip()
    if not value:
        return None

    iso = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
    try:
        return datetime.fromisoformat(iso)
    except ValueError:
        pass

    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue

    logger.debug("Unparseable date string: %r", text)
    return None


def from_timestamp_ms(value: float) -> Optional[datetime]:
    """Local datetime for a millisecond epoch timestamp, None if out of range."""
    try:
        return datetime.fromtimestamp(value / MS_PER_SECOND)
    except (OverflowError, OSError, ValueError):
        return None


def to_timestamp_ms(value: datetime) -> int:
    """Milliseconds since the epoch for a datetime (naive = local)."""
    return round(value.timestamp() * MS_PER_SECOND)


def to_datetime(value: DateLike, *, default_now: bool = True) -> Optional[datetime]:
    """
    Coerce a date-like value to a datetime.

    Args:
        value: See module docstring for accepted types
        default_now: Return the current time for falsy values (None, "", 0)

    Returns:
        datetime, or None when the value is falsy (and default_now is off),
        unparseable, or of an unsupported type.
    """
    if isinstance(value, datetime):
        return to_local_naive(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not value:
        return datetime.now() if default_now else None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if value != value:  # NaN
            return None
        return from_timestamp_ms(value)
    if isinstance(value, str):
        parsed = parse_date_string(value)
        return to_local_naive(parsed) if parsed is not None else None
    return None


def to_local_naive(value: datetime) -> datetime:
    """Naive local time for ``value``; naive input is returned unchanged."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def reference_time(now: Optional[datetime] = None) -> datetime:
    """``now`` as naive local time, or the current time when omitted."""
    return to_local_naive(now) if now else datetime.now()


def start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(value: datetime) -> datetime:
    """23:59:59.999 on the same day (millisecond precision)."""
    return value.replace(hour=23, minute=59, second=59, microsecond=999000)


def days_between(start: datetime, end: datetime) -> int:
    """Whole days from start to end, floored (negative if end is earlier)."""
    delta: timedelta = end - start
    return int((delta.total_seconds() * MS_PER_SECOND) // MS_PER_DAY)
