"""
Module: dates.periods

Purpose:
    Calendar predicates and date sequences: today/yesterday/tomorrow
    checks, weekday/weekend, quarters, ages, and lists of days.

Key Functions:
    - is_today(), is_yesterday(), is_tomorrow()
    - is_weekday(), is_weekend(), get_quarter()
    - calculate_age()
    - is_same_year(), is_same_month()
    - get_month_dates(), get_date_range()
"""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta
from typing import Any, List, Optional, Union

from .formatting import format_date, sunday_index
from .parsing import DateLike, reference_time, start_of_day, to_datetime


def _is_offset_day(date: DateLike, offset: int, now: Optional[datetime]) -> bool:
    value = to_datetime(date, default_now=False)
    if value is None:
        return False
    reference = reference_time(now)
    return value.date() == (reference + timedelta(days=offset)).date()


def is_today(date: DateLike, now: Optional[datetime] = None) -> bool:
    """True when ``date`` falls on the current day. False for falsy input."""
    return _is_offset_day(date, 0, now)


def is_yesterday(date: DateLike, now: Optional[datetime] = None) -> bool:
    return _is_offset_day(date, -1, now)


def is_tomorrow(date: DateLike, now: Optional[datetime] = None) -> bool:
    return _is_offset_day(date, 1, now)


def is_weekday(date: DateLike = None) -> bool:
    """Monday to Friday. Falsy input checks today."""
    value = to_datetime(date)
    return value is not None and 1 <= sunday_index(value) <= 5


def is_weekend(date: DateLike = None) -> bool:
    value = to_datetime(date)
    return value is not None and sunday_index(value) in (0, 6)


def get_quarter(date: DateLike = None) -> Optional[int]:
    """Quarter 1-4 of the given date (today if falsy)."""
    value = to_datetime(date)
    if value is None:
        return None
    return (value.month - 1) // 3 + 1


def calculate_age(birth_date: DateLike, reference_date: DateLike = None) -> int:
    """
    Age in completed years at ``reference_date`` (default: today).

    Returns:
        Age in years; 0 for missing or unparseable birth dates.

    Example:
        >>> calculate_age("2000-06-15", "2024-06-14")
        23
    """
    birth = to_datetime(birth_date, default_now=False)
    reference = to_datetime(reference_date)
    if birth is None or reference is None:
        return 0

    age = reference.year - birth.year
    if (reference.month, reference.day) < (birth.month, birth.day):
        age -= 1
    return age


def is_same_year(date1: DateLike, date2: DateLike) -> bool:
    first = to_datetime(date1, default_now=False)
    second = to_datetime(date2, default_now=False)
    if first is None or second is None:
        return False
    return first.year == second.year


def is_same_month(date1: DateLike, date2: DateLike) -> bool:
    first = to_datetime(date1, default_now=False)
    second = to_datetime(date2, default_now=False)
    if first is None or second is None:
        return False
    return (first.year, first.month) == (second.year, second.month)


def _emit(value: datetime, fmt: Optional[str]) -> Union[datetime, str]:
    return format_date(value, fmt) if fmt else value


def get_month_dates(
    date: DateLike = None,
    fmt: Optional[str] = None,
) -> List[Union[datetime, str]]:
    """
    Every day of the month containing ``date``.

    Args:
        date: Any day in the month (default: today)
        fmt: format_date pattern; when omitted, midnight datetimes are returned

    Returns:
        One entry per day, first to last. [] for unparseable input.
    """
    value = to_datetime(date)
    if value is None:
        return []

    days_in_month = calendar.monthrange(value.year, value.month)[1]
    return [
        _emit(datetime(value.year, value.month, day), fmt)
        for day in range(1, days_in_month + 1)
    ]


def get_date_range(
    date: DateLike,
    days: Any,
    fmt: Optional[str] = None,
) -> List[Union[datetime, str]]:
    """
    Consecutive days between ``date`` and ``date + days``, inclusive.

    Negative ``days`` counts backwards; the result is always ascending.

    Args:
        date: Base date (default: today when falsy)
        days: Day offset, positive or negative
        fmt: Optional format_date pattern

    Returns:
        ``abs(days) + 1`` entries at midnight. [] if ``days`` isn't a number.

    Example:
        >>> get_date_range("2024-01-30", 2, "MM-DD")
        ['01-30', '01-31', '02-01']
    """
    if isinstance(days, bool) or not isinstance(days, (int, float)) or days != days:
        return []

    value = to_datetime(date)
    if value is None:
        return []

    base = start_of_day(value)
    other = base + timedelta(days=int(days))
    start, end = min(base, other), max(base, other)

    result: List[Union[datetime, str]] = []
    current = start
    while current <= end:
        result.append(_emit(current, fmt))
        current += timedelta(days=1)
    return result
