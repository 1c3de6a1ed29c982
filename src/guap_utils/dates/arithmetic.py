"""
Module: dates.arithmetic

Purpose:
    Timestamps, day/month/year boundaries and calendar arithmetic.
    Functions return new datetime objects and never modify their input.

Key Functions:
    - get_timestamp(), timestamp_to_date()
    - get_today_start(), get_today_end(), get_date_start(), get_date_end()
    - get_month_start(), get_month_end(), get_year_start(), get_year_end()
    - add_days(), add_hours(), add_minutes(), add_months(), add_years()
    - get_prev_day(), get_days_diff()

Month and year arithmetic clamps the day to the end of the target
month: Jan 31 + 1 month is Feb 28/29, Feb 29 + 1 year is Feb 28.
"""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta
from typing import Optional

from .parsing import (
    DateLike,
    days_between,
    end_of_day,
    from_timestamp_ms,
    start_of_day,
    to_datetime,
    to_timestamp_ms,
)


def get_timestamp(date: DateLike = None) -> Optional[int]:
    """
    Milliseconds since the epoch.

    A falsy ``date`` gives the current timestamp.

    Returns:
        int milliseconds, or None for unparseable strings.
    """
    value = to_datetime(date)
    if value is None:
        return None
    return to_timestamp_ms(value)


def timestamp_to_date(timestamp: float) -> Optional[datetime]:
    """Local datetime for a millisecond timestamp."""
    return from_timestamp_ms(timestamp)


def get_today_start() -> datetime:
    return start_of_day(datetime.now())


def get_today_end() -> datetime:
    return end_of_day(datetime.now())


def get_date_start(date: DateLike = None) -> Optional[datetime]:
    """00:00:00.000 on the given day (today if falsy)."""
    value = to_datetime(date)
    return start_of_day(value) if value is not None else None


def get_date_end(date: DateLike = None) -> Optional[datetime]:
    """23:59:59.999 on the given day (today if falsy)."""
    value = to_datetime(date)
    return end_of_day(value) if value is not None else None


def get_days_diff(date1: DateLike, date2: DateLike) -> Optional[int]:
    """
    Whole days from ``date1`` to ``date2``, floored.

    Returns:
        Day count (negative when date2 is earlier), None if either
        date is missing or unparseable.

    Example:
        >>> get_days_diff("2024-01-01", "2024-01-31")
        30
    """
    start = to_datetime(date1, default_now=False)
    end = to_datetime(date2, default_now=False)
    if start is None or end is None:
        return None
    return days_between(start, end)


def _shift(date: DateLike, delta: timedelta) -> Optional[datetime]:
    value = to_datetime(date)
    if value is None:
        return None
    return value + delta


def add_days(date: DateLike, days: float) -> Optional[datetime]:
    """Shift by ``days`` (may be negative). Falsy ``date`` means now."""
    return _shift(date, timedelta(days=int(days)))


def get_prev_day(date: DateLike = None) -> Optional[datetime]:
    return _shift(date, timedelta(days=-1))


def add_hours(date: DateLike, hours: float) -> Optional[datetime]:
    return _shift(date, timedelta(hours=int(hours)))


def add_minutes(date: DateLike, minutes: float) -> Optional[datetime]:
    return _shift(date, timedelta(minutes=int(minutes)))


def _with_month_offset(value: datetime, months: int) -> datetime:
    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def add_months(date: DateLike, months: int) -> Optional[datetime]:
    """
    Shift by whole months, clamping the day to the target month's length.

    Example:
        >>> add_months(datetime(2024, 1, 31), 1)
        datetime.datetime(2024, 2, 29, 0, 0)
    """
    value = to_datetime(date)
    if value is None:
        return None
    return _with_month_offset(value, int(months))


def add_years(date: DateLike, years: int) -> Optional[datetime]:
    """Shift by whole years; Feb 29 becomes Feb 28 in non-leap years."""
    value = to_datetime(date)
    if value is None:
        return None
    return _with_month_offset(value, int(years) * 12)


def get_month_start(date: DateLike = None) -> Optional[datetime]:
    value = to_datetime(date)
    if value is None:
        return None
    return start_of_day(value.replace(day=1))


def get_month_end(date: DateLike = None) -> Optional[datetime]:
    """Last day of the month at 23:59:59.999."""
    value = to_datetime(date)
    if value is None:
        return None
    last_day = calendar.monthrange(value.year, value.month)[1]
    return end_of_day(value.replace(day=last_day))


def get_year_start(date: DateLike = None) -> Optional[datetime]:
    value = to_datetime(date)
    if value is None:
        return None
    return start_of_day(value.replace(month=1, day=1))


def get_year_end(date: DateLike = None) -> Optional[datetime]:
    value = to_datetime(date)
    if value is None:
        return None
    return end_of_day(value.replace(month=12, day=31))
