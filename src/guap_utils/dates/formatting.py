"""
Module: dates.formatting

Purpose:
    String output for dates and durations: token-based formatting,
    digit-string reformatting, relative times, durations and
    weekday/month names (Chinese and English).

Key Functions:
    - format_date(): YYYY/MM/DD/HH/mm/ss/SSS token formatting
    - format_num(): "20240115" -> "2024-01-15" style reformatting
    - get_relative_time(): 刚刚 / 5分钟前 / 2小时前 ...
    - format_duration(): 1天2小时3分钟 ...
    - get_weekday(), get_weekday_en(), get_month_name(), get_month_name_en()
"""

from __future__ import annotations

import math
import re
from datetime import datetime
from typing import Any, Optional

from guap_utils.config import DEFAULT_DATE_FORMAT
from .parsing import DateLike, MS_PER_SECOND, reference_time, to_datetime


WEEKDAYS_ZH = ("星期日", "星期一", "星期二", "星期三", "星期四", "星期五", "星期六")
WEEKDAYS_EN = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
WEEKDAYS_EN_SHORT = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTHS_ZH = (
    "一月", "二月", "三月", "四月", "五月", "六月",
    "七月", "八月", "九月", "十月", "十一月", "十二月",
)
MONTHS_EN = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
MONTHS_EN_SHORT = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Digit-string layouts for format_num
DT_NUM = "DT_NUM"      # YYYYMMDD -> YYYY-MM-DD
TM_NUM = "TM_NUM"      # HHmmss -> HH:mm:ss
DTTM_NUM = "DTTM_NUM"  # YYYYMMDDHHmmss -> YYYY-MM-DD HH:mm:ss

_NUM_LAYOUTS = {
    DT_NUM: (8, re.compile(r"^(\d{4})(\d{2})(\d{2})$"), r"\1-\2-\3"),
    TM_NUM: (6, re.compile(r"^(\d{2})(\d{2})(\d{2})$"), r"\1:\2:\3"),
    DTTM_NUM: (
        14,
        re.compile(r"^(\d{4})(\d{2})(\d{2})(\d{2})(\d{2})(\d{2})$"),
        r"\1-\2-\3 \4:\5:\6",
    ),
}


def sunday_index(value: datetime) -> int:
    """Day of week with Sunday = 0 ... Saturday = 6."""
    return (value.weekday() + 1) % 7


def format_date(date: DateLike = None, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    """
    Format a date with YYYY/MM/DD/HH/mm/ss/SSS tokens.

    Each token is replaced once (first occurrence), in that order.
    A falsy ``date`` formats the current time.

    Returns:
        Formatted string, "" if ``date`` cannot be parsed.

    Example:
        >>> format_date(datetime(2024, 1, 5, 8, 3, 9), "YYYY/MM/DD HH:mm")
        '2024/01/05 08:03'
    """
    value = to_datetime(date)
    if value is None:
        return ""

    replacements = (
        ("YYYY", str(value.year)),
        ("MM", f"{value.month:02d}"),
        ("DD", f"{value.day:02d}"),
        ("HH", f"{value.hour:02d}"),
        ("mm", f"{value.minute:02d}"),
        ("ss", f"{value.second:02d}"),
        ("SSS", f"{value.microsecond // 1000:03d}"),
    )
    result = fmt
    for token, text in replacements:
        result = result.replace(token, text, 1)
    return result


def format_num(num_str: Any, num_type: str = DTTM_NUM) -> str:
    """
    Reformat a compact digit string as a date, time or datetime.

    Non-digits are stripped first. For an unknown ``num_type`` the layout
    is picked from the digit count (8, 6 or 14).

    Returns:
        Reformatted string, or the stripped digits when the length does
        not fit the layout. "" for falsy input.

    Example:
        >>> format_num("20240115093000")
        '2024-01-15 09:30:00'
        >>> format_num(20240115, "DT_NUM")
        '2024-01-15'
    """
    if not num_str:
        return ""

    digits = re.sub(r"\D", "", str(num_str))

    if num_type in _NUM_LAYOUTS:
        candidates = [_NUM_LAYOUTS[num_type]]
    else:
        candidates = [_NUM_LAYOUTS[DT_NUM], _NUM_LAYOUTS[TM_NUM], _NUM_LAYOUTS[DTTM_NUM]]

    for length, pattern, template in candidates:
        if len(digits) == length:
            return pattern.sub(template, digits)
    return digits


def get_relative_time(date: DateLike, now: Optional[datetime] = None) -> str:
    """
    Describe how long ago ``date`` was, in Chinese.

    Months are 30 days and years 365 days. Future dates read as 刚刚.

    Args:
        date: Past date
        now: Reference time (default: current time)

    Returns:
        e.g. "刚刚", "5分钟前", "2小时前", "3天前", "4个月前", "1年前";
        "" for falsy or unparseable input.
    """
    value = to_datetime(date, default_now=False)
    if value is None:
        return ""

    reference = reference_time(now)
    diff_ms = (reference - value).total_seconds() * MS_PER_SECOND
    seconds = math.floor(diff_ms / 1000)
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24
    months = days // 30
    years = days // 365

    if seconds < 60:
        return "刚刚"
    if minutes < 60:
        return f"{minutes}分钟前"
    if hours < 24:
        return f"{hours}小时前"
    if days < 30:
        return f"{days}天前"
    if months < 12:
        return f"{months}个月前"
    return f"{years}年前"


def format_duration(milliseconds: Any) -> str:
    """
    Human-readable duration in Chinese units.

    Shows the two or three most significant units:
    天/小时/分钟 above a day, 小时/分钟/秒 above an hour, and so on.

    Returns:
        e.g. "1天2小时3分钟", "5分钟30秒"; "0秒" for zero, negative or
        non-numeric input.
    """
    if (
        isinstance(milliseconds, bool)
        or not isinstance(milliseconds, (int, float))
        or milliseconds != milliseconds
        or milliseconds <= 0
    ):
        return "0秒"

    seconds = math.floor(milliseconds / 1000)
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24

    if days > 0:
        return f"{days}天{hours % 24}小时{minutes % 60}分钟"
    if hours > 0:
        return f"{hours}小时{minutes % 60}分钟{seconds % 60}秒"
    if minutes > 0:
        return f"{minutes}分钟{seconds % 60}秒"
    return f"{seconds}秒"


def get_weekday(date: DateLike = None) -> Optional[str]:
    """Chinese weekday name (星期一 ...). None for unparseable input."""
    value = to_datetime(date)
    if value is None:
        return None
    return WEEKDAYS_ZH[sunday_index(value)]


def get_weekday_en(date: DateLike = None, short: bool = False) -> Optional[str]:
    """English weekday name, optionally abbreviated (Mon, Tue ...)."""
    value = to_datetime(date)
    if value is None:
        return None
    names = WEEKDAYS_EN_SHORT if short else WEEKDAYS_EN
    return names[sunday_index(value)]


def get_month_name(date: DateLike = None) -> Optional[str]:
    """Chinese month name (一月 ... 十二月)."""
    value = to_datetime(date)
    if value is None:
        return None
    return MONTHS_ZH[value.month - 1]


def get_month_name_en(date: DateLike = None, short: bool = False) -> Optional[str]:
    value = to_datetime(date)
    if value is None:
        return None
    names = MONTHS_EN_SHORT if short else MONTHS_EN
    return names[value.month - 1]
