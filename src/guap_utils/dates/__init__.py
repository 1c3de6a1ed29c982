"""
Dates Package

Date formatting, parsing, arithmetic and calendar helpers.
Date-like arguments accept datetime, date, ISO strings or millisecond
timestamps (see dates.parsing).
"""

from .parsing import DateLike, parse_date_string, to_datetime
from .formatting import (
    DT_NUM,
    DTTM_NUM,
    TM_NUM,
    format_date,
    format_duration,
    format_num,
    get_month_name,
    get_month_name_en,
    get_relative_time,
    get_weekday,
    get_weekday_en,
)
from .arithmetic import (
    add_days,
    add_hours,
    add_minutes,
    add_months,
    add_years,
    get_date_end,
    get_date_start,
    get_days_diff,
    get_month_end,
    get_month_start,
    get_prev_day,
    get_timestamp,
    get_today_end,
    get_today_start,
    get_year_end,
    get_year_start,
    timestamp_to_date,
)
from .periods import (
    calculate_age,
    get_date_range,
    get_month_dates,
    get_quarter,
    is_same_month,
    is_same_year,
    is_today,
    is_tomorrow,
    is_weekday,
    is_weekend,
    is_yesterday,
)

__all__ = [
    "DateLike",
    "parse_date_string",
    "to_datetime",
    # formatting
    "DT_NUM",
    "TM_NUM",
    "DTTM_NUM",
    "format_date",
    "format_num",
    "get_relative_time",
    "format_duration",
    "get_weekday",
    "get_weekday_en",
    "get_month_name",
    "get_month_name_en",
    # arithmetic
    "get_timestamp",
    "timestamp_to_date",
    "get_today_start",
    "get_today_end",
    "get_date_start",
    "get_date_end",
    "get_days_diff",
    "add_days",
    "get_prev_day",
    "add_hours",
    "add_minutes",
    "add_months",
    "add_years",
    "get_month_start",
    "get_month_end",
    "get_year_start",
    "get_year_end",
    # periods
    "is_today",
    "is_yesterday",
    "is_tomorrow",
    "is_weekday",
    "is_weekend",
    "get_quarter",
    "calculate_age",
    "is_same_year",
    "is_same_month",
    "get_month_dates",
    "get_date_range",
]
