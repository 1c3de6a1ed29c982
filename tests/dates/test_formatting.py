"""
Unit Tests for dates.parsing and dates.formatting
"""
from datetime import date, datetime, timedelta, timezone

import pytest

from guap_utils.dates import (
    format_date,
    format_duration,
    format_num,
    get_month_name,
    get_month_name_en,
    get_relative_time,
    get_weekday,
    get_weekday_en,
    parse_date_string,
    to_datetime,
)


class TestToDatetime:

    def test_when_datetime_then_same_object(self):
        value = datetime(2024, 1, 15, 10, 30)
        assert to_datetime(value) is value

    def test_when_date_then_midnight(self):
        assert to_datetime(date(2024, 1, 15)) == datetime(2024, 1, 15)

    def test_when_ms_timestamp_then_local_datetime(self):
        expected = datetime(2024, 1, 15, 10, 30)
        millis = int(expected.timestamp() * 1000)
        assert to_datetime(millis) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("2024-01-15", datetime(2024, 1, 15)),
            ("2024-01-15T08:05:09", datetime(2024, 1, 15, 8, 5, 9)),
            ("2024-01-15 08:05", datetime(2024, 1, 15, 8, 5)),
            ("2024/01/15", datetime(2024, 1, 15)),
            ("2024/01/15 08:05:09", datetime(2024, 1, 15, 8, 5, 9)),
        ],
    )
    def test_when_string_then_parsed(self, text, expected):
        assert to_datetime(text) == expected

    def test_when_utc_suffix_then_aware(self):
        value = parse_date_string("2024-01-15T08:00:00Z")
        assert value == datetime(2024, 1, 15, 8, tzinfo=timezone.utc)

    def test_when_aware_then_local_naive(self):
        aware = datetime(2024, 1, 15, 8, tzinfo=timezone.utc)

        value = to_datetime("2024-01-15T08:00:00Z")

        assert value.tzinfo is None
        assert value == datetime.fromtimestamp(aware.timestamp())
        assert to_datetime(aware) == value

    def test_when_falsy_then_now_by_default(self):
        before = datetime.now()
        value = to_datetime(None)
        assert before <= value <= datetime.now()

    def test_when_falsy_and_no_default_then_none(self):
        assert to_datetime("", default_now=False) is None

    @pytest.mark.parametrize("value", ["not a date", "2024-13-45", True, [2024], float("nan")])
    def test_when_invalid_then_none(self, value):
        assert to_datetime(value) is None


class TestFormatDate:

    def test_format_date_when_default_format(self):
        assert format_date(datetime(2024, 3, 5, 7, 8, 9)) == "2024-03-05 07:08:09"

    def test_format_date_when_custom_tokens(self):
        value = datetime(2024, 3, 5, 7, 8, 9, 45000)
        assert format_date(value, "DD/MM/YYYY HH:mm:ss.SSS") == "05/03/2024 07:08:09.045"

    def test_format_date_when_token_repeated_then_first_only(self):
        assert format_date(datetime(2024, 3, 5), "YYYY YYYY") == "2024 YYYY"

    def test_format_date_when_string_input(self):
        assert format_date("2024-12-25", "YYYY年MM月DD日") == "2024年12月25日"

    def test_format_date_when_utc_string_then_local_wall_time(self):
        local = datetime.fromtimestamp(datetime(2024, 1, 15, 10, tzinfo=timezone.utc).timestamp())
        assert format_date("2024-01-15T10:00:00Z") == format_date(local)

    def test_format_date_when_offset_string_then_local_wall_time(self):
        utc = datetime(2024, 1, 15, 2, tzinfo=timezone.utc)
        local = datetime.fromtimestamp(utc.timestamp())
        assert format_date("2024-01-15T10:00:00+08:00", "YYYY-MM-DD HH:mm") == format_date(local, "YYYY-MM-DD HH:mm")

    def test_format_date_when_invalid_then_empty(self):
        assert format_date("garbage") == ""

    def test_format_date_when_none_then_now(self):
        assert format_date(None, "YYYY") == str(datetime.now().year)


class TestFormatNum:

    @pytest.mark.parametrize(
        "value, num_type, expected",
        [
            ("20240115", "DT_NUM", "2024-01-15"),
            (93000, "TM_NUM", "93000"),
            ("093000", "TM_NUM", "09:30:00"),
            ("20240115093000", "DTTM_NUM", "2024-01-15 09:30:00"),
            ("2024-01-15 09:30:00", "DTTM_NUM", "2024-01-15 09:30:00"),
            ("20240115", "DTTM_NUM", "20240115"),
            ("20240115", "AUTO", "2024-01-15"),
            ("123456", "AUTO", "12:34:56"),
            ("20240115093000", "AUTO", "2024-01-15 09:30:00"),
            ("12345", "AUTO", "12345"),
        ],
    )
    def test_format_num_cases(self, value, num_type, expected):
        assert format_num(value, num_type) == expected

    def test_format_num_when_default_type_is_datetime(self):
        assert format_num(20240115093000) == "2024-01-15 09:30:00"

    @pytest.mark.parametrize("value", [None, "", 0])
    def test_format_num_when_falsy_then_empty(self, value):
        assert format_num(value) == ""


class TestRelativeTime:
    NOW = datetime(2024, 6, 1, 12, 0, 0)

    @pytest.mark.parametrize(
        "delta, expected",
        [
            (timedelta(seconds=30), "刚刚"),
            (timedelta(minutes=5), "5分钟前"),
            (timedelta(hours=2, minutes=59), "2小时前"),
            (timedelta(days=3), "3天前"),
            (timedelta(days=65), "2个月前"),
            (timedelta(days=800), "2年前"),
            (timedelta(minutes=-10), "刚刚"),
        ],
    )
    def test_relative_time_when_past_then_described(self, delta, expected):
        assert get_relative_time(self.NOW - delta, now=self.NOW) == expected

    def test_relative_time_when_utc_date_and_aware_now(self):
        now = datetime(2024, 1, 2, tzinfo=timezone.utc)
        assert get_relative_time("2024-01-01T00:00:00Z", now=now) == "1天前"

    def test_relative_time_when_utc_date_and_naive_now(self):
        value = "2024-01-01T00:00:00Z"
        now = datetime.fromtimestamp(datetime(2024, 1, 1, 3, tzinfo=timezone.utc).timestamp())

        assert get_relative_time(value, now=now) == "3小时前"

    @pytest.mark.parametrize("value", [None, "", "nonsense"])
    def test_relative_time_when_invalid_then_empty(self, value):
        assert get_relative_time(value) == ""


class TestFormatDuration:

    @pytest.mark.parametrize(
        "millis, expected",
        [
            (45_000, "45秒"),
            (125_000, "2分钟5秒"),
            (3_725_000, "1小时2分钟5秒"),
            (90_061_000, "1天1小时1分钟"),
            (999, "0秒"),
        ],
    )
    def test_format_duration_cases(self, millis, expected):
        assert format_duration(millis) == expected

    @pytest.mark.parametrize("value", [0, -5, None, "100", float("nan"), True])
    def test_format_duration_when_invalid_then_zero(self, value):
        assert format_duration(value) == "0秒"


class TestNames:
    MONDAY = datetime(2024, 1, 15)
    SUNDAY = datetime(2024, 1, 14)

    def test_weekday_zh(self):
        assert get_weekday(self.MONDAY) == "星期一"
        assert get_weekday(self.SUNDAY) == "星期日"

    def test_weekday_en(self):
        assert get_weekday_en(self.MONDAY) == "Monday"
        assert get_weekday_en(self.SUNDAY, short=True) == "Sun"

    def test_month_names(self):
        assert get_month_name(datetime(2024, 11, 3)) == "十一月"
        assert get_month_name_en(datetime(2024, 9, 3)) == "September"
        assert get_month_name_en(datetime(2024, 9, 3), short=True) == "Sep"

    def test_names_when_invalid_then_none(self):
        assert get_weekday("bad") is None
        assert get_month_name_en("bad") is None
