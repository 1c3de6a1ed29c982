"""
Unit Tests for dates.periods
"""
from datetime import datetime, timezone

import pytest

from guap_utils.dates import (
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

NOW = datetime(2024, 3, 1, 9, 0)


class TestRelativeDays:

    def test_is_today(self):
        assert is_today(datetime(2024, 3, 1, 23, 59), now=NOW) is True
        assert is_today(datetime(2024, 2, 29, 23, 59), now=NOW) is False

    def test_is_yesterday_across_leap_day(self):
        assert is_yesterday("2024-02-29", now=NOW) is True

    def test_is_tomorrow(self):
        assert is_tomorrow("2024-03-02 00:00", now=NOW) is True
        assert is_tomorrow("2024-03-01", now=NOW) is False

    def test_is_today_when_real_clock(self):
        assert is_today(datetime.now()) is True

    @pytest.mark.parametrize("value", [None, "", "junk"])
    def test_relative_days_when_invalid_then_false(self, value):
        assert is_today(value) is False
        assert is_yesterday(value) is False
        assert is_tomorrow(value) is False


class TestWeekdays:

    @pytest.mark.parametrize(
        "value, weekday",
        [
            ("2024-01-13", False),  # Saturday
            ("2024-01-14", False),  # Sunday
            ("2024-01-15", True),   # Monday
            ("2024-01-19", True),   # Friday
        ],
    )
    def test_is_weekday_and_weekend(self, value, weekday):
        assert is_weekday(value) is weekday
        assert is_weekend(value) is (not weekday)

    def test_when_invalid_then_false(self):
        assert is_weekday("bad") is False
        assert is_weekend("bad") is False


class TestQuarterAndAge:

    @pytest.mark.parametrize(
        "month, quarter",
        [(1, 1), (3, 1), (4, 2), (6, 2), (7, 3), (10, 4), (12, 4)],
    )
    def test_get_quarter(self, month, quarter):
        assert get_quarter(datetime(2024, month, 15)) == quarter

    def test_calculate_age_before_birthday(self):
        assert calculate_age("2000-06-15", "2024-06-14") == 23

    def test_calculate_age_on_birthday(self):
        assert calculate_age("2000-06-15", "2024-06-15") == 24

    def test_calculate_age_when_missing_then_zero(self):
        assert calculate_age(None) == 0
        assert calculate_age("bad") == 0


class TestSamePeriod:

    def test_is_same_year(self):
        assert is_same_year("2024-01-01", "2024-12-31") is True
        assert is_same_year("2023-12-31", "2024-01-01") is False

    def test_is_same_month(self):
        assert is_same_month("2024-02-01", "2024-02-29") is True
        assert is_same_month("2023-02-01", "2024-02-01") is False

    def test_same_period_when_missing_then_false(self):
        assert is_same_year(None, "2024-01-01") is False
        assert is_same_month("2024-01-01", "") is False


class TestSequences:

    def test_get_month_dates_when_leap_february(self):
        result = get_month_dates("2024-02-10")

        assert len(result) == 29
        assert result[0] == datetime(2024, 2, 1)
        assert result[-1] == datetime(2024, 2, 29)

    def test_get_month_dates_when_format_then_strings(self):
        result = get_month_dates(datetime(2023, 4, 5), "MM-DD")

        assert len(result) == 30
        assert result[:2] == ["04-01", "04-02"]

    def test_get_date_range_forward(self):
        assert get_date_range("2024-01-30", 2, "MM-DD") == ["01-30", "01-31", "02-01"]

    def test_get_date_range_backward_is_ascending(self):
        result = get_date_range(datetime(2024, 3, 1, 18), -2)

        assert result == [datetime(2024, 2, 28), datetime(2024, 2, 29), datetime(2024, 3, 1)]

    def test_get_date_range_zero_days(self):
        assert get_date_range("2024-05-05", 0, "YYYY-MM-DD") == ["2024-05-05"]

    @pytest.mark.parametrize("days", [None, "3", True, float("nan")])
    def test_get_date_range_when_days_not_number_then_empty(self, days):
        assert get_date_range("2024-01-01", days) == []


class TestMixedTimezones:

    def test_is_today_when_utc_string_and_aware_now(self):
        now = datetime(2024, 3, 1, 12, tzinfo=timezone.utc)
        assert is_today("2024-03-01T12:00:00Z", now=now) is True

    def test_is_same_month_when_utc_string_and_naive_date(self):
        value = datetime.fromtimestamp(datetime(2024, 5, 15, tzinfo=timezone.utc).timestamp())
        assert is_same_month("2024-05-15T00:00:00Z", value) is True
