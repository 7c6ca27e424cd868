"""Tests for the description formatter."""

import pytest

from scheduler.cron import parse_expression
from scheduler.describe import (
    breakdown,
    describe_schedule,
    format_hour,
    format_time,
    is_consecutive,
    ordinal,
)


class TestHelpers:
    """Tests for the small formatting helpers."""

    @pytest.mark.parametrize(
        "values,expected",
        [([], False), ([3], False), ([1, 2, 3], True), ([1, 3], False), ((0, 1), True), ([2, 1], False)],
    )
    def test_is_consecutive(self, values, expected):
        assert is_consecutive(values) is expected

    @pytest.mark.parametrize(
        "n,expected",
        [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"),
         (13, "13th"), (21, "21st"), (22, "22nd"), (23, "23rd"), (31, "31st")],
    )
    def test_ordinal(self, n, expected):
        assert ordinal(n) == expected

    def test_format_hour(self):
        assert format_hour(0) == "12am (midnight)"
        assert format_hour(12) == "12pm (noon)"
        assert format_hour(9) == "9am"
        assert format_hour(17) == "5pm"

    def test_format_time(self):
        assert format_time(9, 5) == "09:05"


class TestDescribeSchedule:
    """Tests for full-sentence descriptions."""

    @pytest.mark.parametrize(
        "expr,expected",
        [
            ("* * * * *", "Every minute."),
            ("* 3 * * *", "Every minute past hour 3."),
            ("* 9-17 * * *", "Every minute from 9am through 5pm."),
            ("* 1,5 * * *", "Every minute past hours 1, 5."),
            ("*/15 * * * *", "At minutes 0, 15, 30, 45 of every hour."),
            ("5 * * * *", "At minute 5 of every hour."),
            ("0 9 * * 1-5", "At 09:00 on every weekday."),
            ("0 9,17 * * *", "At 09:00, 17:00."),
            ("0,30 9 * * *", "At minute 0, 30 past hour 9."),
            ("30 12 1 * *", "At 12:30 on the 1st."),
            ("0 0 1,15 * *", "At 00:00 on the 1st, 15th."),
            ("0 0 * * 0,6", "At 00:00 on weekends."),
            ("0 0 * * 2-4", "At 00:00 on every day-of-week from Tuesday through Thursday."),
            ("0 0 * * 1,3,5", "At 00:00 on Monday, Wednesday, Friday."),
            ("0 0 15 * 1", "At 00:00 on 15th and on Monday."),
            ("0 0 1-7 * 1", "At 00:00 on 1st through 7th and on Monday."),
            ("@yearly", "At 00:00 on the 1st in January."),
            ("0 8 * 6-8 *", "At 08:00 from June through August."),
            ("0 8 * 1,4,7,10 *", "At 08:00 in January, April, July, October."),
            ("@weekly", "At 00:00 on Sunday."),
        ],
    )
    def test_sentences(self, expr, expected):
        assert describe_schedule(parse_expression(expr)) == expected

    def test_deterministic(self):
        schedule = parse_expression("*/10 8-18 * jan-mar mon,wed")
        assert describe_schedule(schedule) == describe_schedule(schedule)


class TestBreakdown:
    """Tests for the per-field breakdown rows."""

    def test_rows(self):
        rows = breakdown(parse_expression("*/15 9 * jan 1-5"))
        assert [row.label for row in rows] == ["Minute", "Hour", "Day of Month", "Month", "Day of Week"]

        minute, hour, dom, month, dow = rows
        assert minute.value == "*/15"
        assert minute.explanation == "Minutes 0, 15, 30, 45"
        assert minute.expanded == "0, 15, 30, 45"
        assert minute.range == "0-59"

        assert hour.explanation == "9am"

        assert dom.explanation == "Every day of month"
        assert dom.expanded == "*"
        assert dom.range == "1-31"

        assert month.value == "1"
        assert month.explanation == "January"

        assert dow.range == "0-7"
        assert dow.explanation == "Monday through Friday"
        assert dow.expanded == "1, 2, 3, 4, 5"

    def test_hour_range_is_capitalized(self):
        rows = breakdown(parse_expression("0 0-2 * * *"))
        assert rows[1].explanation == "12am (midnight) through 2am"
        assert rows[0].explanation == "00"
