import re

import pytest

from normalizer import (
    hours_to_clock,
    month_display_range,
    parse_calendar_day,
    parse_clock,
    parse_layover,
)

CLOCK_RE = re.compile(r"^\d{2}:\d{2}$")


class TestHoursToClock:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (1.5, "01:30"),
            (0, "00:00"),
            (8.0, "08:00"),
            ("12.30", "12:18"),
            (0.25, "00:15"),
        ],
    )
    def test_values(self, value, expected):
        assert hours_to_clock(value) == expected

    @pytest.mark.parametrize("h", [0, 0.01, 0.5, 1, 2.75, 9.15, 23.99])
    def test_shape(self, h):
        assert CLOCK_RE.match(hours_to_clock(h))

    @pytest.mark.parametrize("value", [None, "abc", "1.15X", float("nan"), float("inf")])
    def test_no_value(self, value):
        assert hours_to_clock(value) is None


class TestParseClock:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("1630", "16:30"),
            ("930", "09:30"),
            ("0600/1100", "06:00"),
            ("", None),
            (None, None),
            ("12", None),
            ("16:30", None),
            ("12345", None),
        ],
    )
    def test_parse_clock(self, value, expected):
        assert parse_clock(value) == expected


class TestParseCalendarDay:
    def test_second_number_is_day_of_month(self):
        assert parse_calendar_day("12/25", 11, 2025) == "2025-12-25"

    def test_lone_number(self):
        assert parse_calendar_day("7", 0, 2026) == "2026-01-07"

    def test_day_past_month_end_rolls_over(self):
        assert parse_calendar_day("2/30", 1, 2025) == "2025-03-02"

    @pytest.mark.parametrize("token", [None, "", "x/y", "DEC", "123"])
    def test_no_day_number(self, token):
        assert parse_calendar_day(token, 11, 2025) is None

    def test_long_day_part_uses_first_two_digits(self):
        assert parse_calendar_day("12/99999999", 11, 2025) == "2026-03-09"

    def test_past_last_representable_date(self):
        assert parse_calendar_day("12/31", 11, 9999) == "9999-12-31"
        assert parse_calendar_day("12/40", 11, 9999) is None


class TestMonthDisplayRange:
    def test_leap_february(self):
        assert month_display_range(1, 2024) == ("2024-02-01", "2024-02-29")

    def test_december(self):
        assert month_display_range(11, 2025) == ("2025-12-01", "2025-12-31")


class TestParseLayover:
    def test_hotel_line(self):
        layover = parse_layover("ord HOTEL HILTON 12.45")

        assert layover.station == "ORD"
        assert layover.hotel_name == "HOTEL HILTON 12.45"
        assert layover.ground_rest == "12:27"
        assert layover.hotel_phone is None
        assert layover.transport_name is None
        assert layover.transport_phone is None

    def test_no_rest_figure(self):
        layover = parse_layover("LGA HOTEL")
        assert layover.ground_rest is None
        assert layover.hotel_name == "HOTEL"

    def test_missing(self):
        assert parse_layover(None) is None
