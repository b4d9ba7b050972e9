from datetime import date

import pytest

from bid_month import (
    BID_MONTHS,
    build_bid_month_dates,
    get_bid_month_display_range,
    get_bid_month_length,
    get_bid_month_range,
    normalize_month_index,
)


class TestBidMonthCalendar:
    def test_twelve_named_months(self):
        assert len(BID_MONTHS) == 12
        assert BID_MONTHS[0] == "January"
        assert BID_MONTHS[-1] == "December"

    def test_february_spans_three_calendar_months(self):
        start, end = get_bid_month_range(2025, 1)

        assert start == date(2025, 1, 31)
        assert end == date(2025, 3, 1)

    @pytest.mark.parametrize(
        "year, month, length",
        [(2025, 1, 30), (2024, 1, 31), (2025, 0, 30), (2025, 11, 30), (2025, 7, 31)],
    )
    def test_lengths(self, year, month, length):
        assert get_bid_month_length(year, month) == length

    def test_display_range(self):
        assert get_bid_month_display_range(2025, 10) == ("2025-11-01", "2025-12-01")

    @pytest.mark.parametrize("raw, expected", [(-1, 0), (12, 11), (99, 11), (1.5, 0), (5, 5)])
    def test_out_of_range_indices_clamp(self, raw, expected):
        assert normalize_month_index(raw) == expected

    def test_build_dates(self):
        dates = build_bid_month_dates(2025, 1)

        assert len(dates) == 30
        assert dates[0] == date(2025, 1, 31)
        assert dates[-1] == date(2025, 3, 1)

    def test_build_dates_with_day_count(self):
        dates = build_bid_month_dates(2025, 11, day_count=3)
        assert dates == [date(2025, 12, 2), date(2025, 12, 3), date(2025, 12, 4)]
