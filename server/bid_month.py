# bid_month.py
"""
Airline bid-month calendar.

Bid months do not line up with calendar months: February, for instance,
runs from Jan 31 through Mar 1. Month indices are 0-based, like the packet
metadata's month lookup.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class BidMonthDefinition:
    name: str
    start_month: int  # 0-based
    start_day: int
    end_month: int
    end_day: int


BID_MONTH_DEFINITIONS: List[BidMonthDefinition] = [
    BidMonthDefinition("January", 0, 1, 0, 30),
    BidMonthDefinition("February", 0, 31, 2, 1),
    BidMonthDefinition("March", 2, 2, 2, 31),
    BidMonthDefinition("April", 3, 1, 4, 1),
    BidMonthDefinition("May", 4, 2, 5, 1),
    BidMonthDefinition("June", 5, 2, 6, 1),
    BidMonthDefinition("July", 6, 2, 6, 31),
    BidMonthDefinition("August", 7, 1, 7, 31),
    BidMonthDefinition("September", 8, 1, 8, 30),
    BidMonthDefinition("October", 9, 1, 9, 31),
    BidMonthDefinition("November", 10, 1, 11, 1),
    BidMonthDefinition("December", 11, 2, 11, 31),
]

BID_MONTHS = [d.name for d in BID_MONTH_DEFINITIONS]


def normalize_month_index(month) -> int:
    if not isinstance(month, int) or isinstance(month, bool) or month < 0:
        return 0
    if month >= len(BID_MONTH_DEFINITIONS):
        return len(BID_MONTH_DEFINITIONS) - 1
    return month


def get_bid_month_definition(month: int) -> BidMonthDefinition:
    return BID_MONTH_DEFINITIONS[normalize_month_index(month)]


def get_bid_month_range(year: int, month: int) -> Tuple[date, date]:
    d = get_bid_month_definition(month)
    return (
        date(year, d.start_month + 1, d.start_day),
        date(year, d.end_month + 1, d.end_day),
    )


def get_bid_month_length(year: int, month: int) -> int:
    start, end = get_bid_month_range(year, month)
    return (end - start).days + 1


def get_bid_month_display_range(year: int, month: int) -> Tuple[str, str]:
    start, end = get_bid_month_range(year, month)
    return start.isoformat(), end.isoformat()


def build_bid_month_dates(year: int, month: int, day_count: Optional[int] = None) -> List[date]:
    start, _ = get_bid_month_range(year, month)
    total = day_count if day_count is not None else get_bid_month_length(year, month)
    return [start + timedelta(days=i) for i in range(total)]
