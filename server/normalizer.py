# normalizer.py
from __future__ import annotations

import calendar
import math
from datetime import date, timedelta
from typing import Optional, Tuple, Union

from models import Layover
from patterns import patterns


def hours_to_clock(value: Union[float, int, str, None]) -> Optional[str]:
    """
    Decimal hours -> "HH:MM".

    1.5 -> "01:30", 0 -> "00:00". None, unparseable or non-finite input
    gives None. Minutes round half up.
    """
    if value is None:
        return None
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(numeric):
        return None
    total_minutes = math.floor(numeric * 60 + 0.5)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours:02d}:{minutes:02d}"


def parse_clock(value: Optional[str]) -> Optional[str]:
    """Raw "HHMM" or "HHMM/HHMM" token -> "HH:MM" (first half only)."""
    if not value:
        return None
    clean = value.split("/")[0]
    if not patterns.CLOCK.match(clean):
        return None
    padded = clean.zfill(4)
    return f"{padded[:2]}:{padded[2:]}"


def parse_calendar_day(token: Optional[str], month_index: int, year: int) -> Optional[str]:
    """
    Partial calendar token ("12/25") -> ISO date in the given month/year.

    The second slash-separated number is the day of month; a lone number
    is used as is. Only 1-2 digit numbers count. Day numbers past the month
    end roll into the next month.
    """
    if not token:
        return None
    m = patterns.PARTIAL_DATE.search(token) or patterns.LONE_DAY.match(token.strip())
    if not m:
        return None
    day_number = int(m.group(m.lastindex))
    try:
        first = date(year, month_index + 1, 1)
        return (first + timedelta(days=day_number - 1)).isoformat()
    except (OverflowError, ValueError):
        return None


def month_display_range(month_index: int, year: int) -> Tuple[str, str]:
    """First and last day of the calendar month as ISO strings."""
    last_day = calendar.monthrange(year, month_index + 1)[1]
    return (
        date(year, month_index + 1, 1).isoformat(),
        date(year, month_index + 1, last_day).isoformat(),
    )


def parse_layover(raw: Optional[str]) -> Optional[Layover]:
    """Hotel line -> layover: first token is the station, the rest the hotel."""
    if not raw:
        return None
    tokens = raw.split()
    station = tokens[0].upper() if tokens else None
    hotel_name = " ".join(tokens[1:]) or None
    rest = patterns.GROUND_REST.search(raw)
    return Layover(
        station=station,
        hotel_name=hotel_name,
        ground_rest=hours_to_clock(rest.group(1)) if rest else None,
    )
