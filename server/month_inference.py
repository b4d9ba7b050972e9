# month_inference.py
"""
Bid month/year inference.

Pages are scanned in document order. On each page an ordered list of
independent matchers is tried, and the first hit with a usable year wins;
the file name and then the current year are the fallbacks. To support a
new packet layout, add a matcher to `PAGE_MATCHERS` at the precedence it
deserves.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional, Sequence, Tuple

from models import MonthYear
from patterns import MONTHS, UNKNOWN_MONTH, patterns

PageMatcher = Callable[[str], Optional[Tuple[str, int]]]

# a "0000" year cannot be turned into a date
MIN_YEAR = 1


def _calendar_header(page: str) -> Optional[Tuple[str, int]]:
    """``FDP CALENDAR 12/01-12/31`` plus the first 4-digit number on the page."""
    m = patterns.FDP_CALENDAR.search(page)
    if not m:
        return None
    month_part = patterns.CALENDAR_SPLIT.split(m.group(1))[0][:2]
    if not month_part.isdigit():
        return None
    month_index = int(month_part) - 1
    if not 0 <= month_index < len(MONTHS):
        return None
    year = patterns.YEAR.search(page)
    if not year:
        return None
    return MONTHS[month_index], int(year.group(1))


def _long_month_name(page: str) -> Optional[Tuple[str, int]]:
    m = patterns.LONG_MONTH_YEAR.search(page)
    if not m:
        return None
    return m.group(1)[:3].upper(), int(m.group(2))


def _compact_date(page: str) -> Optional[Tuple[str, int]]:
    """``01DEC2025`` style tokens."""
    m = patterns.COMPACT_DATE.search(page)
    if not m:
        return None
    return m.group(2).upper(), int(m.group(3))


def _short_month_name(page: str) -> Optional[Tuple[str, int]]:
    m = patterns.SHORT_MONTH_YEAR.search(page)
    if not m:
        return None
    return m.group(1).upper(), int(m.group(2))


PAGE_MATCHERS: List[Tuple[str, PageMatcher]] = [
    ("fdp_calendar", _calendar_header),
    ("long_month", _long_month_name),
    ("compact_date", _compact_date),
    ("short_month", _short_month_name),
]


def _from_file_name(file_name: str) -> Optional[Tuple[str, int]]:
    m = patterns.FILE_MONTH_YEAR.search(file_name or "")
    if not m:
        return None
    return m.group(1).upper(), int(m.group(2))


def infer_month_year(
    pages: Sequence[str],
    file_name: str,
    matchers: Optional[List[Tuple[str, PageMatcher]]] = None,
) -> MonthYear:
    for page in pages:
        for source, matcher in matchers or PAGE_MATCHERS:
            hit = matcher(page)
            if hit and hit[1] >= MIN_YEAR:
                return MonthYear(month=hit[0], year=hit[1], source=source)

    hit = _from_file_name(file_name)
    if hit and hit[1] >= MIN_YEAR:
        return MonthYear(month=hit[0], year=hit[1], source="file_name")

    return MonthYear(month=UNKNOWN_MONTH, year=datetime.now().year, source="fallback")


def month_index(month: str) -> int:
    """0-based index of a 3-letter month; unknown months map to January."""
    try:
        return MONTHS.index(month.upper())
    except ValueError:
        return 0
