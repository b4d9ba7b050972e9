# line_classifier.py
"""
Role detection for single bid packet lines.

Each predicate looks at one trimmed line in isolation. Callers decide the
order in which predicates are tried: the block splitter only cares about
sequence starts and totals, while the duty-day grouper checks report, leg,
release and hotel in that order.
"""

from enum import Enum
from typing import Optional

from patterns import patterns


class LineKind(str, Enum):
    SEQUENCE_START = "sequence_start"
    FLIGHT_LEG = "flight_leg"
    REPORT = "report"
    RELEASE = "release"
    HOTEL = "hotel"
    TOTALS = "totals"
    OTHER = "other"


def is_sequence_start(line: str) -> bool:
    return bool(patterns.SEQ_START.match(line))


def is_leg_line(line: str) -> bool:
    return bool(patterns.LEG_LINE.match(line))


def is_report_line(line: str) -> bool:
    return bool(patterns.REPORT.match(line))


def is_release_line(line: str) -> bool:
    return bool(patterns.RELEASE.match(line))


def is_hotel_line(line: str) -> bool:
    return bool(patterns.HOTEL.search(line))


def has_totals_marker(line: str) -> bool:
    return bool(patterns.TOTALS.search(line))


def leg_day_number(line: str) -> Optional[str]:
    """Leading day-number token of a leg line, or None for non-leg lines."""
    if not is_leg_line(line):
        return None
    m = patterns.LEG_DAY.match(line)
    return m.group(1) if m else None


def classify_duty_line(line: str) -> LineKind:
    """Classify a line found between a sequence header and its totals line."""
    if is_report_line(line):
        return LineKind.REPORT
    if is_leg_line(line):
        return LineKind.FLIGHT_LEG
    if is_release_line(line):
        return LineKind.RELEASE
    if is_hotel_line(line):
        return LineKind.HOTEL
    return LineKind.OTHER


def classify_line(line: str) -> LineKind:
    """Classify a line without any surrounding context."""
    if is_sequence_start(line):
        return LineKind.SEQUENCE_START
    kind = classify_duty_line(line)
    if kind is LineKind.OTHER and has_totals_marker(line):
        return LineKind.TOTALS
    return kind
