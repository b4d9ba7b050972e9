# duty_days.py
"""
Duty-day grouping for the lines of one sequence.

The grouper is an explicit state value (`GrouperState`) advanced by the
pure function `step(state, line)`. A step returns the next state plus the
duty day it completed, if any. Exactly two events complete a day:

- a report line while the open day already has a report, and
- a leg line whose leading day number differs from the open day's.

Release, hotel and free-text lines only ever attach to the open day
(release and hotel lines open one when none is open; free text is dropped).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from leg_parser import parse_flight_leg
from line_classifier import LineKind, classify_duty_line, leg_day_number
from models import SequenceDutyDay
from patterns import patterns

SUMMARY_JOINER = " | "


@dataclass(frozen=True)
class GrouperState:
    day: Optional[SequenceDutyDay] = None
    day_number: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.day is not None


NO_OPEN_DAY = GrouperState()

StepResult = Tuple[GrouperState, Optional[SequenceDutyDay]]


def _attach(day: SequenceDutyDay, line: str, **update) -> SequenceDutyDay:
    update["raw_lines"] = day.raw_lines + [line]
    return day.model_copy(update=update)


def _open_or_current(state: GrouperState) -> Tuple[SequenceDutyDay, Optional[str]]:
    if state.day is None:
        return SequenceDutyDay(), None
    return state.day, state.day_number


def _on_report(state: GrouperState, line: str) -> StepResult:
    emitted: Optional[SequenceDutyDay] = None
    if state.day is not None and state.day.report_line:
        emitted = state.day
        day, day_number = SequenceDutyDay(), None
    else:
        day, day_number = _open_or_current(state)

    m = patterns.REPORT_TIME.search(line)
    day = _attach(day, line, report_line=line, report_time=m.group(1) if m else None)
    return GrouperState(day, day_number), emitted


def _on_leg(state: GrouperState, line: str) -> StepResult:
    leg_day = leg_day_number(line)

    emitted: Optional[SequenceDutyDay] = None
    if state.day is not None and state.day_number and leg_day != state.day_number:
        emitted = state.day
        day, day_number = SequenceDutyDay(), None
    else:
        day, day_number = _open_or_current(state)

    leg = parse_flight_leg(line)
    update = {"legs": day.legs + [leg]}
    if not day.calendar_day and leg.date:
        update["calendar_day"] = leg.date
    day = _attach(day, line, **update)
    return GrouperState(day, day_number or leg_day), emitted


def _on_release(state: GrouperState, line: str) -> StepResult:
    day, day_number = _open_or_current(state)
    m = patterns.RELEASE_TIME.search(line)
    day = _attach(day, line, release_line=line, release_time=m.group(1) if m else None)
    return GrouperState(day, day_number), None


def _on_hotel(state: GrouperState, line: str) -> StepResult:
    day, day_number = _open_or_current(state)
    day = _attach(day, line, hotel_layover=line)
    return GrouperState(day, day_number), None


def _on_other(state: GrouperState, line: str) -> StepResult:
    if state.day is None:
        return state, None
    summary = state.day.summary
    summary = f"{summary}{SUMMARY_JOINER}{line}" if summary else line
    return GrouperState(state.day.model_copy(update={"summary": summary}), state.day_number), None


_HANDLERS = {
    LineKind.REPORT: _on_report,
    LineKind.FLIGHT_LEG: _on_leg,
    LineKind.RELEASE: _on_release,
    LineKind.HOTEL: _on_hotel,
    LineKind.OTHER: _on_other,
}


def step(state: GrouperState, line: str) -> StepResult:
    """Advance the grouper by one trimmed, non-empty line."""
    return _HANDLERS[classify_duty_line(line)](state, line)


def flush(state: GrouperState) -> Optional[SequenceDutyDay]:
    return state.day


def group_duty_days(lines: Iterable[str]) -> List[SequenceDutyDay]:
    """Group a sequence's duty lines (header and totals excluded) into days."""
    days: List[SequenceDutyDay] = []
    state = NO_OPEN_DAY

    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        state, emitted = step(state, line)
        if emitted is not None:
            days.append(emitted)

    last = flush(state)
    if last is not None:
        days.append(last)
    return days
