# leg_parser.py
from typing import List, Optional

from models import FlightLeg
from patterns import patterns

# Slots filled strictly left to right before the optional meal code
_LEADING_SLOTS = (
    "day",
    "date",
    "equipment",
    "flight_number",
    "departure_station",
    "departure_time",
)
_ARRIVAL_SLOTS = ("arrival_station", "arrival_time")


class _Tokens:
    def __init__(self, line: str) -> None:
        self.items: List[str] = [t for t in line.split() if t]
        self.idx = 0

    def peek(self) -> Optional[str]:
        return self.items[self.idx] if self.idx < len(self.items) else None

    def take(self) -> Optional[str]:
        tok = self.peek()
        if tok is not None:
            self.idx += 1
        return tok

    def rest(self) -> List[str]:
        return self.items[self.idx:]


def parse_flight_leg(line: str) -> FlightLeg:
    """
    Split a leg line into positional fields.

    Layout: day date equipment flight dep_station dep_time [meal]
    arr_station arr_time [block] remarks...

    A single uppercase letter after the departure time is always a meal
    code, never a station. Short lines simply leave trailing fields unset.
    """
    tokens = _Tokens(line)
    fields = {}

    for slot in _LEADING_SLOTS:
        tok = tokens.take()
        if tok is None:
            break
        fields[slot] = tok

    nxt = tokens.peek()
    if nxt is not None and patterns.MEAL.match(nxt):
        fields["meal"] = tokens.take()

    for slot in _ARRIVAL_SLOTS:
        tok = tokens.take()
        if tok is None:
            break
        fields[slot] = tok

    nxt = tokens.peek()
    if nxt is not None and patterns.BLOCK_TIME.match(nxt):
        fields["block_time"] = tokens.take()

    remaining = tokens.rest()
    if remaining:
        fields["remarks"] = " ".join(remaining)

    return FlightLeg(raw=line, **fields)
