# patterns.py
import re

MONTHS = ["JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC"]
UNKNOWN_MONTH = "UNKNOWN"

_MONTH_ALT = "|".join(MONTHS)
_LONG_MONTH_ALT = (
    "JANUARY|FEBRUARY|MARCH|APRIL|MAY|JUNE|JULY|AUGUST|SEPTEMBER|OCTOBER|NOVEMBER|DECEMBER"
)


class Patterns:
    # Line roles
    SEQ_START = re.compile(r"^SEQ\b")
    LEG_LINE = re.compile(r"^\d+\s+\d+/\d+\s+\d+\s+\d+")
    LEG_DAY = re.compile(r"^(\d+)")
    REPORT = re.compile(r"^RPT\b")
    RELEASE = re.compile(r"^RLS\b")
    HOTEL = re.compile(r"HOTEL", re.I)
    TOTALS = re.compile(r"\bTTL\b")

    # Field grammars
    REPORT_TIME = re.compile(r"RPT\s+([0-9]{3,4}/[0-9]{3,4}|[0-9]{3,4})")
    RELEASE_TIME = re.compile(r"RLS\s+([0-9]{3,4}/[0-9]{3,4}|[0-9]{3,4})")
    TTL_VALUE = re.compile(r"TTL\s*(\d+(?:\.\d+)?)")
    DUTY_VALUE = re.compile(r"DUTY\s*(\d+(?:\.\d+)?)", re.I)
    BLK_VALUE = re.compile(r"BLK\s*(\d+(?:\.\d+)?)", re.I)
    POSITION = re.compile(r"^(CA|FO|RL|AP|RS)(\d+)")
    NUMERIC = re.compile(r"^\d+$")
    MEAL = re.compile(r"^[A-Z]$")
    BLOCK_TIME = re.compile(r"^\d+(?:\.\d+)?")
    CLOCK = re.compile(r"^[0-9]{3,4}$")
    PARTIAL_DATE = re.compile(r"(\d{1,2})/(\d{1,2})")
    LONE_DAY = re.compile(r"^(\d{1,2})$")
    GROUND_REST = re.compile(r"(\d{1,2}\.\d{2})")

    # Document-level metadata
    BASE_FLEET = re.compile(r"(\w{3})_(\d{3})", re.I)
    PDF_SUFFIX = re.compile(r"\.pdf$", re.I)
    FORM_FEED = re.compile(r"\f+")
    NEWLINE = re.compile(r"\r?\n")

    # Month/year cues, most authoritative first
    FDP_CALENDAR = re.compile(r"FDP\s+CALENDAR\s+([0-9/\-–]+)", re.I)
    CALENDAR_SPLIT = re.compile(r"[/\-–]")
    YEAR = re.compile(r"([0-9]{4})")
    LONG_MONTH_YEAR = re.compile(rf"({_LONG_MONTH_ALT})\s+([0-9]{{4}})", re.I)
    COMPACT_DATE = re.compile(rf"([0-9]{{2}})({_MONTH_ALT})([0-9]{{4}})", re.I)
    SHORT_MONTH_YEAR = re.compile(rf"({_MONTH_ALT})\s+([0-9]{{4}})", re.I)
    FILE_MONTH_YEAR = re.compile(rf"({_MONTH_ALT})([0-9]{{4}})", re.I)


patterns = Patterns()
