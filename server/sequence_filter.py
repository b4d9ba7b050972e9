# sequence_filter.py
from datetime import date
from typing import Iterable, List, Optional

from models import UploadedSequence

DAY_CODES = ["MO", "TU", "WE", "TH", "FR", "SA", "SU"]


def start_day_codes(sequence: UploadedSequence) -> List[str]:
    """Two-letter weekday codes of the sequence's start dates, in date order."""
    codes: List[str] = []
    for iso in sequence.calendar.start_dates:
        try:
            code = DAY_CODES[date.fromisoformat(iso).weekday()]
        except ValueError:
            continue
        if code not in codes:
            codes.append(code)
    return codes


def filter_sequences(
    sequences: Iterable[UploadedSequence],
    min_days: int = 1,
    max_days: int = 7,
    start_day_of_week: Optional[str] = None,
) -> List[UploadedSequence]:
    wanted = start_day_of_week.strip().upper() if start_day_of_week else None

    kept: List[UploadedSequence] = []
    for seq in sequences:
        if seq.length_days < min_days or seq.length_days > max_days:
            continue
        if wanted and wanted not in start_day_codes(seq):
            continue
        kept.append(seq)
    return kept
