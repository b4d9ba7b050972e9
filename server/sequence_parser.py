# sequence_parser.py
from typing import Dict, List, Optional

from duty_days import group_duty_days
from line_classifier import has_totals_marker, is_sequence_start
from models import SequenceHeader, SequenceRecord, SequenceTotals
from patterns import patterns


def split_pages(raw_text: str) -> List[str]:
    """Split extracted document text on form-feed runs; blank pages are dropped."""
    normalized = raw_text.replace("\r\n", "\n")
    pages = patterns.FORM_FEED.split(normalized)
    return [page.strip() for page in pages if page.strip()]


def split_sequences(text: str) -> List[List[str]]:
    """
    Cut a page into sequence blocks.

    A block starts at a ``SEQ`` line and ends at the first line carrying a
    ``TTL`` marker. A block without totals runs until the next ``SEQ`` line
    or the end of the page. Lines outside any block are ignored.
    """
    lines = [line.strip() for line in patterns.NEWLINE.split(text)]
    lines = [line for line in lines if line]

    blocks: List[List[str]] = []
    current: List[str] = []

    for line in lines:
        if is_sequence_start(line):
            if current:
                blocks.append(current)
            current = [line]
            continue

        if current:
            current.append(line)
            if has_totals_marker(line):
                blocks.append(current)
                current = []

    if current:
        blocks.append(current)

    return blocks


def parse_sequence_header(header_line: str) -> SequenceHeader:
    tokens = header_line.split()
    if len(tokens) > 1:
        sequence_number = tokens[1]
    else:
        sequence_number = "".join(ch for ch in (tokens[0] if tokens else "") if ch.isdigit())

    instances: Optional[int] = None
    positions: Dict[str, int] = {}

    for token in tokens[2:]:
        if instances is None and patterns.NUMERIC.match(token):
            instances = int(token)
            continue
        m = patterns.POSITION.match(token)
        if m:
            # a repeated code overwrites
            positions[m.group(1)] = int(m.group(2))

    return SequenceHeader(
        sequence_number=sequence_number,
        instances_in_month=instances,
        positions=positions or None,
    )


def parse_totals(line: str) -> Optional[SequenceTotals]:
    """Keyed totals grammar: ``TTL <credit>``, ``DUTY <hours>``, ``BLK <hours>``."""
    values = {}
    for field, pattern in (
        ("credit", patterns.TTL_VALUE),
        ("duty_hours", patterns.DUTY_VALUE),
        ("block_hours", patterns.BLK_VALUE),
    ):
        m = pattern.search(line)
        if m:
            values[field] = float(m.group(1))
    return SequenceTotals(**values) if values else None


def parse_sequence(block: List[str]) -> SequenceRecord:
    header, rest = block[0], block[1:]
    info = parse_sequence_header(header)

    totals_idx = next((i for i, line in enumerate(rest) if has_totals_marker(line)), None)
    if totals_idx is None:
        totals = None
        duty_lines = rest
    else:
        totals = parse_totals(rest[totals_idx])
        duty_lines = rest[:totals_idx]

    return SequenceRecord(
        sequence_number=info.sequence_number,
        instances_in_month=info.instances_in_month,
        positions=info.positions,
        totals=totals,
        duty_days=group_duty_days(duty_lines),
        raw_lines=list(block),
    )


def parse_page(page_text: str) -> List[SequenceRecord]:
    return [parse_sequence(block) for block in split_sequences(page_text)]
