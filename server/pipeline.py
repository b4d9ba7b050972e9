# pipeline.py
from __future__ import annotations

from typing import Dict, List, Optional, Protocol, Tuple

from logging_utils import Stopwatch, get_logger
from models import (
    ExtractedText,
    PacketMetadata,
    SequenceCalendar,
    SequenceRecord,
    UploadedBidPacket,
    UploadedDuty,
    UploadedLeg,
    UploadedSequence,
    UploadedTotals,
)
from month_inference import infer_month_year, month_index
from normalizer import (
    hours_to_clock,
    month_display_range,
    parse_calendar_day,
    parse_clock,
    parse_layover,
)
from patterns import patterns
from pdf_processor import get_text_extractor
from sequence_parser import parse_page, split_pages

logger = get_logger("pipeline")

UNKNOWN = "UNKNOWN"


class TextExtractor(Protocol):
    async def extract(self, pdf_bytes: bytes) -> ExtractedText: ...


def extract_base_fleet(file_name: str) -> Tuple[str, str]:
    """``BOS_737_DEC2025.pdf`` -> ("BOS", "737")."""
    name = patterns.PDF_SUFFIX.sub("", file_name or "")
    m = patterns.BASE_FLEET.search(name)
    if m:
        return m.group(1).upper(), m.group(2)
    return UNKNOWN, UNKNOWN


def _sequence_number(raw: str) -> int:
    if raw.isdigit():
        return int(raw)
    digits = "".join(ch for ch in raw if ch.isdigit())
    return int(digits) if digits else 0


def to_uploaded_sequence(
    record: SequenceRecord,
    month_idx: int,
    year: int,
    display_range: Tuple[str, str],
) -> UploadedSequence:
    # insertion-ordered set keeps output stable between runs
    start_dates: Dict[str, None] = {}
    for duty in record.duty_days:
        iso = parse_calendar_day(duty.calendar_day, month_idx, year)
        if iso:
            start_dates[iso] = None

    position = " ".join(sorted(record.positions)) if record.positions else "Unknown"
    notes = " | ".join(d.summary for d in record.duty_days if d.summary) or None
    totals = record.totals

    duties: List[UploadedDuty] = []
    for duty_idx, duty in enumerate(record.duty_days, start=1):
        legs = [
            UploadedLeg(
                leg_index=leg_idx,
                equip_code=leg.equipment,
                flight_number=leg.flight_number,
                dep_station=leg.departure_station,
                arr_station=leg.arrival_station,
                dep_local=parse_clock(leg.departure_time),
                arr_local=parse_clock(leg.arrival_time),
                block_time=hours_to_clock(leg.block_time),
                meal=leg.meal,
            )
            for leg_idx, leg in enumerate(duty.legs, start=1)
        ]
        duties.append(
            UploadedDuty(
                duty_index=duty_idx,
                report_local=parse_clock(duty.report_time),
                release_local=parse_clock(duty.release_time),
                legs=legs,
                layover=parse_layover(duty.hotel_layover),
            )
        )

    return UploadedSequence(
        sequence_number=_sequence_number(record.sequence_number),
        position=position,
        length_days=len(record.duty_days),
        notes=notes,
        calendar=SequenceCalendar(
            start_dates=list(start_dates),
            display_range_start=display_range[0],
            display_range_end=display_range[1],
        ),
        totals=UploadedTotals(
            block_time=hours_to_clock(totals.block_hours) if totals else None,
            credit_time=hours_to_clock(totals.credit) if totals else None,
            tafb=hours_to_clock(totals.duty_hours) if totals else None,
        ),
        duties=duties,
    )


def assemble_packet(raw_text: str, file_name: str) -> UploadedBidPacket:
    """Structure already-extracted packet text into the final record."""
    pages = split_pages(raw_text)
    base, fleet = extract_base_fleet(file_name)
    month_year = infer_month_year(pages, file_name)
    month_idx = month_index(month_year.month)
    display_range = month_display_range(month_idx, month_year.year)

    records: List[SequenceRecord] = []
    for page in pages or [raw_text]:
        records.extend(parse_page(page))

    logger.event(
        "packet_assembled",
        source_document=file_name,
        month=month_year.month,
        year=month_year.year,
        month_source=month_year.source,
        pages=len(pages),
        sequences=len(records),
    )

    return UploadedBidPacket(
        metadata=PacketMetadata(
            base=base,
            fleet=fleet,
            month=month_year.month,
            year=month_year.year,
            bid_period_start=display_range[0],
            bid_period_end=display_range[1],
            source_document=file_name,
        ),
        sequences=[
            to_uploaded_sequence(r, month_idx, month_year.year, display_range)
            for r in records
        ],
    )


class BidPacketPipeline:
    def __init__(self, extractor: Optional[TextExtractor] = None) -> None:
        self._extractor = extractor

    @property
    def extractor(self) -> TextExtractor:
        if self._extractor is None:
            self._extractor = get_text_extractor()
        return self._extractor

    async def process(self, pdf_bytes: bytes, file_name: str) -> UploadedBidPacket:
        watch = Stopwatch()
        extracted = await self.extractor.extract(pdf_bytes)
        packet = assemble_packet(extracted.text or "", file_name)
        logger.event(
            "bid_packet_parsed",
            source_document=file_name,
            sequences=len(packet.sequences),
            duration_ms=watch.elapsed_ms,
        )
        return packet


async def parse_bid_packet(
    pdf_bytes: bytes,
    file_name: str,
    extractor: Optional[TextExtractor] = None,
) -> UploadedBidPacket:
    """Parse entry point: document bytes + file name -> normalised packet."""
    return await BidPacketPipeline(extractor).process(pdf_bytes, file_name)
