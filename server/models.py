# models.py
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


# ---------------------------------------------------------------------------
# Intermediate records (one parse call, raw tokens not yet normalised)
# ---------------------------------------------------------------------------

class FlightLeg(BaseModel):
    raw: str
    day: Optional[str] = None
    date: Optional[str] = None
    equipment: Optional[str] = None
    flight_number: Optional[str] = None
    departure_station: Optional[str] = None
    departure_time: Optional[str] = None
    meal: Optional[str] = None
    arrival_station: Optional[str] = None
    arrival_time: Optional[str] = None
    block_time: Optional[str] = None
    remarks: Optional[str] = None


class SequenceDutyDay(BaseModel):
    raw_lines: List[str] = Field(default_factory=list)
    report_line: Optional[str] = None
    report_time: Optional[str] = Field(default=None, description="HHMM or HHMM/HHMM")
    calendar_day: Optional[str] = Field(default=None, description="MM/DD-like token")
    release_line: Optional[str] = None
    release_time: Optional[str] = None
    hotel_layover: Optional[str] = None
    summary: Optional[str] = None
    legs: List[FlightLeg] = Field(default_factory=list)


class SequenceTotals(BaseModel):
    credit: Optional[float] = None
    duty_hours: Optional[float] = None
    block_hours: Optional[float] = None


class SequenceHeader(BaseModel):
    sequence_number: str
    instances_in_month: Optional[int] = None
    positions: Optional[Dict[str, int]] = None


class SequenceRecord(BaseModel):
    sequence_number: str
    instances_in_month: Optional[int] = None
    positions: Optional[Dict[str, int]] = None
    totals: Optional[SequenceTotals] = None
    duty_days: List[SequenceDutyDay] = Field(default_factory=list)
    raw_lines: List[str] = Field(default_factory=list)


class MonthYear(BaseModel):
    month: str
    year: int
    source: str = Field(default="fallback", description="Which cue resolved the month")


# ---------------------------------------------------------------------------
# Final packet
# ---------------------------------------------------------------------------

class Layover(BaseModel):
    station: Optional[str] = None
    hotel_name: Optional[str] = None
    hotel_phone: Optional[str] = None
    transport_name: Optional[str] = None
    transport_phone: Optional[str] = None
    ground_rest: Optional[str] = None


class UploadedLeg(BaseModel):
    leg_index: int = Field(..., ge=1)
    equip_code: Optional[str] = None
    flight_number: Optional[str] = None
    dep_station: Optional[str] = None
    arr_station: Optional[str] = None
    dep_local: Optional[str] = None
    arr_local: Optional[str] = None
    block_time: Optional[str] = None
    ground_time: Optional[str] = None
    meal: Optional[str] = None


class UploadedDuty(BaseModel):
    duty_index: int = Field(..., ge=1)
    report_local: Optional[str] = None
    release_local: Optional[str] = None
    legs: List[UploadedLeg] = Field(default_factory=list)
    layover: Optional[Layover] = None


class SequenceCalendar(BaseModel):
    start_dates: List[str] = Field(default_factory=list)
    display_range_start: str
    display_range_end: str


class UploadedTotals(BaseModel):
    block_time: Optional[str] = None
    credit_time: Optional[str] = None
    tafb: Optional[str] = None


class UploadedSequence(BaseModel):
    sequence_number: int
    position: str = "Unknown"
    length_days: int = 0
    spanish_operation: bool = False
    notes: Optional[str] = None
    calendar: SequenceCalendar
    totals: UploadedTotals = Field(default_factory=UploadedTotals)
    duties: List[UploadedDuty] = Field(default_factory=list)


class PacketMetadata(BaseModel):
    base: str = "UNKNOWN"
    fleet: str = "UNKNOWN"
    month: str
    year: int
    bid_period_start: str = Field(..., description="YYYY-MM-DD")
    bid_period_end: str = Field(..., description="YYYY-MM-DD")
    source_document: str

    @field_validator("base", "month")
    @classmethod
    def _upper(cls, v: str) -> str:
        return v.upper() if v else v


class UploadedBidPacket(BaseModel):
    metadata: PacketMetadata
    sequences: List[UploadedSequence] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Service responses
# ---------------------------------------------------------------------------

class ExtractedText(BaseModel):
    text: str = ""
    page_count: int = 0


class SequenceListing(BaseModel):
    count: int
    sequences: List[UploadedSequence]


class ExtractionError(BaseModel):
    error: bool = True
    user_message: str
    technical_reason: str
    suggestions: List[str] = Field(default_factory=list)
