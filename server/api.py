from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, File, HTTPException, Path, Query, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bid_month import get_bid_month_definition, get_bid_month_display_range, get_bid_month_length
from config import API_HOST, API_PORT, APP_VERSION, CORS_ORIGINS, MAX_UPLOAD_BYTES, MAX_UPLOAD_MB
from logging_utils import Stopwatch, configure_logging, log_event, new_request_id
from models import ExtractionError, SequenceListing, UploadedBidPacket
from pdf_processor import TextExtractionError
from pipeline import BidPacketPipeline
from sequence_filter import DAY_CODES, filter_sequences

# ------------------------------------------------------------------------------
# APP + LOGGING SETUP
# ------------------------------------------------------------------------------

configure_logging()
logger = logging.getLogger("bidpacket.api")

app = FastAPI(title="Bid Packet Parser", version=APP_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_origin_regex=r"http://localhost:\d+",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

pipeline = BidPacketPipeline()


# ------------------------------------------------------------------------------
# REQUEST LOGGING MIDDLEWARE
# ------------------------------------------------------------------------------

@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    rid = new_request_id()
    watch = Stopwatch()

    log_event(
        logger,
        "http_request_started",
        method=request.method,
        path=request.url.path,
        client_ip=request.client.host if request.client else None,
        request_id=rid,
    )

    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        log_event(
            logger,
            "http_request_finished",
            method=request.method,
            path=request.url.path,
            status_code=status_code,
            duration_ms=watch.elapsed_ms,
            request_id=rid,
        )


@app.exception_handler(TextExtractionError)
async def extraction_error_handler(request: Request, exc: TextExtractionError):
    log_event(logger, "bid_packet_extraction_failed", level=logging.ERROR, error=str(exc))
    body = ExtractionError(
        user_message="Unable to read this document",
        technical_reason=str(exc),
        suggestions=[
            "Upload the original bid packet PDF rather than a scan",
            "Check that the file is not password protected",
        ],
    )
    return JSONResponse(status_code=422, content=body.model_dump())


# ------------------------------------------------------------------------------
# HELPERS
# ------------------------------------------------------------------------------

async def _read_upload(file: Optional[UploadFile]) -> bytes:
    if file is None:
        raise HTTPException(400, "No PDF uploaded")
    data = await file.read()
    if not data:
        raise HTTPException(400, "Empty file")
    if len(data) > MAX_UPLOAD_BYTES:
        raise HTTPException(413, f"File exceeds {MAX_UPLOAD_MB}MB limit")
    return data


async def _parse_upload(file: Optional[UploadFile]) -> UploadedBidPacket:
    data = await _read_upload(file)
    file_name = file.filename or "uploaded.pdf"
    log_event(logger, "bid_packet_received", field_filename=file_name, size=len(data))
    return await pipeline.process(data, file_name)


# ------------------------------------------------------------------------------
# ROUTES
# ------------------------------------------------------------------------------

@app.get("/health")
async def health() -> Dict[str, Any]:
    return {
        "status": "ok",
        "version": app.version,
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    }


@app.post("/upload-bid", response_model=UploadedBidPacket)
async def upload_bid(file: Optional[UploadFile] = File(None)) -> UploadedBidPacket:
    """Parse an uploaded bid packet PDF into the normalised packet."""
    return await _parse_upload(file)


@app.post("/sequences", response_model=SequenceListing)
async def sequences(
    file: Optional[UploadFile] = File(None),
    min_days: int = Query(1, ge=0),
    max_days: int = Query(7, ge=0),
    start_day_of_week: Optional[str] = Query(None, description="MO, TU, WE, TH, FR, SA or SU"),
) -> SequenceListing:
    if start_day_of_week and start_day_of_week.strip().upper() not in DAY_CODES:
        raise HTTPException(400, f"start_day_of_week must be one of {', '.join(DAY_CODES)}")

    packet = await _parse_upload(file)
    kept = filter_sequences(packet.sequences, min_days, max_days, start_day_of_week)
    return SequenceListing(count=len(kept), sequences=kept)


@app.get("/bid-month/{year}/{month_index}")
async def bid_month(year: int = Path(..., ge=1, le=9999), month_index: int = Path(...)) -> Dict[str, Any]:
    if not 0 <= month_index <= 11:
        raise HTTPException(400, "month_index must be between 0 and 11")
    start, end = get_bid_month_display_range(year, month_index)
    return {
        "name": get_bid_month_definition(month_index).name,
        "start": start,
        "end": end,
        "length": get_bid_month_length(year, month_index),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=API_HOST, port=API_PORT, log_level="info")
