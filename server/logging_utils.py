# logging_utils.py
# Single-line JSON logging shared by the API, the CLI and the parser modules

import json
import logging
import os
import sys
import time
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

SERVICE_NAME = os.getenv("SERVICE_NAME", "bidpacket")
ENV = os.getenv("APP_ENV", "dev")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE", "")

# Set per HTTP request by the middleware in api.py
_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

# Attribute names every LogRecord already carries
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "asctime",
    "taskName",
}

_stream_handler: Optional[logging.StreamHandler] = None


class JSONLineFormatter(logging.Formatter):
    """One JSON object per line: fixed envelope first, then the event fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "service": SERVICE_NAME,
            "env": ENV,
            "message": record.getMessage(),
        }
        rid = _request_id.get()
        if rid:
            payload["request_id"] = rid

        payload.update(
            (k, v)
            for k, v in vars(record).items()
            if k not in _RECORD_ATTRS and not k.startswith("_") and k not in payload
        )
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(stream: Optional[TextIO] = None) -> None:
    """
    Install the JSON handler on the root logger, once per process.

    Logs go to stdout unless `stream` says otherwise; calling again with a
    stream only redirects the existing handler. LOG_FILE adds a file copy.
    """
    global _stream_handler

    if _stream_handler is not None:
        if stream is not None:
            _stream_handler.setStream(stream)
        return

    root = logging.getLogger()
    root.setLevel(LOG_LEVEL)
    formatter = JSONLineFormatter()

    _stream_handler = logging.StreamHandler(stream or sys.stdout)
    _stream_handler.setFormatter(formatter)
    root.addHandler(_stream_handler)

    if LOG_FILE:
        try:
            os.makedirs(os.path.dirname(LOG_FILE) or ".", exist_ok=True)
            file_handler = logging.FileHandler(LOG_FILE)
        except OSError as e:
            root.error(f"File logging disabled, cannot open {LOG_FILE}: {e}")
        else:
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)


def new_request_id() -> str:
    rid = uuid.uuid4().hex
    _request_id.set(rid)
    return rid


def log_event(logger: logging.Logger, event: str, level: int = logging.INFO, **fields: Any) -> None:
    """Log `event` with structured fields; names a LogRecord owns get a `field_` prefix."""
    extra = {(f"field_{k}" if k in _RECORD_ATTRS else k): v for k, v in fields.items()}
    extra["event"] = event
    logger.log(level, event, extra=extra)


class Stopwatch:
    """Wall-clock timer owned by a single call."""

    def __init__(self) -> None:
        self.started = time.perf_counter()

    @property
    def elapsed_ms(self) -> int:
        return int((time.perf_counter() - self.started) * 1000)


class BidPacketLogger:
    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def event(self, event: str, level: int = logging.INFO, **fields: Any) -> None:
        log_event(self.logger, event, level=level, **fields)


def get_logger(name: str) -> BidPacketLogger:
    return BidPacketLogger(f"{SERVICE_NAME}.{name}")
