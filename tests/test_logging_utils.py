import json
import logging

import pytest

from logging_utils import JSONLineFormatter, Stopwatch, get_logger, log_event


class TestLogEvent:
    def test_fields_colliding_with_record_attributes_are_renamed(self, caplog):
        caplog.set_level(logging.INFO, logger="bidpacket.test")

        log_event(logging.getLogger("bidpacket.test"), "upload_seen", filename="a.pdf", pages=3)

        record = caplog.records[-1]
        assert record.event == "upload_seen"
        assert record.field_filename == "a.pdf"
        assert record.pages == 3
        assert record.filename != "a.pdf"


class TestJSONLineFormatter:
    def test_envelope_and_fields(self):
        record = logging.LogRecord("bidpacket.x", logging.WARNING, __file__, 1, "done", None, None)
        record.event = "done"
        record.sequences = 4

        payload = json.loads(JSONLineFormatter().format(record))

        assert payload["level"] == "WARNING"
        assert payload["logger"] == "bidpacket.x"
        assert payload["message"] == "done"
        assert payload["sequences"] == 4
        assert "lineno" not in payload
        assert payload["ts"].endswith("Z")


class TestGetLogger:
    def test_name_is_prefixed(self):
        assert get_logger("pipeline").logger.name == "bidpacket.pipeline"


class TestStopwatch:
    def test_each_watch_is_independent(self):
        first = Stopwatch()
        second = Stopwatch()

        assert first.started <= second.started
        assert first.elapsed_ms >= 0
        assert second.elapsed_ms >= 0


@pytest.mark.parametrize("level", [logging.INFO, logging.ERROR])
def test_event_level(caplog, level):
    caplog.set_level(logging.INFO, logger="bidpacket.level")
    get_logger("level").event("tick", level=level)
    assert caplog.records[-1].levelno == level
