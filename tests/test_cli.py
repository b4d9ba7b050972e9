import json
import logging

import pytest

import cli
import logging_utils
from conftest import SAMPLE_PACKET, StubExtractor
from pdf_processor import TextExtractionError


def _patch_extractor(monkeypatch, extractor):
    monkeypatch.setattr("pipeline.get_text_extractor", lambda: extractor)


@pytest.fixture(autouse=True)
def restore_log_stream(capsys):
    # main() points the shared handler at the test's stderr; put it back before capsys closes it
    handler = logging_utils._stream_handler
    original = handler.stream if handler else None
    yield
    if handler is not None:
        # assign directly: setStream() would flush the capsys stream, already closed here
        handler.stream = original


class TestCli:
    def test_missing_input(self, tmp_path, capsys):
        code = cli.main([str(tmp_path / "nope.pdf")])

        assert code == 1
        assert "File not found" in capsys.readouterr().err

    def test_writes_output_file(self, tmp_path, monkeypatch):
        _patch_extractor(monkeypatch, StubExtractor(SAMPLE_PACKET))
        src = tmp_path / "BOS_737_DEC2025.pdf"
        src.write_bytes(b"%PDF-1.4 stub")
        out = tmp_path / "json" / "packet.json"

        code = cli.main([str(src), "-o", str(out), "--pretty"])

        assert code == 0
        data = json.loads(out.read_text())
        assert data["metadata"]["source_document"] == "BOS_737_DEC2025.pdf"
        assert len(data["sequences"]) == 3

    def test_stdout(self, tmp_path, monkeypatch, capsys):
        _patch_extractor(monkeypatch, StubExtractor(SAMPLE_PACKET))
        src = tmp_path / "BOS_737_DEC2025.pdf"
        src.write_bytes(b"%PDF-1.4 stub")

        assert cli.main([str(src)]) == 0
        assert json.loads(capsys.readouterr().out)["metadata"]["fleet"] == "737"

    def test_logs_go_to_stderr_even_when_verbose(self, tmp_path, monkeypatch, capsys, caplog):
        caplog.set_level(logging.INFO)
        _patch_extractor(monkeypatch, StubExtractor(SAMPLE_PACKET))
        src = tmp_path / "BOS_737_DEC2025.pdf"
        src.write_bytes(b"%PDF-1.4 stub")

        assert cli.main([str(src)]) == 0

        captured = capsys.readouterr()
        assert json.loads(captured.out)["metadata"]["base"] == "BOS"
        assert '"event": "bid_packet_parsed"' in captured.err

    def test_extraction_failure(self, tmp_path, monkeypatch, capsys):
        _patch_extractor(monkeypatch, StubExtractor(error=TextExtractionError("bad xref")))
        src = tmp_path / "broken.pdf"
        src.write_bytes(b"junk")

        assert cli.main([str(src)]) == 1
        assert "bad xref" in capsys.readouterr().err
