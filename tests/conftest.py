"""
Shared fixtures for the bid packet parser tests.

- SAMPLE_PACKET: two pages of extracted packet text, three sequences
- StubExtractor: stands in for the PDF text extraction service
"""

import pytest

from models import ExtractedText


SAMPLE_PACKET = (
    "BOS 737 FDP CALENDAR 12/01-12/31\n"
    "DECEMBER 2025 BID PACKET\n"
    "SEQ 1234 2 CA2 FO1\n"
    "RPT 0600\n"
    "1 12/25 737 1234 BOS 0700 E LGA 0815 1.15\n"
    "1 12/25 737 1235 LGA 0900 BOS 1015 1.15 CREW CHANGE\n"
    "RLS 1045\n"
    "LGA HOTEL MARRIOTT 14.30\n"
    "RPT 0800\n"
    "2 12/26 737 1240 LGA 0900 B BOS 1010 1.10\n"
    "RLS 1040\n"
    "TTL 12.30 DUTY 9.15 BLK 8.00\n"
    "SEQ 5678 CA1 FO1\n"
    "1 12/27 737 1300 BOS 0600 ORD 0800 3.00\n"
    "NOTE DEADHEAD\n"
    "\f"
    "PAGE 2\n"
    "SEQ 9012 3 RS1\n"
    "RPT 1400\n"
    "1 12/28 737 1400 BOS 1500 MCO 1830 3.30\n"
    "RLS 1900\n"
    "TTL 4.00 BLK 3.30\n"
)

SAMPLE_FILE_NAME = "BOS_737_DEC2025.pdf"


class StubExtractor:
    """Returns canned text, or raises the given error, and counts calls."""

    def __init__(self, text: str = "", error: Exception = None):
        self.text = text
        self.error = error
        self.calls = 0

    async def extract(self, pdf_bytes: bytes) -> ExtractedText:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return ExtractedText(text=self.text, page_count=self.text.count("\f") + 1)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Tests through the HTTP layer")


@pytest.fixture
def packet_text() -> str:
    return SAMPLE_PACKET


@pytest.fixture
def packet_file_name() -> str:
    return SAMPLE_FILE_NAME


@pytest.fixture
def stub_extractor():
    return StubExtractor(text=SAMPLE_PACKET)
