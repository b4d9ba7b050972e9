# pdf_processor.py
from __future__ import annotations

import asyncio
import functools as _functools
import io
from typing import Optional

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from config import thread_pool
from logging_utils import Stopwatch, get_logger
from models import ExtractedText

logger = get_logger("pdf_processor")

# pages are joined with a form feed so the pipeline can split them back apart
PAGE_SEPARATOR = "\f"


class TextExtractionError(Exception):
    """The document could not be turned into text."""


class PDFProcessor:
    """Text extraction service: PDF bytes -> linear text, one chunk per page."""

    @staticmethod
    def _extract_sync(pdf_bytes: bytes) -> ExtractedText:
        if not pdf_bytes:
            raise TextExtractionError("Empty document")
        try:
            reader = PdfReader(io.BytesIO(pdf_bytes))
            pages = [page.extract_text() or "" for page in reader.pages]
        except (PyPdfError, ValueError, KeyError, TypeError) as e:
            raise TextExtractionError(f"PDF text extraction failed: {e}") from e
        return ExtractedText(text=PAGE_SEPARATOR.join(pages), page_count=len(pages))

    async def extract(self, pdf_bytes: bytes) -> ExtractedText:
        watch = Stopwatch()
        try:
            result = await asyncio.get_running_loop().run_in_executor(
                thread_pool,
                _functools.partial(self._extract_sync, pdf_bytes),
            )
        except TextExtractionError as e:
            logger.event("pdf_extraction_failed", error=str(e), duration_ms=watch.elapsed_ms)
            raise
        logger.event(
            "pdf_extraction_finished",
            pages=result.page_count,
            characters=len(result.text),
            duration_ms=watch.elapsed_ms,
        )
        return result


_processor: Optional[PDFProcessor] = None


def get_text_extractor() -> PDFProcessor:
    """
    Process-wide extraction handle, created on first use.

    Two concurrent first calls may both build a processor; the last one
    assigned wins. The processor holds no state, so no lock is taken.
    """
    global _processor
    if _processor is None:
        _processor = PDFProcessor()
    return _processor
