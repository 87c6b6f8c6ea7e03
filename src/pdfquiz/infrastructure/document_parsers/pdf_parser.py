"""Parser for PDF."""

import io
import logging

from pypdf import PdfReader

from pdfquiz.infrastructure.document_parsers.base import ParseResult

logger = logging.getLogger(__name__)


def parse_pdf(data: bytes, filename: str | None = None) -> ParseResult:
    """Extract text from PDF bytes, pages separated by a blank line."""
    try:
        reader = PdfReader(io.BytesIO(data))
        pages = [page.extract_text() or "" for page in reader.pages]
    except Exception as e:
        raise ValueError(f"Invalid or corrupted PDF: {e}") from e
    text = "\n\n".join(p for p in pages if p)
    logger.debug("Parsed %s: %d pages, %d chars", filename or "pdf", len(pages), len(text))
    return ParseResult(text=text, page_count=len(pages))
