"""Registry: select parser by extension/MIME and extract document text."""

from pathlib import Path

from pdfquiz.domain.exceptions import ExtractionFailure
from pdfquiz.infrastructure.document_parsers.base import DocumentParser, ParseResult
from pdfquiz.infrastructure.document_parsers.pdf_parser import parse_pdf
from pdfquiz.infrastructure.document_parsers.text_parser import parse_md, parse_txt

# extension (lower) -> parse function
_PARSERS_BY_EXT: dict[str, DocumentParser] = {
    "pdf": parse_pdf,
    "txt": parse_txt,
    "md": parse_md,
}

_MIME_TO_EXT: dict[str, str] = {
    "application/pdf": "pdf",
    "text/plain": "txt",
    "text/markdown": "md",
}


def get_parser_for_filename(filename: str | None) -> DocumentParser | None:
    """Return parse function for given filename (by extension) or None."""
    if not filename:
        return None
    ext = Path(filename).suffix.lstrip(".").lower()
    return _PARSERS_BY_EXT.get(ext)


def get_parser_for_content_type(content_type: str | None) -> DocumentParser | None:
    """Return parse function for MIME type or None."""
    if not content_type:
        return None
    mime = content_type.split(";")[0].strip().lower()
    ext = _MIME_TO_EXT.get(mime)
    if not ext:
        return None
    return _PARSERS_BY_EXT.get(ext)


def parse_file(
    data: bytes,
    filename: str | None = None,
    content_type: str | None = None,
) -> ParseResult:
    """
    Select parser by filename (extension) or content_type, run it, return ParseResult.
    Raises ValueError if no parser found or parse failed.
    """
    parser = get_parser_for_filename(filename) or get_parser_for_content_type(content_type)
    if not parser:
        ext = Path(filename).suffix if filename else content_type or "unknown"
        raise ValueError(f"No parser for file type: {ext}")
    return parser(data, filename)


def supported_extensions() -> list[str]:
    """Return list of supported file extensions (e.g. for frontend accept attribute)."""
    return sorted(_PARSERS_BY_EXT.keys())


class RegistryTextExtractor:
    """TextExtractor adapter over the parser registry."""

    def extract(
        self,
        data: bytes,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> str:
        try:
            return parse_file(data, filename=filename, content_type=content_type).text
        except ValueError as e:
            raise ExtractionFailure(str(e)) from e
