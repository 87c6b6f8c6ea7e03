"""Parser for plain text and markdown."""

from pdfquiz.infrastructure.document_parsers.base import ParseResult


def parse_text(data: bytes, filename: str | None = None) -> ParseResult:
    """Treat as UTF-8 text, falling back to cp1251 and then replacement chars."""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        try:
            text = data.decode("cp1251")
        except UnicodeDecodeError:
            text = data.decode("utf-8", errors="replace")
    return ParseResult(text=text)


def parse_txt(data: bytes, filename: str | None = None) -> ParseResult:
    """Plain text (.txt)."""
    return parse_text(data, filename)


def parse_md(data: bytes, filename: str | None = None) -> ParseResult:
    """Markdown (.md) - kept as-is so fenced code blocks survive."""
    return parse_text(data, filename)
