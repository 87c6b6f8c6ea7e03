"""Base protocol for document parsers."""

from typing import Protocol


class ParseResult:
    """Result of parsing a file: extracted text and page count (if paged)."""

    __slots__ = ("text", "page_count")

    def __init__(self, text: str, page_count: int | None = None) -> None:
        self.text = text
        self.page_count = page_count


class DocumentParser(Protocol):
    """Parser that extracts text from file bytes."""

    def __call__(self, data: bytes, filename: str | None = None) -> ParseResult:
        """Extract text. Raises ValueError on unreadable input."""
        ...
