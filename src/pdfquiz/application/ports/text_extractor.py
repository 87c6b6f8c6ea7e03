"""Text extractor port - plain text from document bytes."""

from typing import Protocol


class TextExtractor(Protocol):
    """Port for extracting plain text from an uploaded file."""

    def extract(
        self,
        data: bytes,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> str:
        """Return document text. Raises ExtractionFailure on unreadable input."""
        ...
