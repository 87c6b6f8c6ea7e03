"""Text chunk entity - contiguous slice of document text."""

from dataclasses import dataclass


@dataclass
class TextChunk:
    """Chunk - ordered text segment, embedded once the pipeline has run."""

    index: int
    text: str
    embedding: list[float] | None = None
