"""Pytest fixtures for PDF Quiz tests."""

from __future__ import annotations

import io
import json
from unittest.mock import AsyncMock

import pytest

from pdfquiz.domain.entities import TextChunk
from pdfquiz.domain.exceptions import ExtractionFailure


# --- Fakes ---


class FakeTextExtractor:
    """TextExtractor that returns fixed text and records the bytes it received."""

    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[tuple[bytes, str | None, str | None]] = []

    def extract(
        self,
        data: bytes,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> str:
        self.calls.append((data, filename, content_type))
        if self.error:
            raise self.error
        return self.text


def multipart_body(
    boundary: str,
    parts: list[tuple[str, str | None, str | None, bytes]],
    terminate: bool = True,
) -> bytes:
    """Build a multipart/form-data body from (name, filename, content_type, data)."""
    out = b""
    for name, filename, content_type, data in parts:
        disposition = f'form-data; name="{name}"'
        if filename is not None:
            disposition += f'; filename="{filename}"'
        out += f"--{boundary}\r\nContent-Disposition: {disposition}\r\n".encode()
        if content_type:
            out += f"Content-Type: {content_type}\r\n".encode()
        out += b"\r\n" + data + b"\r\n"
    if terminate:
        out += f"--{boundary}--\r\n".encode()
    return out


def pdf_bytes(pages: int = 1) -> bytes:
    """Minimal valid PDF with blank pages."""
    from pypdf import PdfWriter

    w = PdfWriter()
    for _ in range(pages):
        w.add_blank_page(width=72, height=72)
    buf = io.BytesIO()
    w.write(buf)
    return buf.getvalue()


# --- Fixtures ---


@pytest.fixture
def fake_text_extractor() -> FakeTextExtractor:
    return FakeTextExtractor(text="Intro to Python.\n\ndef add(a, b):\n    return a + b\n")


@pytest.fixture
def failing_text_extractor() -> FakeTextExtractor:
    return FakeTextExtractor(error=ExtractionFailure("Invalid or corrupted PDF: EOF marker not found"))


@pytest.fixture
def mock_embedding_provider():
    """AsyncMock for EmbeddingProvider - returns fixed vectors per text."""

    async def _embed(texts: list[str]) -> list[list[float]]:
        return [[0.1] * 8 for _ in texts]

    mock = AsyncMock()
    mock.embed = AsyncMock(side_effect=_embed)
    return mock


@pytest.fixture
def mock_completion_provider():
    """AsyncMock for CompletionProvider - returns a valid question JSON."""
    mock = AsyncMock()
    mock.complete.return_value = json.dumps(
        {
            "type": "short_answer",
            "questionNumber": 1,
            "questionText": "What does a for loop do?",
            "questionDescription": "Explain iteration.",
            "correctAnswer": "It repeats a block for each item",
        }
    )
    return mock


@pytest.fixture
def sample_chunks() -> list[TextChunk]:
    return [
        TextChunk(index=0, text="list comprehension example", embedding=[0.1]),
        TextChunk(index=1, text="for loop basics", embedding=[0.2]),
        TextChunk(index=2, text="unrelated topic", embedding=[0.3]),
    ]
