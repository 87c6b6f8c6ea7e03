"""Unit tests for BoundaryChunker."""

import pytest

from pdfquiz.domain.exceptions import InvalidInput
from pdfquiz.infrastructure.chunking.boundary_chunker import (
    CHARS_PER_TOKEN,
    BoundaryChunker,
    estimate_tokens,
)


def test_empty_text_returns_no_chunks() -> None:
    assert BoundaryChunker().chunk("", 10) == []


def test_short_text_single_chunk() -> None:
    text = "  short text with surrounding whitespace \n"
    chunks = BoundaryChunker().chunk(text, 100)
    assert chunks == [text]


def test_text_exactly_at_budget_single_chunk() -> None:
    text = "a" * (10 * CHARS_PER_TOKEN)
    assert BoundaryChunker().chunk(text, 10) == [text]


def test_no_breaks_cuts_at_budget() -> None:
    text = "a" * 100
    chunks = BoundaryChunker().chunk(text, 10)  # 40 chars
    assert chunks == ["a" * 40, "a" * 40, "a" * 20]


def test_prefers_paragraph_break() -> None:
    # candidate end at 40; paragraph break at 50, newline at 45
    text = "a" * 45 + "\n" + "b" * 4 + "\n\n" + "c" * 30
    chunks = BoundaryChunker().chunk(text, 10)
    assert chunks[0] == "a" * 45 + "\n" + "b" * 4
    assert "".join(chunks) == text


def test_paragraph_break_beyond_window_uses_newline() -> None:
    text = "a" * 45 + "\n" + "b" * 600 + "\n\n" + "c"
    chunks = BoundaryChunker().chunk(text, 10)
    assert chunks[0] == "a" * 45
    assert "".join(chunks) == text


def test_falls_back_to_space() -> None:
    text = "a" * 50 + " " + "b" * 200
    chunks = BoundaryChunker().chunk(text, 10)
    assert chunks[0] == "a" * 50
    assert chunks[1].startswith(" ")


def test_space_beyond_window_cuts_at_budget() -> None:
    text = "a" * 60 + " " + "b" * 10
    chunks = BoundaryChunker().chunk(text, 10)
    assert chunks[0] == "a" * 40


def test_window_is_exclusive() -> None:
    # space exactly 20 chars past candidate end is not taken
    text = "a" * 60 + " tail"
    assert BoundaryChunker().chunk(text, 10)[0] == "a" * 40
    # 19 chars past is taken
    text = "a" * 59 + " tail"
    assert BoundaryChunker().chunk(text, 10)[0] == "a" * 59


def test_concatenation_reproduces_text() -> None:
    paragraph = "Python lists hold items.\nThey are mutable and ordered. " * 20
    text = "\n\n".join([paragraph] * 15)
    for budget in (5, 37, 100, 1000):
        chunks = BoundaryChunker().chunk(text, budget)
        assert "".join(chunks) == text
        assert all(chunks)


def test_rechunking_chunk_within_budget_is_identity() -> None:
    chunker = BoundaryChunker()
    chunks = chunker.chunk("a" * 130, 10)
    assert [len(c) for c in chunks] == [40, 40, 40, 10]
    for chunk in chunks:
        assert chunker.chunk(chunk, 10) == [chunk]


def test_document_at_default_budget_is_one_chunk() -> None:
    text = ("x" * 99 + "\n") * 200  # 20,000 chars
    assert len(text) == 20_000
    assert BoundaryChunker().chunk(text, 8000) == [text]


def test_document_at_small_budget_is_five_chunks() -> None:
    text = "y" * 20_000
    chunks = BoundaryChunker().chunk(text, 1000)
    assert len(chunks) == 5
    assert "".join(chunks) == text


def test_iter_chunks_is_restartable() -> None:
    chunker = BoundaryChunker()
    text = "z" * 130
    assert list(chunker.iter_chunks(text, 10)) == list(chunker.iter_chunks(text, 10))


def test_non_positive_budget_raises() -> None:
    with pytest.raises(InvalidInput):
        BoundaryChunker().chunk("text", 0)


def test_estimate_tokens() -> None:
    assert estimate_tokens("") == 0
    assert estimate_tokens("abcd" * 3) == 3
