"""Chunker port - text splitting strategies."""

from typing import Protocol


class Chunker(Protocol):
    """Port for splitting text into chunks."""

    def chunk(self, text: str, max_tokens: int) -> list[str]: ...
