"""Context match - chunk text with its keyword relevance score."""

from dataclasses import dataclass


@dataclass
class ContextMatch:
    """Candidate context chunk and number of keyword hits."""

    text: str
    score: int
