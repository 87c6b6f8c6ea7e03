"""Code snippet extraction."""

from pdfquiz.infrastructure.code_snippets.pattern_extractor import (
    extract_code_snippets,
    is_likely_code,
)

__all__ = ["extract_code_snippets", "is_likely_code"]
