"""Token-budget text chunker that breaks on paragraph, line or word boundaries."""

from collections.abc import Iterator

from pdfquiz.domain.exceptions import InvalidInput

# Rough estimate for English text: 1 token ~ 4 characters
CHARS_PER_TOKEN = 4

# (separator, how far past the budget we may look for it)
_BREAKS: tuple[tuple[str, int], ...] = (
    ("\n\n", 500),
    ("\n", 100),
    (" ", 20),
)


def estimate_tokens(text: str) -> int:
    """Approximate token count of text."""
    return len(text) // CHARS_PER_TOKEN


class BoundaryChunker:
    """Chunker that cuts at the budget, moved forward to the nearest natural break."""

    def iter_chunks(self, text: str, max_tokens: int) -> Iterator[str]:
        """Yield consecutive slices of text; joined in order they equal text."""
        if max_tokens < 1:
            raise InvalidInput(f"max_tokens must be positive, got {max_tokens}")
        max_chars = max_tokens * CHARS_PER_TOKEN
        start = 0
        while start < len(text):
            end = start + max_chars
            if end < len(text):
                end = self._find_break(text, end)
            else:
                end = len(text)
            yield text[start:end]
            start = end

    def chunk(self, text: str, max_tokens: int) -> list[str]:
        """Split text into chunks of at most max_tokens (estimated)."""
        return list(self.iter_chunks(text, max_tokens))

    @staticmethod
    def _find_break(text: str, end: int) -> int:
        for separator, window in _BREAKS:
            position = text.find(separator, end)
            if position != -1 and position - end < window:
                return position
        return end
