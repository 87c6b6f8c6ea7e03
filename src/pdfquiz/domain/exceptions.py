"""Domain exceptions."""


class PdfQuizError(Exception):
    """Base exception for PDF Quiz."""

    pass


class MalformedRequest(PdfQuizError):
    """Request body could not be decoded (bad boundary, missing file part)."""

    pass


class InvalidInput(PdfQuizError):
    """A required field is empty or missing."""

    pass


class ExtractionFailure(PdfQuizError):
    """Text could not be extracted from the uploaded document."""

    pass


class EmbeddingFailure(PdfQuizError):
    """Embedding service failed for a chunk."""

    pass


class CompletionFailure(PdfQuizError):
    """Text-completion service failed or returned an unusable response."""

    pass
