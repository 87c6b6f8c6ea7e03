"""Domain entities."""

from pdfquiz.domain.entities.code_snippet import CodeSnippet
from pdfquiz.domain.entities.context_match import ContextMatch
from pdfquiz.domain.entities.question import AnswerEvaluation, Question
from pdfquiz.domain.entities.text_chunk import TextChunk
from pdfquiz.domain.entities.uploaded_document import UploadedDocument

__all__ = [
    "AnswerEvaluation",
    "CodeSnippet",
    "ContextMatch",
    "Question",
    "TextChunk",
    "UploadedDocument",
]
