"""Quiz DTOs."""

from dataclasses import dataclass, field

from pdfquiz.domain.entities import Question, TextChunk
from pdfquiz.domain.value_objects import Difficulty


@dataclass
class GenerateQuestionsInput:
    """Input for generating a quiz from processed document content."""

    chunks: list[TextChunk]
    code_snippets: list[str] = field(default_factory=list)
    count: int = 5
    difficulty: Difficulty = Difficulty.MEDIUM


@dataclass
class CheckAnswerInput:
    """Input for checking one answer."""

    question: Question
    user_answer: str | None
    chunks: list[TextChunk] = field(default_factory=list)
    document_text: str = ""
