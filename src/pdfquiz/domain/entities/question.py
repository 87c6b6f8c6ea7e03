"""Quiz question and answer evaluation entities."""

from dataclasses import dataclass, field

from pdfquiz.domain.value_objects import QuestionType


@dataclass
class Question:
    """Quiz question generated from a document chunk or code snippet."""

    type: QuestionType
    question_number: int
    question_text: str
    question_description: str | None = None
    code_snippet: str | None = None
    correct_answer: str | None = None
    options: list[str] = field(default_factory=list)
    source_chunk: str | None = None


@dataclass
class AnswerEvaluation:
    """Verdict on a user's answer."""

    is_correct: bool
    percent_correct: float
    explanation: str
