"""Question types offered by the quiz generator."""

from enum import StrEnum


class QuestionType(StrEnum):
    """Supported question types."""

    MULTIPLE_CHOICE = "multiple_choice"
    SHORT_ANSWER = "short_answer"
    FILL_IN_BLANK = "fill_in_blank"
    CODE_ANALYSIS = "code_analysis"
