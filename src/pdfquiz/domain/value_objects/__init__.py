"""Domain value objects."""

from pdfquiz.domain.value_objects.difficulty import Difficulty
from pdfquiz.domain.value_objects.question_type import QuestionType

__all__ = ["Difficulty", "QuestionType"]
