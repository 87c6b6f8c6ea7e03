"""Question difficulty levels."""

from enum import StrEnum


class Difficulty(StrEnum):
    """Difficulty requested for generated questions."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    Difficulty.EASY: "beginner-friendly questions focusing on basic concepts and recognition",
    Difficulty.MEDIUM: "intermediate-level questions requiring understanding and application",
    Difficulty.HARD: "advanced questions requiring analysis, synthesis and deep understanding",
}
