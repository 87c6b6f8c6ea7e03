"""PDF Quiz - turn programming tutorials into quizzes."""

__version__ = "0.1.0"
