"""Select the document chunk most relevant to a question and answer."""

import re
from collections import Counter
from collections.abc import Sequence

from pdfquiz.domain.entities import ContextMatch, Question, TextChunk

STOP_WORDS = frozenset({"this", "that", "with", "from", "then", "than", "what"})
MAX_KEYWORDS = 5

# ASCII word characters only; accented letters split words
_NON_WORD = re.compile(r"\W+", re.ASCII)


def extract_keywords(text: str, limit: int = MAX_KEYWORDS) -> list[str]:
    """Most frequent words longer than 3 characters, lower-cased, stop words removed."""
    counts = Counter(
        word.lower()
        for word in _NON_WORD.split(text)
        if len(word) > 3 and word.lower() not in STOP_WORDS
    )
    # Counter keeps first-seen order for equal counts
    return [word for word, _ in counts.most_common(limit)]


def score_chunks(chunks: Sequence[TextChunk], keywords: list[str]) -> list[ContextMatch]:
    """Count keyword hits per chunk; best first, ties in input order."""
    matches = []
    for chunk in chunks:
        lowered = chunk.text.lower()
        score = sum(1 for keyword in keywords if keyword.lower() in lowered)
        matches.append(ContextMatch(text=chunk.text, score=score))
    return sorted(matches, key=lambda m: m.score, reverse=True)


def select_context(
    question: Question,
    user_answer: str,
    chunks: Sequence[TextChunk] | None = None,
) -> str:
    """
    Return the question's own source chunk if it has one, otherwise the chunk
    sharing the most keywords with question and answer. "" when nothing matches.
    """
    if question.source_chunk:
        return question.source_chunk
    if not chunks:
        return ""

    combined = f"{question.question_text} {question.question_description or ''} {user_answer}"
    matches = score_chunks(chunks, extract_keywords(combined))
    if matches and matches[0].score > 0:
        return matches[0].text
    return ""
