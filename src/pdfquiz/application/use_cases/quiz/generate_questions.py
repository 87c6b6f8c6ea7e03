"""Generate questions use case."""

import json
import logging
import random

from pdfquiz.application.dto.quiz_dto import GenerateQuestionsInput
from pdfquiz.application.ports import CompletionProvider
from pdfquiz.domain.entities import Question, TextChunk
from pdfquiz.domain.exceptions import CompletionFailure, InvalidInput
from pdfquiz.domain.value_objects import Difficulty, QuestionType

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an expert educational content creator specializing in programming "
    "tutorials. Your task is to create high-quality questions based on programming "
    "tutorial content."
)

_BASE_TYPES = (
    QuestionType.MULTIPLE_CHOICE,
    QuestionType.SHORT_ANSWER,
    QuestionType.FILL_IN_BLANK,
)


def _code_prompt(
    snippet: str, context: str, difficulty: Difficulty, number: int
) -> str:
    return f"""Create a {difficulty} difficulty programming question about the following code:
```
{snippet}
```

For context, this is from a programming tutorial that also includes this information:
{context[:500]}...

Create a question that tests the reader's understanding of this code. {difficulty.description}.

The question should include:
1. A clear question asking about the code's functionality, purpose, or potential issues
2. The expected correct answer
3. For multiple choice questions, include 4 options with one correct answer

Format the response as a JSON object with these fields:
- type: "{QuestionType.CODE_ANALYSIS}"
- questionNumber: {number}
- questionText: A concise question title
- questionDescription: Detailed description of what you're asking
- codeSnippet: The code snippet to analyze
- correctAnswer: The correct answer
- options: Array of 4 possible answers (only for multiple choice)"""


def _content_prompt(
    question_type: QuestionType, context: str, difficulty: Difficulty, number: int
) -> str:
    return f"""Based on this content from a programming tutorial:
{context[:800]}...

Create a {question_type} question that tests understanding of the material. {difficulty.description}.

Question types:
- multiple_choice: Include 4 options with 1 correct answer
- short_answer: Should have a specific expected answer
- fill_in_blank: Should have a specific word or phrase to be filled in

Format the response as a JSON object with these fields:
- type: "{question_type}"
- questionNumber: {number}
- questionText: A concise question title
- questionDescription: Detailed description of what you're asking
- correctAnswer: The correct answer
- options: Array of 4 possible answers (only for multiple choice)"""


def _as_int(value, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def question_from_dict(data: dict, fallback_type: QuestionType, number: int) -> Question:
    """Build Question from model/client JSON (camelCase keys). Raises ValueError if unusable."""
    if not isinstance(data, dict):
        raise ValueError("question must be a JSON object")
    text = data.get("questionText")
    if not isinstance(text, str) or not text.strip():
        raise ValueError("questionText missing")
    try:
        question_type = QuestionType(data.get("type") or fallback_type)
    except ValueError:
        question_type = fallback_type
    options = data.get("options") or []
    return Question(
        type=question_type,
        question_number=_as_int(data.get("questionNumber"), number),
        question_text=text,
        question_description=data.get("questionDescription"),
        code_snippet=data.get("codeSnippet"),
        correct_answer=None if data.get("correctAnswer") is None else str(data["correctAnswer"]),
        options=[str(o) for o in options] if isinstance(options, list) else [],
        source_chunk=data.get("sourceChunk"),
    )


class GenerateQuestionsUseCase:
    """Generate a mix of quiz questions from document chunks and code snippets."""

    def __init__(
        self,
        completion_provider: CompletionProvider,
        model: str | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._completion_provider = completion_provider
        self._model = model
        self._rng = rng or random.Random()

    async def execute(self, input_data: GenerateQuestionsInput) -> list[Question]:
        """Generate up to count questions; failed ones are skipped."""
        if not input_data.chunks:
            raise InvalidInput("Valid embeddings are required")
        if input_data.count < 1:
            raise InvalidInput("count must be at least 1")

        types = list(_BASE_TYPES)
        if input_data.code_snippets:
            types.append(QuestionType.CODE_ANALYSIS)

        questions: list[Question] = []
        for i in range(input_data.count):
            question_type = (
                QuestionType.MULTIPLE_CHOICE
                if self._rng.random() < 0.5
                else self._rng.choice(types)
            )
            chunk = self._select_chunk(input_data.chunks, questions)
            snippet = None
            if question_type == QuestionType.CODE_ANALYSIS:
                snippet = self._rng.choice(input_data.code_snippets)

            question = await self._create_question(
                question_type, chunk, input_data.difficulty, snippet, i + 1
            )
            if question:
                questions.append(question)

        logger.info("Generated %d questions", len(questions))
        return questions

    def _select_chunk(self, chunks: list[TextChunk], existing: list[Question]) -> str:
        used = {q.source_chunk for q in existing if q.source_chunk}
        available = [c for c in chunks if c.text not in used]
        return self._rng.choice(available or chunks).text

    async def _create_question(
        self,
        question_type: QuestionType,
        chunk: str,
        difficulty: Difficulty,
        snippet: str | None,
        number: int,
    ) -> Question | None:
        if question_type == QuestionType.CODE_ANALYSIS and snippet:
            prompt = _code_prompt(snippet, chunk, difficulty, number)
        else:
            prompt = _content_prompt(question_type, chunk, difficulty, number)
        try:
            raw = await self._completion_provider.complete(
                SYSTEM_PROMPT,
                prompt,
                model=self._model,
                temperature=0.7,
                max_tokens=1000,
                json_mode=True,
            )
            question = question_from_dict(json.loads(raw), question_type, number)
        except (CompletionFailure, ValueError) as e:
            logger.warning("Error creating question %d: %s", number, e)
            return None
        question.source_chunk = chunk
        if snippet and not question.code_snippet:
            question.code_snippet = snippet
        return question
