"""Check answer use case."""

import json
import logging
import math

from pdfquiz.application.dto.quiz_dto import CheckAnswerInput
from pdfquiz.application.ports import CompletionProvider
from pdfquiz.application.use_cases.quiz.select_context import select_context
from pdfquiz.domain.entities import AnswerEvaluation, Question
from pdfquiz.domain.exceptions import CompletionFailure, InvalidInput
from pdfquiz.domain.value_objects import QuestionType

logger = logging.getLogger(__name__)

EVALUATION_SYSTEM_PROMPT = (
    "You are an expert programming educator evaluating a student answer to a "
    "programming question. Your feedback should be accurate, helpful, and educational."
)
FEEDBACK_SYSTEM_PROMPT = (
    "You are an expert programming educator providing feedback on a student answer. "
    "Your feedback should be accurate, helpful, and educational."
)

FALLBACK_CONTEXT_CHARS = 500


def _question_block(question: Question) -> str:
    lines = [f"Question: {question.question_text}"]
    if question.question_description:
        lines.append(f"Description: {question.question_description}")
    if question.code_snippet:
        lines.append(f"Code: ```\n{question.code_snippet}\n```")
    return "\n".join(lines)


def _context_block(context: str, document_text: str) -> str:
    return context or document_text[:FALLBACK_CONTEXT_CHARS] + "..."


def _evaluation_prompt(question: Question, user_answer: str, context: str) -> str:
    return f"""
{_question_block(question)}
Expected Answer: {question.correct_answer or "Not provided directly"}
User's Answer: {user_answer}

Relevant Context from the Programming Tutorial:
{context}

Evaluate the user's answer based on the context from the programming tutorial.

Determine:
1. Is the answer correct? (true/false)
2. How correct is it as a percentage? (0.0 to 1.0)
3. Provide a detailed explanation of why the answer is correct or incorrect
4. Include specific references to the course material when possible

Format response as a JSON object with these fields:
- isCorrect: boolean
- percentCorrect: number (0.0 to 1.0)
- explanation: string
"""


def _feedback_prompt(
    question: Question, user_answer: str, is_correct: bool, context: str
) -> str:
    return f"""
{_question_block(question)}
User's Answer: {user_answer}
Correct Answer: {question.correct_answer or "Not provided directly"}
Is Correct: {"true" if is_correct else "false"}

Relevant Context from the Programming Tutorial:
{context}

Generate helpful feedback for the user's answer. The feedback should:
1. Be encouraging and educational
2. Explain why the answer is correct or incorrect
3. Provide additional context or information to deepen understanding
4. For incorrect answers, explain the correct answer
5. Include code examples where appropriate

Keep your feedback concise (3-5 sentences) but informative.
"""


def _evaluation_from_dict(data: object) -> AnswerEvaluation:
    if not isinstance(data, dict) or not isinstance(data.get("isCorrect"), bool):
        raise ValueError("evaluation must be a JSON object with boolean isCorrect")
    is_correct = data["isCorrect"]
    percent = float(data.get("percentCorrect", 1.0 if is_correct else 0.0))
    if math.isnan(percent):
        raise ValueError("percentCorrect is not a number")
    return AnswerEvaluation(
        is_correct=is_correct,
        percent_correct=min(max(percent, 0.0), 1.0),
        explanation=str(data.get("explanation", "")),
    )


class CheckAnswerUseCase:
    """Grade a user's answer against the question and the document content."""

    def __init__(
        self,
        completion_provider: CompletionProvider,
        evaluation_model: str | None = None,
        feedback_model: str | None = None,
    ) -> None:
        self._completion_provider = completion_provider
        self._evaluation_model = evaluation_model
        self._feedback_model = feedback_model

    async def execute(self, input_data: CheckAnswerInput) -> AnswerEvaluation:
        """Multiple choice is compared directly; other types are graded by the model."""
        if input_data.user_answer is None:
            raise InvalidInput("User answer is required")
        question = input_data.question
        user_answer = input_data.user_answer

        context = _context_block(
            select_context(question, user_answer, input_data.chunks),
            input_data.document_text,
        )

        if question.type == QuestionType.MULTIPLE_CHOICE and question.correct_answer:
            is_correct = user_answer.strip().lower() == question.correct_answer.strip().lower()
            result = AnswerEvaluation(
                is_correct=is_correct,
                percent_correct=1.0 if is_correct else 0.0,
                explanation=await self._feedback(question, user_answer, is_correct, context),
            )
        else:
            result = await self._evaluate(question, user_answer, context)

        logger.info("Answer checked, result: %s", "correct" if result.is_correct else "incorrect")
        return result

    async def _evaluate(
        self, question: Question, user_answer: str, context: str
    ) -> AnswerEvaluation:
        try:
            raw = await self._completion_provider.complete(
                EVALUATION_SYSTEM_PROMPT,
                _evaluation_prompt(question, user_answer, context),
                model=self._evaluation_model,
                temperature=0.3,
                max_tokens=1000,
                json_mode=True,
            )
            return _evaluation_from_dict(json.loads(raw))
        except (CompletionFailure, ValueError, TypeError) as e:
            logger.warning("Error using LLM to check answer: %s", e)

        correct = question.correct_answer
        is_correct = bool(correct) and correct.lower() in user_answer.lower()
        return AnswerEvaluation(
            is_correct=is_correct,
            percent_correct=1.0 if is_correct else 0.0,
            explanation=f"The correct answer is: {correct or 'Not available'}",
        )

    async def _feedback(
        self, question: Question, user_answer: str, is_correct: bool, context: str
    ) -> str:
        try:
            return await self._completion_provider.complete(
                FEEDBACK_SYSTEM_PROMPT,
                _feedback_prompt(question, user_answer, is_correct, context),
                model=self._feedback_model,
                temperature=0.7,
                max_tokens=500,
            )
        except CompletionFailure as e:
            logger.warning("Error generating feedback: %s", e)
        if is_correct:
            return "Correct! Well done."
        return f"Incorrect. The correct answer is: {question.correct_answer or 'Not available'}"
