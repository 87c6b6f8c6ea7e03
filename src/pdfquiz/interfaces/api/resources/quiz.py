"""Quiz API resources: question generation and answer checking."""

import logging

import falcon.asgi

from pdfquiz.application.dto.quiz_dto import CheckAnswerInput, GenerateQuestionsInput
from pdfquiz.application.use_cases.quiz.check_answer import CheckAnswerUseCase
from pdfquiz.application.use_cases.quiz.generate_questions import (
    GenerateQuestionsUseCase,
    question_from_dict,
)
from pdfquiz.domain.entities import Question, TextChunk
from pdfquiz.domain.exceptions import InvalidInput
from pdfquiz.domain.value_objects import Difficulty, QuestionType

logger = logging.getLogger(__name__)


def _chunks_from_body(raw: object) -> list[TextChunk]:
    """Parse the client's [{text, embedding}, ...] list; malformed items are skipped."""
    if not isinstance(raw, list):
        return []
    chunks: list[TextChunk] = []
    for item in raw:
        if isinstance(item, dict) and isinstance(item.get("text"), str):
            chunks.append(
                TextChunk(index=len(chunks), text=item["text"], embedding=item.get("embedding"))
            )
    return chunks


def _difficulty(raw: object) -> Difficulty:
    try:
        return Difficulty(raw)
    except ValueError:
        return Difficulty.MEDIUM


def _question_to_dict(q: Question) -> dict:
    data = {
        "type": str(q.type),
        "questionNumber": q.question_number,
        "questionText": q.question_text,
        "questionDescription": q.question_description,
        "correctAnswer": q.correct_answer,
        "sourceChunk": q.source_chunk,
    }
    if q.code_snippet:
        data["codeSnippet"] = q.code_snippet
    if q.options:
        data["options"] = q.options
    return data


class GenerateQuestionsResource:
    """POST /api/generate-questions - build a quiz from processed PDF content."""

    def __init__(self, generate_questions: GenerateQuestionsUseCase) -> None:
        self._generate_questions = generate_questions

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Generate questions."""
        logger.info("Question generation request received")
        try:
            body = await req.get_media()
            chunks = _chunks_from_body(body.get("embeddings"))
            snippets = [s for s in body.get("codeSnippets") or [] if isinstance(s, str)]
            count = int(body.get("count", 5))
            difficulty = _difficulty(body.get("difficulty"))
        except (
            AttributeError,
            TypeError,
            ValueError,
            falcon.MediaNotFoundError,
            falcon.MediaMalformedError,
        ):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid request body"}
            return

        try:
            questions = await self._generate_questions.execute(
                GenerateQuestionsInput(
                    chunks=chunks,
                    code_snippets=snippets,
                    count=count,
                    difficulty=difficulty,
                )
            )
        except InvalidInput as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = {"questions": [_question_to_dict(q) for q in questions]}
        resp.status = falcon.HTTP_200


class CheckAnswerResource:
    """POST /api/check-answer - grade one answer."""

    def __init__(self, check_answer: CheckAnswerUseCase) -> None:
        self._check_answer = check_answer

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Check answer against question and document context."""
        logger.info("Answer checking request received")
        try:
            body = await req.get_media()
            raw_question = body.get("question")
            user_answer = body.get("userAnswer")
            chunks = _chunks_from_body(body.get("embeddings"))
            document_text = body.get("pdfText") or ""
        except (AttributeError, falcon.MediaNotFoundError, falcon.MediaMalformedError):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid request body"}
            return

        if not raw_question:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Question is required"}
            return
        try:
            question = question_from_dict(raw_question, QuestionType.SHORT_ANSWER, 1)
        except ValueError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Invalid question: {e}"}
            return

        try:
            result = await self._check_answer.execute(
                CheckAnswerInput(
                    question=question,
                    user_answer=None if user_answer is None else str(user_answer),
                    chunks=chunks,
                    document_text=str(document_text),
                )
            )
        except InvalidInput as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = {
            "isCorrect": result.is_correct,
            "percentCorrect": result.percent_correct,
            "explanation": result.explanation,
        }
        resp.status = falcon.HTTP_200
