"""Fixtures for API tests."""

import random

import pytest
from falcon.testing import TestClient

from pdfquiz.application.use_cases.quiz.check_answer import CheckAnswerUseCase
from pdfquiz.application.use_cases.quiz.generate_questions import GenerateQuestionsUseCase
from pdfquiz.application.use_cases.upload.process_upload import ProcessUploadUseCase
from pdfquiz.infrastructure.chunking.boundary_chunker import BoundaryChunker
from pdfquiz.interfaces.api.app import create_app
from pdfquiz.interfaces.api.resources.health import HealthResource
from pdfquiz.interfaces.api.resources.quiz import CheckAnswerResource, GenerateQuestionsResource
from pdfquiz.interfaces.api.resources.uploads import ProcessPdfResource


@pytest.fixture
def app(fake_text_extractor, mock_embedding_provider, mock_completion_provider):
    """Falcon ASGI app with API resources wired to fakes."""
    process_upload = ProcessUploadUseCase(
        text_extractor=fake_text_extractor,
        chunker=BoundaryChunker(),
        embedding_provider=mock_embedding_provider,
    )
    generate_questions = GenerateQuestionsUseCase(
        completion_provider=mock_completion_provider,
        rng=random.Random(42),
    )
    check_answer = CheckAnswerUseCase(completion_provider=mock_completion_provider)
    return create_app(
        process_pdf_resource=ProcessPdfResource(process_upload),
        generate_questions_resource=GenerateQuestionsResource(generate_questions),
        check_answer_resource=CheckAnswerResource(check_answer),
        health_resource=HealthResource("test"),
        cors_origins=["http://localhost:5173"],
    )


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
