"""Application entry point and composition root."""

import logging

from falcon.asgi import App

from pdfquiz import __version__
from pdfquiz.application.use_cases.quiz.check_answer import CheckAnswerUseCase
from pdfquiz.application.use_cases.quiz.generate_questions import GenerateQuestionsUseCase
from pdfquiz.application.use_cases.upload.process_upload import ProcessUploadUseCase
from pdfquiz.config import Settings, get_settings
from pdfquiz.infrastructure.chunking.boundary_chunker import BoundaryChunker
from pdfquiz.infrastructure.document_parsers import RegistryTextExtractor
from pdfquiz.infrastructure.embedding.openai_provider import OpenAIEmbeddingProvider
from pdfquiz.infrastructure.llm.openai_completion_provider import OpenAICompletionProvider
from pdfquiz.interfaces.api.app import create_app
from pdfquiz.interfaces.api.resources.health import HealthResource
from pdfquiz.interfaces.api.resources.quiz import CheckAnswerResource, GenerateQuestionsResource
from pdfquiz.interfaces.api.resources.uploads import ProcessPdfResource

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Root logger at the configured level."""
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_pdfquiz_app(settings: Settings | None = None) -> App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()

    embedding_provider = OpenAIEmbeddingProvider(
        base_url=settings.openai_api_url,
        api_key=settings.openai_api_key,
        model=settings.embedding_model,
    )
    completion_provider = OpenAICompletionProvider(
        base_url=settings.openai_api_url,
        api_key=settings.openai_api_key,
        default_model=settings.evaluation_model,
    )

    process_upload = ProcessUploadUseCase(
        text_extractor=RegistryTextExtractor(),
        chunker=BoundaryChunker(),
        embedding_provider=embedding_provider,
        max_tokens=settings.chunk_max_tokens,
        upload_dir=settings.upload_dir,
    )
    generate_questions = GenerateQuestionsUseCase(
        completion_provider=completion_provider,
        model=settings.evaluation_model,
    )
    check_answer = CheckAnswerUseCase(
        completion_provider=completion_provider,
        evaluation_model=settings.evaluation_model,
        feedback_model=settings.feedback_model,
    )

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    return create_app(
        process_pdf_resource=ProcessPdfResource(process_upload),
        generate_questions_resource=GenerateQuestionsResource(generate_questions),
        check_answer_resource=CheckAnswerResource(check_answer),
        health_resource=HealthResource(__version__, settings.environment),
        cors_origins=cors_origins,
    )


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings)
    app = create_pdfquiz_app(settings)
    logger.info("PDF Quiz v%s listening on %s:%d", __version__, settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


def main() -> None:
    """CLI entry point."""
    run_server()
