"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from pdfquiz.interfaces.api.middleware.cors import CORSMiddleware
from pdfquiz.interfaces.api.resources.health import HealthResource
from pdfquiz.interfaces.api.resources.quiz import CheckAnswerResource, GenerateQuestionsResource
from pdfquiz.interfaces.api.resources.uploads import ProcessPdfResource

logger = logging.getLogger(__name__)


async def handle_unexpected_error(req, resp, ex, params) -> None:
    """Log unhandled exceptions and answer with a generic 500."""
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "Internal Server Error"}


def create_app(
    process_pdf_resource: ProcessPdfResource,
    generate_questions_resource: GenerateQuestionsResource,
    check_answer_resource: CheckAnswerResource,
    health_resource: HealthResource,
    cors_origins: list[str] | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    middleware = [CORSMiddleware(cors_origins)] if cors_origins else []
    app = falcon.asgi.App(middleware=middleware)
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_route("/api/health", health_resource)
    app.add_route("/api/health/ready", health_resource, suffix="ready")
    app.add_route("/api/process-pdf", process_pdf_resource)
    app.add_route("/api/generate-questions", generate_questions_resource)
    app.add_route("/api/check-answer", check_answer_resource)
    return app
