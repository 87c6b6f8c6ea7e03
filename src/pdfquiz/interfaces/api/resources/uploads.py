"""PDF upload API resource."""

import logging

import falcon.asgi

from pdfquiz.application.dto.upload_dto import ProcessedDocument
from pdfquiz.application.use_cases.upload.process_upload import ProcessUploadUseCase
from pdfquiz.domain.exceptions import (
    EmbeddingFailure,
    ExtractionFailure,
    InvalidInput,
    MalformedRequest,
)
from pdfquiz.infrastructure.multipart import parse_boundary

logger = logging.getLogger(__name__)


class ProcessPdfResource:
    """POST /api/process-pdf - multipart upload with a "pdf" file part."""

    def __init__(self, process_upload: ProcessUploadUseCase) -> None:
        self._process_upload = process_upload

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Extract text, code snippets and embedded chunks from the uploaded PDF."""
        logger.info("PDF processing request received")
        try:
            boundary = parse_boundary(req.content_type)
            body = await req.stream.read()
            result = await self._process_upload.execute(body, boundary)
        except (MalformedRequest, InvalidInput) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except (ExtractionFailure, EmbeddingFailure) as e:
            logger.exception("Error processing PDF")
            resp.status = falcon.HTTP_500
            resp.media = {"error": str(e)}
            return

        resp.media = _processed_to_dict(result)
        resp.status = falcon.HTTP_200


def _processed_to_dict(d: ProcessedDocument) -> dict:
    return {
        "text": d.text,
        "codeSnippets": [s.text for s in d.code_snippets],
        "embeddings": [{"text": c.text, "embedding": c.embedding} for c in d.chunks],
    }
