"""Process upload use case."""

import logging
import tempfile
import time
from pathlib import Path

from pdfquiz.application.dto.upload_dto import ProcessedDocument
from pdfquiz.application.ports import Chunker, EmbeddingProvider, TextExtractor
from pdfquiz.domain.entities import TextChunk, UploadedDocument
from pdfquiz.domain.exceptions import (
    EmbeddingFailure,
    ExtractionFailure,
    InvalidInput,
    MalformedRequest,
)
from pdfquiz.infrastructure.chunking.boundary_chunker import estimate_tokens
from pdfquiz.infrastructure.code_snippets import extract_code_snippets
from pdfquiz.infrastructure.multipart import decode_multipart, find_part

logger = logging.getLogger(__name__)

DEFAULT_MAX_TOKENS = 8000


class ProcessUploadUseCase:
    """Turn a multipart upload into text, code snippets and embedded chunks."""

    def __init__(
        self,
        text_extractor: TextExtractor,
        chunker: Chunker,
        embedding_provider: EmbeddingProvider,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        upload_dir: str | None = None,
        field_name: str = "pdf",
    ) -> None:
        self._text_extractor = text_extractor
        self._chunker = chunker
        self._embedding_provider = embedding_provider
        self._max_tokens = max_tokens
        self._upload_dir = upload_dir
        self._field_name = field_name

    async def execute(self, body: bytes, boundary: str) -> ProcessedDocument:
        """Run the whole pipeline; any downstream failure aborts it."""
        document = self._read_upload(body, boundary)

        with tempfile.TemporaryDirectory(dir=self._upload_dir) as tmp:
            path = Path(tmp) / f"upload-{int(time.time() * 1000)}.pdf"
            path.write_bytes(document.content)
            logger.info("PDF file saved temporarily at: %s", path)
            text = self._extract_text(path.read_bytes(), document)
        logger.info("PDF text extracted, length: %d", len(text))

        code_snippets = extract_code_snippets(text)
        logger.info("Code snippets extracted: %d", len(code_snippets))

        chunks = [
            TextChunk(index=i, text=t)
            for i, t in enumerate(self._chunker.chunk(text, self._max_tokens))
        ]
        logger.info(
            "Text split into %d chunks (~%d tokens)", len(chunks), estimate_tokens(text)
        )
        await self._embed_chunks(chunks)
        logger.info("Embeddings generated")

        return ProcessedDocument(text=text, code_snippets=code_snippets, chunks=chunks)

    def _read_upload(self, body: bytes, boundary: str) -> UploadedDocument:
        parts = decode_multipart(body, boundary)
        part = find_part(parts, self._field_name)
        if part is None or not part.is_file:
            raise MalformedRequest("No PDF file provided")
        if not part.data:
            raise InvalidInput("Uploaded PDF file is empty")
        return UploadedDocument(
            content=part.data,
            filename=part.filename or "upload.pdf",
            media_type=part.content_type,
        )

    def _extract_text(self, data: bytes, document: UploadedDocument) -> str:
        try:
            return self._text_extractor.extract(
                data, filename=document.filename, content_type=document.media_type
            )
        except Exception as e:
            raise ExtractionFailure(f"Failed to process PDF: {e}") from e

    async def _embed_chunks(self, chunks: list[TextChunk]) -> None:
        # One request per chunk, in order, so embeddings stay index-aligned
        for chunk in chunks:
            try:
                vectors = await self._embedding_provider.embed([chunk.text])
            except Exception as e:
                raise EmbeddingFailure(f"Failed to generate embeddings: {e}") from e
            if len(vectors) != 1:
                raise EmbeddingFailure(
                    f"Failed to generate embeddings: expected 1 vector, got {len(vectors)}"
                )
            chunk.embedding = vectors[0]
