"""Application ports - interfaces for external adapters."""

from pdfquiz.application.ports.chunker import Chunker
from pdfquiz.application.ports.completion_provider import CompletionProvider
from pdfquiz.application.ports.embedding_provider import EmbeddingProvider
from pdfquiz.application.ports.text_extractor import TextExtractor

__all__ = [
    "Chunker",
    "CompletionProvider",
    "EmbeddingProvider",
    "TextExtractor",
]
