"""Upload DTOs."""

from dataclasses import dataclass

from pdfquiz.domain.entities import CodeSnippet, TextChunk


@dataclass
class ProcessedDocument:
    """Output of the content pipeline for one uploaded document."""

    text: str
    code_snippets: list[CodeSnippet]
    chunks: list[TextChunk]
