"""Document parsers: extract text from uploaded files."""

from pdfquiz.infrastructure.document_parsers.base import ParseResult
from pdfquiz.infrastructure.document_parsers.registry import (
    RegistryTextExtractor,
    parse_file,
    supported_extensions,
)

__all__ = ["ParseResult", "RegistryTextExtractor", "parse_file", "supported_extensions"]
