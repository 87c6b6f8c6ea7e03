"""Multipart/form-data decoding."""

from pdfquiz.infrastructure.multipart.decoder import (
    MultipartPart,
    decode_multipart,
    find_part,
    parse_boundary,
)

__all__ = ["MultipartPart", "decode_multipart", "find_part", "parse_boundary"]
