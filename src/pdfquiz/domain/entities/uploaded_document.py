"""Uploaded document entity."""

from dataclasses import dataclass


@dataclass
class UploadedDocument:
    """File received in a multipart upload, discarded after text extraction."""

    content: bytes
    filename: str
    media_type: str | None = None
