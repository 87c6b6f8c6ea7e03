"""Decoder for multipart/form-data request bodies."""

import re
from dataclasses import dataclass

from pdfquiz.domain.exceptions import MalformedRequest

_BOUNDARY_RE = re.compile(r'boundary=(?:"([^"]+)"|([^;]+))', re.IGNORECASE)
_NAME_RE = re.compile(r'(?<![\w*])name="([^"]+)"')
_FILENAME_RE = re.compile(r'filename="([^"]+)"')

_CRLF = b"\r\n"
_HEADER_END = b"\r\n\r\n"


@dataclass
class MultipartPart:
    """One part of a multipart body: form field or file upload."""

    name: str
    filename: str | None
    content_type: str | None
    data: bytes

    @property
    def is_file(self) -> bool:
        return self.filename is not None

    @property
    def text(self) -> str:
        """Field value decoded as UTF-8."""
        return self.data.decode("utf-8", errors="replace")


def parse_boundary(content_type: str | None) -> str:
    """Return the boundary parameter of a Content-Type header (quoted or bare)."""
    if not content_type:
        raise MalformedRequest("No boundary found in content-type")
    match = _BOUNDARY_RE.search(content_type)
    if not match:
        raise MalformedRequest("No boundary found in content-type")
    return (match.group(1) or match.group(2)).strip()


def _parse_headers(raw: bytes) -> dict[str, str]:
    headers: dict[str, str] = {}
    for line in raw.decode("utf-8", errors="replace").split("\r\n"):
        key, sep, value = line.partition(":")
        if sep:
            headers[key.strip().lower()] = value.strip()
    return headers


def decode_multipart(body: bytes, boundary: str) -> list[MultipartPart]:
    """
    Split body into parts at each --boundary delimiter.
    Scanning stops at the first part without a following delimiter or without
    a blank line after its headers; parts decoded up to that point are returned.
    """
    if not boundary:
        raise MalformedRequest("Empty multipart boundary")
    delimiter = f"--{boundary}".encode("utf-8")
    parts: list[MultipartPart] = []

    start = body.find(delimiter)
    while start != -1:
        # "--boundary--" begins with "--boundary", so this also finds the terminator
        end = body.find(delimiter, start + len(delimiter))
        if end == -1:
            break
        header_end = body.find(_HEADER_END, start)
        if header_end == -1 or header_end > end:
            break

        headers = _parse_headers(body[start + len(delimiter) + len(_CRLF) : header_end])
        disposition = headers.get("content-disposition", "")
        name_match = _NAME_RE.search(disposition)
        filename_match = _FILENAME_RE.search(disposition)

        parts.append(
            MultipartPart(
                name=name_match.group(1) if name_match else "",
                filename=filename_match.group(1) if filename_match else None,
                content_type=headers.get("content-type"),
                data=body[header_end + len(_HEADER_END) : end - len(_CRLF)],
            )
        )
        start = end

    return parts


def find_part(parts: list[MultipartPart], name: str) -> MultipartPart | None:
    """Return the first part with the given field name."""
    for part in parts:
        if part.name == name:
            return part
    return None
