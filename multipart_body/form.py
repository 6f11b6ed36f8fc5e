from __future__ import annotations

from typing import Any

from .part import Part, _is_file_source
from .payload import Payload

DEFAULT_FILE_CONTENT_TYPE = "application/octet-stream"


def _file_part(field: str, value: Any) -> Part:
    if isinstance(value, (bytes, bytearray)):
        return Part(field, value, field, content_type=DEFAULT_FILE_CONTENT_TYPE)
    if _is_file_source(value):
        part = Part(field, value, content_type=DEFAULT_FILE_CONTENT_TYPE)
        if part.filename is None:
            part.filename = field
        return part
    if isinstance(value, tuple) and len(value) in (2, 3):
        filename, content = value[0], value[1]
        ctype = value[2] if len(value) == 3 else None
        return Part(
            field, content, filename, content_type=ctype or DEFAULT_FILE_CONTENT_TYPE
        )
    raise TypeError(f"Unsupported file value for field {field!r}")


def build_multipart(
    data: dict[str, str] | None,
    files: dict[str, Any] | None,
) -> tuple[str, bytes]:
    """
    Build a multipart/form-data body.
    `files` values can be bytes, a file-like object, or
    (filename, content) / (filename, content, content_type|None).
    """
    payload = Payload()
    if data:
        for k, v in data.items():
            payload.add_part(k, v)
    if files:
        for field, val in files.items():
            payload.parts.append(_file_part(field, val))
    return payload.content_type, payload.render()
