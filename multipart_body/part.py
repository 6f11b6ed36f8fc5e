from __future__ import annotations

import logging
import os
from typing import Any

from .encoding import normalize, resolve
from .headers import format_header, quote_param

logger = logging.getLogger(__name__)


def _is_file_source(value: Any) -> bool:
    return callable(getattr(value, "read", None))


def _source_filename(source: Any) -> str | None:
    """Derive a filename from the path a file-like source was opened with."""
    path = getattr(source, "name", None)
    if isinstance(path, (str, bytes, os.PathLike)):
        return os.path.basename(os.fsdecode(path)) or None
    return None


def _coerce_body(body: Any) -> bytes:
    if isinstance(body, bytes):
        return body
    if isinstance(body, (bytearray, memoryview)):
        return bytes(body)
    if isinstance(body, str):
        return body.encode("utf-8")
    raise TypeError(f"Unsupported body type for multipart part: {type(body).__name__}")


class Part:
    """
    A single named section of a multipart/form-data payload.

    ``body`` may be bytes, a str (stored as UTF-8), or a file-like object
    exposing ``read()``. File-like sources are read fully here and not kept;
    when no filename is given one is taken from the source's path.
    """

    def __init__(
        self,
        name: str | None = None,
        body: Any = None,
        filename: str | None = None,
        *,
        content_type: str | None = None,
        content_disposition: str | None = None,
        encoding: str | None = None,
    ) -> None:
        self.name = name
        self.filename = filename
        self.content_type = content_type
        self.content_disposition = content_disposition
        self.encoding = encoding

        if body is not None and _is_file_source(body):
            if self.filename is None:
                self.filename = _source_filename(body)
            content = _coerce_body(body.read())
            logger.debug(
                "read %d bytes from file source for part %r (filename=%r)",
                len(content),
                name,
                self.filename,
            )
            self._body: bytes | None = content
        elif body is not None:
            self._body = _coerce_body(body)
        else:
            self._body = None

    @property
    def body(self) -> bytes | None:
        return self._body

    def header(self) -> str:
        """
        Build the header block for this part.

        Lines are emitted in a fixed order (Content-Disposition, Content-Type,
        Content-Transfer-Encoding), each terminated by CRLF. Unset fields
        produce no line.

        An explicit ``content_disposition`` is written as given, except that
        CR, LF and NUL are stripped from it like every other header value.
        Inside the computed ``name``/``filename`` parameters, ``"``, CR and LF
        are percent-escaped (``%22``, ``%0D``, ``%0A``) as HTML forms do, so
        such names do not appear byte-for-byte in the output. The transfer
        encoding is written in the lower-case, trimmed form used to look up
        its transform.
        """
        lines: list[str] = []
        if self.content_disposition is not None:
            lines.append(format_header("Content-Disposition", self.content_disposition))
        elif self.name is not None:
            disposition = f'form-data; name="{quote_param(self.name)}"'
            if self.filename is not None:
                disposition += f'; filename="{quote_param(self.filename)}"'
            # Parameters are already escaped; bypass value sanitizing.
            lines.append(f"Content-Disposition: {disposition}\r\n")
        if self.content_type is not None:
            lines.append(format_header("Content-Type", self.content_type))
        if self.encoding is not None:
            lines.append(
                format_header("Content-Transfer-Encoding", normalize(self.encoding))
            )
        return "".join(lines)

    def encoded_body(self) -> bytes:
        """Return the body after applying the part's transfer encoding, if any."""
        body = self._body if self._body is not None else b""
        if self.encoding is None:
            return body
        return resolve(self.encoding)(body)

    def render(self) -> bytes:
        return self.header().encode("utf-8") + b"\r\n" + self.encoded_body()

    def __bytes__(self) -> bytes:
        return self.render()

    def __repr__(self) -> str:
        size = len(self._body) if self._body is not None else 0
        return f"<Part name={self.name!r} filename={self.filename!r} {size} bytes>"
