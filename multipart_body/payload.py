from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Mapping
from typing import Any

from .part import Part

logger = logging.getLogger(__name__)

BOUNDARY_PREFIX = "----multipart-boundary-"
BOUNDARY_RANGE = 1_000_000


def generate_boundary(rng: random.Random | None = None) -> str:
    """Generate a default boundary token, optionally from a seeded source."""
    token = (rng or random).randrange(BOUNDARY_RANGE)
    boundary = f"{BOUNDARY_PREFIX}{token}"
    logger.debug("generated multipart boundary %s", boundary)
    return boundary


def _build_parts(parts: Mapping[str, Any] | Iterable[Part] | None) -> list[Part]:
    if parts is None:
        return []
    if isinstance(parts, Mapping):
        return [Part(name=name, body=body) for name, body in parts.items()]
    built: list[Part] = []
    for part in parts:
        if not isinstance(part, Part):
            raise TypeError(
                f"Payload parts must be Part instances, got {type(part).__name__}"
            )
        built.append(part)
    return built


class Payload:
    """
    An ordered multipart/form-data payload.

    ``parts`` may be a mapping of field name to body (bytes, str or a
    file-like object) or an iterable of prebuilt :class:`Part` values.
    Both ``parts`` and ``boundary`` may be changed freely before rendering;
    nothing is cached between :meth:`render` calls.
    """

    def __init__(
        self,
        parts: Mapping[str, Any] | Iterable[Part] | None = None,
        boundary: str | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.parts: list[Part] = _build_parts(parts)
        self.boundary = boundary if boundary is not None else generate_boundary(rng)

    @classmethod
    def from_mapping(cls, parts: Mapping[str, Any]) -> Payload:
        return cls(parts)

    def add_part(self, *args: Any, **kwargs: Any) -> Part:
        """Build a Part from the given arguments and append it."""
        part = Part(*args, **kwargs)
        self.parts.append(part)
        return part

    @property
    def content_type(self) -> str:
        return f"multipart/form-data; boundary={self.boundary}"

    def render(self) -> bytes:
        """
        Serialize the payload to its wire format.

        The output opens with ``--boundary`` CRLF, joins rendered parts with
        CRLF ``--boundary`` CRLF, and closes with CRLF ``--boundary--``.
        No CRLF follows the closing delimiter.
        """
        delimiter = f"--{self.boundary}".encode("utf-8")
        rendered = [part.render() for part in self.parts]
        output = (
            delimiter
            + b"\r\n"
            + (b"\r\n" + delimiter + b"\r\n").join(rendered)
            + b"\r\n"
            + delimiter
            + b"--"
        )
        logger.debug(
            "rendered multipart payload: %d parts, %d bytes", len(rendered), len(output)
        )
        return output

    def headers(self) -> dict[str, str]:
        """Request headers describing the rendered payload."""
        return {
            "Content-Type": self.content_type,
            "Content-Length": str(len(self.render())),
        }

    def __bytes__(self) -> bytes:
        return self.render()

    def __len__(self) -> int:
        return len(self.parts)

    def __repr__(self) -> str:
        return f"<Payload boundary={self.boundary!r} {len(self.parts)} parts>"


def from_hash(parts: Mapping[str, Any]) -> Payload:
    """Build a Payload from a name-to-body mapping with a generated boundary."""
    return Payload.from_mapping(parts)
