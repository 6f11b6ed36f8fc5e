"""
Content-Transfer-Encoding transforms applied to part bodies.

Ships with base64. Additional transforms can be registered at import time.
"""

from __future__ import annotations

import base64
import logging
from collections.abc import Callable

from .errors import UnknownEncoding

logger = logging.getLogger(__name__)

Transform = Callable[[bytes], bytes]


def _encode_base64(content: bytes) -> bytes:
    # encodebytes wraps at 76 chars and terminates each line with "\n"
    return base64.encodebytes(content)


_REGISTRY: dict[str, Transform] = {
    "base64": _encode_base64,
}


def normalize(identifier: str) -> str:
    """Canonical form of an encoding identifier, as used for lookup and headers."""
    return str(identifier).strip().lower()


def resolve(identifier: str) -> Transform:
    """
    Look up the transform registered for an encoding identifier.

    Args:
        identifier: Encoding name, e.g. "base64" (case-insensitive)

    Returns:
        A function mapping raw body bytes to encoded bytes

    Raises:
        UnknownEncoding: if nothing is registered under the identifier
    """
    try:
        return _REGISTRY[normalize(identifier)]
    except KeyError:
        raise UnknownEncoding(identifier) from None


def register_encoding(identifier: str, transform: Transform) -> None:
    """Register (or replace) the transform for an encoding identifier."""
    key = normalize(identifier)
    if not key:
        raise ValueError("Encoding identifier must not be empty")
    if not callable(transform):
        raise TypeError("Encoding transform must be callable")
    _REGISTRY[key] = transform
    logger.debug("registered content-transfer-encoding %r", key)


def unregister_encoding(identifier: str) -> None:
    key = normalize(identifier)
    if key not in _REGISTRY:
        raise UnknownEncoding(identifier)
    del _REGISTRY[key]


def available_encodings() -> list[str]:
    return sorted(_REGISTRY)
