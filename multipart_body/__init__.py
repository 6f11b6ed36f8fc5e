from multipart_body.errors import MultipartError, UnknownEncoding
from multipart_body.encoding import (
    available_encodings,
    register_encoding,
    resolve,
    unregister_encoding,
)
from multipart_body.part import Part
from multipart_body.payload import Payload, from_hash, generate_boundary
from multipart_body.form import build_multipart

__all__ = [
    "MultipartError",
    "UnknownEncoding",
    "available_encodings",
    "register_encoding",
    "resolve",
    "unregister_encoding",
    "Part",
    "Payload",
    "from_hash",
    "generate_boundary",
    "build_multipart",
]
