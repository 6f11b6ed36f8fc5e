class MultipartError(Exception):
    """Base error for multipart_body."""


class UnknownEncoding(MultipartError, LookupError):
    """Raised when a part names a transfer encoding with no registered transform."""

    def __init__(self, encoding: str) -> None:
        super().__init__(f"Unknown content-transfer-encoding: {encoding!r}")
        self.encoding = encoding
