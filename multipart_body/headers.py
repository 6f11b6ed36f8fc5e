from __future__ import annotations

# HTML form encoding escapes these inside quoted name/filename parameters.
_PARAM_ESCAPES = {
    '"': "%22",
    "\r": "%0D",
    "\n": "%0A",
}


def sanitize_value(value: str) -> str:
    """
    Strip CR, LF, and null bytes from a header value to prevent header
    injection (CRLF injection). Well-formed values pass through unchanged.
    """
    return str(value).replace("\r", "").replace("\n", "").replace("\x00", "")


def quote_param(value: str) -> str:
    """Escape a Content-Disposition parameter value for use inside double quotes."""
    return "".join(_PARAM_ESCAPES.get(ch, ch) for ch in str(value))


def format_header(name: str, value: str) -> str:
    return f"{name}: {sanitize_value(value)}\r\n"
