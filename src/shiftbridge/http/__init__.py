"""Raw HTTP request text primitives."""

from shiftbridge.http.request_text import (
    CRLF,
    RequestText,
    normalize_line_endings,
)

__all__ = ["CRLF", "RequestText", "normalize_line_endings"]
