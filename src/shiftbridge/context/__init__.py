"""Context assembly: truncation and placeholder resolution."""

from shiftbridge.context.assembly import (
    PayloadBlobMetadata,
    PayloadBlobStore,
    build_context_prompt,
    render_environment_variables,
)
from shiftbridge.context.placeholders import resolve_placeholders
from shiftbridge.context.truncation import TRUNCATION_MARKER, truncate_context_value

__all__ = [
    "TRUNCATION_MARKER",
    "PayloadBlobMetadata",
    "PayloadBlobStore",
    "build_context_prompt",
    "render_environment_variables",
    "resolve_placeholders",
    "truncate_context_value",
]
