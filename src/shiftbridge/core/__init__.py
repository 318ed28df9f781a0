"""Core types, errors, and result envelopes."""

from shiftbridge.core.errors import (
    ActionInputError,
    ConfigError,
    EditorError,
    NoActiveEditorError,
    PlaceholderError,
    RequestFormatError,
    ShiftBridgeError,
    ToolRegistrationError,
    UnknownToolError,
)
from shiftbridge.core.result import (
    ActionError,
    ActionResult,
    ActionValue,
    Err,
    Ok,
    Result,
    err,
    err_from_exception,
    ok,
)

__all__ = [
    "ActionError",
    "ActionInputError",
    "ActionResult",
    "ActionValue",
    "ConfigError",
    "EditorError",
    "Err",
    "NoActiveEditorError",
    "Ok",
    "PlaceholderError",
    "RequestFormatError",
    "Result",
    "ShiftBridgeError",
    "ToolRegistrationError",
    "UnknownToolError",
    "err",
    "err_from_exception",
    "ok",
]
