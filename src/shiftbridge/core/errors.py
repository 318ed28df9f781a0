"""Exception hierarchy for shiftbridge.

Every module imports from here. The hierarchy is:

    ShiftBridgeError
    ├── ToolRegistrationError(name)
    ├── UnknownToolError(name)
    ├── ActionInputError(tool_name, fields)
    ├── EditorError
    │   └── NoActiveEditorError
    ├── RequestFormatError
    ├── PlaceholderError
    └── ConfigError

Action executors never let these escape a tool boundary; the registry
and the editor facade translate them into ``Err`` results.  Only
registration and configuration errors are raised to the caller, since
both are start-up faults.
"""

from __future__ import annotations


class ShiftBridgeError(Exception):
    """Base exception for all shiftbridge errors."""


# ─── Registry Errors ──────────────────────────────────────────


class ToolRegistrationError(ShiftBridgeError, ValueError):
    """Two tools were registered under the same name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool already registered: {name}")


class UnknownToolError(ShiftBridgeError, KeyError):
    """No tool is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool not found: {name}")

    def __str__(self) -> str:
        return str(self.args[0])


class ActionInputError(ShiftBridgeError):
    """Tool arguments failed schema validation.

    ``fields`` holds one ``(path, reason)`` pair per failing field.
    """

    def __init__(self, tool_name: str, fields: list[tuple[str, str]]) -> None:
        self.tool_name = tool_name
        self.fields = fields
        summary = "; ".join(f"{path}: {reason}" for path, reason in fields)
        super().__init__(f"Invalid arguments for {tool_name}: {summary}")


# ─── Editor Errors ────────────────────────────────────────────


class EditorError(ShiftBridgeError):
    """Base for active-editor errors."""


class NoActiveEditorError(EditorError):
    """No editor is focused or open."""

    def __init__(self, message: str = "No active editor view found") -> None:
        super().__init__(message)


class RequestFormatError(ShiftBridgeError, ValueError):
    """Raw HTTP request text could not be parsed or mutated."""


# ─── Context Errors ───────────────────────────────────────────


class PlaceholderError(ShiftBridgeError):
    """A placeholder in agent-supplied text could not be resolved."""


# ─── Configuration Errors ─────────────────────────────────────


class ConfigError(ShiftBridgeError):
    """Invalid configuration."""
