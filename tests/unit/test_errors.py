"""Tests for the shiftbridge exception hierarchy."""

from __future__ import annotations

import pytest

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

# ─── Hierarchy ────────────────────────────────────────────────


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc",
        [
            ToolRegistrationError("X"),
            UnknownToolError("X"),
            ActionInputError("X", []),
            EditorError("boom"),
            NoActiveEditorError(),
            RequestFormatError("bad"),
            PlaceholderError("missing"),
            ConfigError("bad config"),
        ],
    )
    def test_all_derive_from_base(self, exc: Exception) -> None:
        assert isinstance(exc, ShiftBridgeError)

    def test_registration_error_is_value_error(self) -> None:
        assert isinstance(ToolRegistrationError("X"), ValueError)

    def test_unknown_tool_is_key_error(self) -> None:
        assert isinstance(UnknownToolError("X"), KeyError)

    def test_request_format_is_value_error(self) -> None:
        assert isinstance(RequestFormatError("bad"), ValueError)

    def test_no_active_editor_is_editor_error(self) -> None:
        assert isinstance(NoActiveEditorError(), EditorError)


# ─── Messages ─────────────────────────────────────────────────


class TestMessages:
    def test_registration_message(self) -> None:
        exc = ToolRegistrationError("EditorHeaderSet")
        assert str(exc) == "Tool already registered: EditorHeaderSet"
        assert exc.name == "EditorHeaderSet"

    def test_unknown_tool_message_not_quoted(self) -> None:
        assert str(UnknownToolError("Nope")) == "Tool not found: Nope"

    def test_input_error_lists_fields(self) -> None:
        exc = ActionInputError(
            "EnvironmentCreate",
            [("environmentName", "Field required"), ("variables.0.name", "too short")],
        )
        assert str(exc) == (
            "Invalid arguments for EnvironmentCreate: "
            "environmentName: Field required; variables.0.name: too short"
        )
        assert exc.tool_name == "EnvironmentCreate"
        assert len(exc.fields) == 2

    def test_no_active_editor_default_message(self) -> None:
        assert str(NoActiveEditorError()) == "No active editor view found"

    def test_no_active_editor_custom_message(self) -> None:
        assert str(NoActiveEditorError("No active editor found")) == "No active editor found"
