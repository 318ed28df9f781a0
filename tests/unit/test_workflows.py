"""Tests for convert-workflow actions."""

from __future__ import annotations

from shiftbridge.actions.base import ToolCall
from shiftbridge.core.result import Err, Ok
from tests.fixtures.host import FakeEditor


def _call(tool: str, /, **arguments: object) -> ToolCall:
    return ToolCall(id="t", name=tool, arguments=arguments)


class TestWorkflowConvertRun:
    async def test_reports_output(self, registry, context, sdk) -> None:
        sdk.graphql.workflow_outputs["b64"] = "aGVsbG8="
        result = await registry.execute(
            _call("WorkflowConvertRun", id="b64", input="hello"), context
        )
        assert isinstance(result, Ok)
        assert result.value.message == "Convert workflow executed successfully. Output: aGVsbG8="
        assert sdk.graphql.workflow_calls == [("b64", "hello")]

    async def test_failure(self, registry, context, sdk) -> None:
        sdk.graphql.fail_with = RuntimeError("no such workflow")
        result = await registry.execute(
            _call("WorkflowConvertRun", id="zz", input="hello"), context
        )
        assert result.error.message == "Failed to run workflow zz"
        assert result.error.detail == "no such workflow"


class TestWorkflowRun:
    async def test_replaces_first_occurrence(self, registry, make_context, sdk) -> None:
        editor = FakeEditor("POST / HTTP/1.1\nHost: a\n\nx=abc&y=abc")
        sdk.graphql.workflow_outputs["upper"] = "ABC"
        result = await registry.execute(
            _call("WorkflowRun", id="upper", input="abc"), make_context(editor=editor)
        )
        assert isinstance(result, Ok)
        assert result.value.message == "Convert workflow executed successfully. Output: ABC"
        assert editor.text == "POST / HTTP/1.1\r\nHost: a\r\n\r\nx=ABC&y=abc"

    async def test_input_not_in_editor(self, registry, context, editor: FakeEditor, sdk) -> None:
        before = editor.text
        sdk.graphql.workflow_outputs["w"] = "out"
        result = await registry.execute(_call("WorkflowRun", id="w", input="zzz"), context)
        assert isinstance(result, Ok)
        assert editor.text == before

    async def test_no_editor(self, registry, make_context, sdk) -> None:
        result = await registry.execute(
            _call("WorkflowRun", id="w", input="x"), make_context(editor=None)
        )
        assert isinstance(result, Err)
        assert result.error.message == "No active editor view found"
        assert sdk.graphql.workflow_calls == []

    async def test_workflow_fails(self, registry, context, editor: FakeEditor, sdk) -> None:
        before = editor.text
        sdk.graphql.fail_with = RuntimeError("timeout")
        result = await registry.execute(_call("WorkflowRun", id="w", input="api"), context)
        assert result.error.message == "Failed to run workflow w"
        assert editor.text == before
        assert editor.writes == []
