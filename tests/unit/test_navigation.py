"""Tests for navigation and UI feedback actions."""

from __future__ import annotations

from shiftbridge.actions.base import ToolCall
from shiftbridge.actions.navigation import notify_result
from shiftbridge.config.schema import ShiftBridgeConfig, ToastConfig
from shiftbridge.core.result import Err, err, ok


def _call(tool: str, /, **arguments: object) -> ToolCall:
    return ToolCall(id="t", name=tool, arguments=arguments)


class TestNavigate:
    async def test_strips_hash(self, registry, context, sdk) -> None:
        result = await registry.execute(_call("Navigate", path="#/replay"), context)
        assert result.value.message == "Navigated to page /replay"
        assert sdk.navigation.visited == ["/replay"]

    async def test_plain_path(self, registry, context, sdk) -> None:
        await registry.execute(_call("Navigate", path="/http-history"), context)
        assert sdk.navigation.visited == ["/http-history"]

    async def test_empty_rejected(self, registry, context) -> None:
        result = await registry.execute(_call("Navigate", path=""), context)
        assert isinstance(result, Err)


class TestToast:
    async def test_defaults(self, registry, context, sdk) -> None:
        result = await registry.execute(
            _call("Toast", content="Done", variant=None, duration=None), context
        )
        assert result == ok("")
        assert sdk.window.toasts == [("Done", "info", 3000)]

    async def test_explicit(self, registry, context, sdk) -> None:
        await registry.execute(
            _call("Toast", content="Careful", variant="warning", duration=10_000), context
        )
        assert sdk.window.toasts == [("Careful", "warning", 10_000)]

    async def test_configured_default(self, registry, make_context, sdk) -> None:
        config = ShiftBridgeConfig(toast=ToastConfig(default_duration_ms=5000))
        await registry.execute(
            _call("Toast", content="x", variant=None), make_context(config=config)
        )
        assert sdk.window.toasts == [("x", "info", 5000)]

    async def test_empty_content_rejected(self, registry, context, sdk) -> None:
        result = await registry.execute(_call("Toast", content="", variant=None), context)
        assert isinstance(result, Err)
        assert "content:" in result.error.message
        assert sdk.window.toasts == []

    async def test_show_fails(self, registry, context, sdk) -> None:
        sdk.window.fail_with = RuntimeError("ui gone")
        result = await registry.execute(_call("Toast", content="hi", variant=None), context)
        assert isinstance(result, Err)
        assert result.error.message == "Failed to show toast"
        assert result.error.detail == "ui gone"

    async def test_duration_bounds(self, registry, context) -> None:
        result = await registry.execute(
            _call("Toast", content="x", variant=None, duration=999), context
        )
        assert isinstance(result, Err)
        assert "duration:" in result.error.message

    async def test_unknown_variant(self, registry, context) -> None:
        result = await registry.execute(_call("Toast", content="x", variant="loud"), context)
        assert isinstance(result, Err)
        assert "variant:" in result.error.message


class TestNotifyResult:
    def test_success_uses_result_duration(self, sdk) -> None:
        notify_result(sdk, ok("Filter created"), ToastConfig())
        assert sdk.window.toasts == [("Filter created", "success", 6000)]

    def test_error(self, sdk) -> None:
        notify_result(sdk, err("Filter not found"), ToastConfig())
        assert sdk.window.toasts == [("Filter not found", "error", 6000)]

    def test_empty_message_silent(self, sdk) -> None:
        notify_result(sdk, ok(""), ToastConfig())
        assert sdk.window.toasts == []


class TestHttpqlQuerySet:
    async def test_sets_query(self, registry, context, sdk) -> None:
        result = await registry.execute(
            _call("HttpqlQuerySet", query='req.host.eq:"example.com"'), context
        )
        assert result.value.message == "Query set successfully"
        assert sdk.http_history.queries == ['req.host.eq:"example.com"']
