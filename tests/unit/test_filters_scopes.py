"""Tests for filter and scope actions."""

from __future__ import annotations

import pytest

from shiftbridge.actions.base import ToolCall
from shiftbridge.actions.filters import append_query
from shiftbridge.core.result import Err, Ok
from shiftbridge.host import Filter, Scope


def _call(tool: str, /, **arguments: object) -> ToolCall:
    return ToolCall(id="t", name=tool, arguments=arguments)


# ── Filters ──────────────────────────────────────────────────────


class TestAppendQuery:
    @pytest.mark.parametrize(
        ("query", "addition", "expected"),
        [
            ("req.host.eq:a", "AND resp.code.eq:200", "req.host.eq:a AND resp.code.eq:200"),
            ("req.host.eq:a ", "OR x", "req.host.eq:a OR x"),
            ("", "x", " x"),
        ],
    )
    def test_separator(self, query: str, addition: str, expected: str) -> None:
        assert append_query(query, addition) == expected


class TestFilters:
    async def test_add(self, registry, context, sdk) -> None:
        result = await registry.execute(
            _call("FilterAdd", filterName="APIs", query="req.path.cont:/api", alias="api"),
            context,
        )
        assert isinstance(result, Ok)
        assert result.value.message == "Filter APIs created successfully"
        (created,) = sdk.filters.get_all()
        assert created.alias == "api"

    async def test_add_returns_nothing(self, registry, context, sdk) -> None:
        sdk.filters.create_returns_none = True
        result = await registry.execute(
            _call("FilterAdd", filterName="x", query="q", alias="a"), context
        )
        assert result.error.message == "Failed to create filter"
        assert result.error.detail is None

    async def test_add_raises(self, registry, context, sdk) -> None:
        sdk.filters.fail_with = RuntimeError("duplicate alias")
        result = await registry.execute(
            _call("FilterAdd", filterName="x", query="q", alias="a"), context
        )
        assert result.error.message == "Failed to create filter"
        assert result.error.detail == "duplicate alias"

    async def test_update(self, registry, context, sdk) -> None:
        result = await registry.execute(
            _call("FilterUpdate", id="3", filterName="n", alias="a", query="q"), context
        )
        assert result.value.message == "Filter 3 updated successfully"
        assert sdk.filters.items["3"] == Filter(id="3", name="n", alias="a", query="q")

    async def test_update_fails(self, registry, context, sdk) -> None:
        sdk.filters.fail_with = RuntimeError("gone")
        result = await registry.execute(
            _call("FilterUpdate", id="3", filterName="n", alias="a", query="q"), context
        )
        assert result.error.message == "Failed to update filter"

    async def test_delete(self, registry, context, sdk) -> None:
        sdk.filters.items["1"] = Filter(id="1", name="n", alias="a", query="q")
        result = await registry.execute(_call("FilterDelete", id="1"), context)
        assert result.value.message == "Filter deleted successfully"
        assert sdk.filters.items == {}

    async def test_delete_fails(self, registry, context, sdk) -> None:
        sdk.filters.fail_with = RuntimeError()
        result = await registry.execute(_call("FilterDelete", id="1"), context)
        assert result.error.message == "Failed to delete filter"
        assert result.error.detail is None

    async def test_query_append(self, registry, context, sdk) -> None:
        sdk.filters.items["7"] = Filter(id="7", name="n", alias="a", query="req.method.eq:GET")
        result = await registry.execute(
            _call("FilterQueryAppend", id="7", appendQuery="AND req.tls.eq:true"), context
        )
        assert result.value.message == "Query appended to filter 7 successfully"
        stored = sdk.filters.items["7"]
        assert stored.query == "req.method.eq:GET AND req.tls.eq:true"
        assert (stored.name, stored.alias) == ("n", "a")

    async def test_query_append_missing(self, registry, context) -> None:
        result = await registry.execute(
            _call("FilterQueryAppend", id="404", appendQuery="x"), context
        )
        assert isinstance(result, Err)
        assert result.error.message == "Filter not found"

    async def test_query_append_read_fails(self, registry, context, sdk) -> None:
        sdk.filters.fail_with = RuntimeError("backend offline")
        result = await registry.execute(
            _call("FilterQueryAppend", id="7", appendQuery="x"), context
        )
        assert isinstance(result, Err)
        assert result.error.message == "Failed to read filters"
        assert result.error.detail == "backend offline"


# ── Scopes ───────────────────────────────────────────────────────


class TestScopes:
    async def test_add(self, registry, context, sdk) -> None:
        result = await registry.execute(
            _call("ScopeAdd", scopeName="Target", allowlist=["*.example.com"], denylist=[]),
            context,
        )
        assert result.value.message == "Scope Target created successfully"
        assert sdk.scopes.items["1"].allowlist == ["*.example.com"]

    async def test_add_fails(self, registry, context, sdk) -> None:
        sdk.scopes.fail_with = RuntimeError("invalid glob")
        result = await registry.execute(
            _call("ScopeAdd", scopeName="T", allowlist=["["], denylist=[]), context
        )
        assert result.error.message == "Failed to create scope"
        assert result.error.detail == "invalid glob"

    async def test_update(self, registry, context, sdk) -> None:
        sdk.scopes.items["2"] = Scope(id="2", name="Old")
        result = await registry.execute(
            _call("ScopeUpdate", id="2", scopeName="New", allowlist=["a"], denylist=["b"]),
            context,
        )
        assert result.value.message == "Scope New updated successfully"
        assert sdk.scopes.items["2"].denylist == ["b"]

    async def test_update_missing(self, registry, context) -> None:
        result = await registry.execute(
            _call("ScopeUpdate", id="9", scopeName="New", allowlist=[], denylist=[]), context
        )
        assert result.error.message == "Failed to update scope"

    async def test_delete(self, registry, context, sdk) -> None:
        sdk.scopes.items["2"] = Scope(id="2", name="Old")
        result = await registry.execute(_call("ScopeDelete", id="2"), context)
        assert result.value.message == "Scope with ID 2 deleted successfully"

    async def test_delete_missing(self, registry, context) -> None:
        result = await registry.execute(_call("ScopeDelete", id="2"), context)
        assert result.error.message == "Failed to delete scope"

    async def test_lists_required(self, registry, context) -> None:
        result = await registry.execute(_call("ScopeAdd", scopeName="T"), context)
        assert isinstance(result, Err)
        assert "allowlist:" in result.error.message
        assert "denylist:" in result.error.message
