"""Shared test fixtures for shiftbridge."""

from __future__ import annotations

from typing import Any

import pytest

from shiftbridge.actions.base import ActionContext, ContextValue
from shiftbridge.actions.catalog import build_registry
from shiftbridge.actions.registry import ActionRegistry
from shiftbridge.context.assembly import PayloadBlobStore
from tests.fixtures.host import FakeEditor, FakeLearningsStore, FakeSDK

SAMPLE_REQUEST = (
    "GET /api/users?page=1 HTTP/1.1\r\n"
    "Host: example.com\r\n"
    "Cookie: session=abc; theme=dark\r\n"
    "\r\n"
)


@pytest.fixture
def sdk() -> FakeSDK:
    return FakeSDK()


@pytest.fixture
def editor() -> FakeEditor:
    return FakeEditor(SAMPLE_REQUEST)


@pytest.fixture
def learnings() -> FakeLearningsStore:
    return FakeLearningsStore(["zero", "one", "two", "three", "four", "five"])


@pytest.fixture
def blobs() -> PayloadBlobStore:
    return PayloadBlobStore()


@pytest.fixture
def make_context(
    sdk: FakeSDK,
    editor: FakeEditor,
    learnings: FakeLearningsStore,
    blobs: PayloadBlobStore,
) -> Any:
    """Factory fixture for ActionContext; pass ``editor=None`` for no editor."""

    def _make(**overrides: Any) -> ActionContext:
        active = overrides.pop("editor", editor)
        values = {
            name: ContextValue(description=name, value=value)
            for name, value in overrides.pop("context", {}).items()
        }
        defaults: dict[str, Any] = {
            "sdk": sdk,
            "active_editor": lambda: active,
            "context": values,
            "learnings": learnings,
            "payload_blob_lookup": blobs.get,
            "payload_blobs": blobs,
        }
        defaults.update(overrides)
        return ActionContext(**defaults)

    return _make


@pytest.fixture
def context(make_context: Any) -> ActionContext:
    return make_context()


@pytest.fixture
def registry() -> ActionRegistry:
    return build_registry()
