"""Tests for the payload blob action."""

from __future__ import annotations

from shiftbridge.actions.base import ToolCall
from shiftbridge.actions.payloads import PAYLOAD_BLOBS_UNAVAILABLE
from shiftbridge.config.schema import ContextConfig
from shiftbridge.context.assembly import PayloadBlobStore
from shiftbridge.core.result import Err, Ok
from tests.fixtures.host import FakeEditor


def _call(tool: str, /, **arguments: object) -> ToolCall:
    return ToolCall(id="t", name=tool, arguments=arguments)


class TestPayloadBlobCreate:
    async def test_create(self, registry, context, blobs: PayloadBlobStore) -> None:
        result = await registry.execute(_call("PayloadBlobCreate", content="<svg/>"), context)
        assert isinstance(result, Ok)
        assert result.value.message == "Payload blob created (6 chars)"
        data = result.value.data
        assert data["length"] == 6
        assert data["preview"] == "<svg/>"
        assert data["blobId"].startswith("blob-")
        assert len(blobs) == 1

    async def test_repeat_with_separator(self, registry, context) -> None:
        result = await registry.execute(
            _call("PayloadBlobCreate", content="ab", repeat=3, separator=","), context
        )
        assert result.value.data["length"] == 8
        assert result.value.data["preview"] == "ab,ab,ab"

    async def test_long_run_preview_is_short(self, registry, context) -> None:
        result = await registry.execute(
            _call("PayloadBlobCreate", content="A", repeat=5000), context
        )
        assert result.value.message == "Payload blob created (5000 chars)"
        assert result.value.data["preview"] == "A" * 200 + "..."

    async def test_blob_usable_as_placeholder(
        self, registry, context, editor: FakeEditor
    ) -> None:
        created = await registry.execute(
            _call("PayloadBlobCreate", content="x", repeat=4), context
        )
        blob_id = created.value.data["blobId"]
        await registry.execute(_call("EditorBodyReplace", body=f"§§§Blob§{blob_id}§§§"), context)
        assert editor.text.endswith("\r\n\r\nxxxx")

    async def test_count_limit(self, registry, make_context) -> None:
        context = make_context(
            payload_blobs=PayloadBlobStore(ContextConfig(payload_blob_max_count=1))
        )
        await registry.execute(_call("PayloadBlobCreate", content="one"), context)
        result = await registry.execute(_call("PayloadBlobCreate", content="two"), context)
        assert isinstance(result, Err)
        assert result.error.message == "Failed to store payload blob"
        assert result.error.detail.startswith("Cannot create more than 1 payload blobs")

    async def test_size_limit_checked_before_building(self, registry, make_context) -> None:
        store = PayloadBlobStore(ContextConfig(payload_blob_max_bytes=10))
        result = await registry.execute(
            _call("PayloadBlobCreate", content="é", repeat=6), make_context(payload_blobs=store)
        )
        assert isinstance(result, Err)
        assert result.error.message == "Failed to store payload blob"
        assert "12 bytes, exceeding the 10-byte limit" in result.error.detail
        assert len(store) == 0

    async def test_no_store(self, registry, make_context) -> None:
        result = await registry.execute(
            _call("PayloadBlobCreate", content="x"), make_context(payload_blobs=None)
        )
        assert isinstance(result, Err)
        assert result.error.message == PAYLOAD_BLOBS_UNAVAILABLE

    async def test_zero_repeat_rejected(self, registry, context, blobs) -> None:
        result = await registry.execute(
            _call("PayloadBlobCreate", content="x", repeat=0), context
        )
        assert isinstance(result, Err)
        assert "repeat:" in result.error.message
        assert len(blobs) == 0
