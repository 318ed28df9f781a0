"""Tests for learnings actions."""

from __future__ import annotations

import pytest

from shiftbridge.actions.base import ToolCall
from shiftbridge.actions.learnings import normalize_indexes
from shiftbridge.core.result import Err, Ok
from tests.fixtures.host import FakeLearningsStore


def _call(tool: str, /, **arguments: object) -> ToolCall:
    return ToolCall(id="t", name=tool, arguments=arguments)


class TestNormalizeIndexes:
    @pytest.mark.parametrize(
        ("indexes", "expected"),
        [
            ([2, 2, 5], [2, 5]),
            ([-1, -3], []),
            ([3, -1, 0, 3], [3, 0]),
        ],
    )
    def test_dedupe_and_drop_negative(self, indexes: list[int], expected: list[int]) -> None:
        assert normalize_indexes(indexes) == expected


class TestLearningAdd:
    async def test_add(self, registry, context, learnings: FakeLearningsStore) -> None:
        result = await registry.execute(_call("LearningAdd", content="API uses JWT"), context)
        assert result == Ok(result.value)
        assert result.value.message == "Learning added to project memory."
        assert learnings.entries[-1] == "API uses JWT"

    async def test_empty_rejected(self, registry, context) -> None:
        result = await registry.execute(_call("LearningAdd", content=""), context)
        assert isinstance(result, Err)

    async def test_no_store(self, registry, make_context) -> None:
        result = await registry.execute(
            _call("LearningAdd", content="x"), make_context(learnings=None)
        )
        assert result.error.message == "Learnings are not available in this context"


class TestLearningUpdate:
    async def test_update(self, registry, context, learnings: FakeLearningsStore) -> None:
        result = await registry.execute(_call("LearningUpdate", index=1, content="uno"), context)
        assert result.value.message == "Learning #1 updated successfully."
        assert learnings.entries[1] == "uno"

    async def test_out_of_range(self, registry, context, learnings: FakeLearningsStore) -> None:
        before = learnings.entries
        result = await registry.execute(_call("LearningUpdate", index=6, content="x"), context)
        assert result.error.message == "Learning index 6 is out of range."
        assert learnings.entries == before

    async def test_store_unreadable(
        self, registry, context, learnings: FakeLearningsStore
    ) -> None:
        learnings.fail_with = OSError("store locked")
        result = await registry.execute(_call("LearningUpdate", index=0, content="x"), context)
        assert isinstance(result, Err)
        assert result.error.message == "Failed to read learnings"
        assert result.error.detail == "store locked"

    async def test_negative_rejected_by_schema(self, registry, context) -> None:
        result = await registry.execute(_call("LearningUpdate", index=-1, content="x"), context)
        assert isinstance(result, Err)
        assert "index:" in result.error.message


class TestLearningsRemove:
    async def test_remove(self, registry, context, learnings: FakeLearningsStore) -> None:
        result = await registry.execute(_call("LearningsRemove", indexes=[0, 2]), context)
        assert result.value.message == "Removed 2 learnings."
        assert learnings.entries == ["one", "three", "four", "five"]

    async def test_singular(self, registry, context) -> None:
        result = await registry.execute(_call("LearningsRemove", indexes=[4]), context)
        assert result.value.message == "Removed 1 learning."

    async def test_duplicates_same_as_unique(
        self, registry, context, learnings: FakeLearningsStore
    ) -> None:
        result = await registry.execute(_call("LearningsRemove", indexes=[2, 2, 5]), context)
        assert result.value.message == "Removed 2 learnings."
        assert learnings.remove_calls == [[2, 5]]
        assert learnings.entries == ["zero", "one", "three", "four"]

    async def test_only_negative(self, registry, context, learnings: FakeLearningsStore) -> None:
        result = await registry.execute(_call("LearningsRemove", indexes=[-1, -3]), context)
        assert isinstance(result, Err)
        assert result.error.message == "No valid learning indexes were provided."
        assert learnings.remove_calls == []

    async def test_empty_list_rejected(self, registry, context) -> None:
        result = await registry.execute(_call("LearningsRemove", indexes=[]), context)
        assert isinstance(result, Err)
        assert "indexes:" in result.error.message
