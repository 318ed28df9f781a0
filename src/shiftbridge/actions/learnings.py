"""Project learnings actions.

Learnings are addressed by zero-based position.  Index checks read the
store fresh at call time, and a removal batch is validated as a whole
before anything is removed.
"""

from __future__ import annotations

from pydantic import Field

from shiftbridge.actions.base import ActionContext, ActionInput, action
from shiftbridge.core.result import ActionResult, err, err_from_exception, ok

LEARNINGS_UNAVAILABLE = "Learnings are not available in this context"


def normalize_indexes(indexes: list[int]) -> list[int]:
    """Deduplicate *indexes* and drop negative values, keeping first-seen order."""
    return [i for i in dict.fromkeys(indexes) if i >= 0]


class LearningAddInput(ActionInput):
    content: str = Field(
        min_length=1,
        description="Full text of the learning to store. Provide the complete value, not a summary.",
    )


@action(
    "LearningAdd",
    """
    Store a new project learning entry for future reference.
    Summarize the takeaway concisely, and name the domain or API it concerns
    when possible.
    """,
    LearningAddInput,
)
async def learning_add(params: LearningAddInput, context: ActionContext) -> ActionResult:
    if context.learnings is None:
        return err(LEARNINGS_UNAVAILABLE)
    try:
        await context.learnings.add(params.content)
    except Exception as exc:
        return err_from_exception("Failed to add learning", exc)
    return ok("Learning added to project memory.")


class LearningUpdateInput(ActionInput):
    index: int = Field(ge=0, description="Zero-based index of the learning entry to update")
    content: str = Field(
        min_length=1, description="Complete replacement text for the learning entry"
    )


@action(
    "LearningUpdate",
    """
    Replace the content of an existing project learning entry by its index.
    Provide the complete value, not a summary.
    """,
    LearningUpdateInput,
)
async def learning_update(params: LearningUpdateInput, context: ActionContext) -> ActionResult:
    if context.learnings is None:
        return err(LEARNINGS_UNAVAILABLE)
    try:
        count = len(context.learnings.entries)
    except Exception as exc:
        return err_from_exception("Failed to read learnings", exc)
    if params.index >= count:
        return err(f"Learning index {params.index} is out of range.")
    try:
        await context.learnings.update(params.index, params.content)
    except Exception as exc:
        return err_from_exception("Failed to update learning", exc)
    return ok(f"Learning #{params.index} updated successfully.")


class LearningsRemoveInput(ActionInput):
    indexes: list[int] = Field(
        min_length=1, description="One or more zero-based learning indexes to delete"
    )


@action(
    "LearningsRemove",
    "Delete one or more project learning entries by their zero-based index.",
    LearningsRemoveInput,
)
async def learnings_remove(params: LearningsRemoveInput, context: ActionContext) -> ActionResult:
    if context.learnings is None:
        return err(LEARNINGS_UNAVAILABLE)
    indexes = normalize_indexes(params.indexes)
    if not indexes:
        return err("No valid learning indexes were provided.")
    try:
        await context.learnings.remove(indexes)
    except Exception as exc:
        return err_from_exception("Failed to remove learnings", exc)
    noun = "learning" if len(indexes) == 1 else "learnings"
    return ok(f"Removed {len(indexes)} {noun}.", indexes=indexes)


ACTIONS = [learning_add, learning_update, learnings_remove]
