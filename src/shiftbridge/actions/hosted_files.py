"""Hosted file actions."""

from __future__ import annotations

from pydantic import Field

from shiftbridge.actions.base import ActionContext, ActionInput, action
from shiftbridge.core.result import ActionResult, err_from_exception, ok


class HostedFileRemoveInput(ActionInput):
    id: str = Field(min_length=1, description="ID of the hosted file to remove")


@action("HostedFileRemove", "Remove a hosted file by ID.", HostedFileRemoveInput)
async def hosted_file_remove(params: HostedFileRemoveInput, context: ActionContext) -> ActionResult:
    try:
        await context.sdk.files.delete(params.id)
    except Exception as exc:
        return err_from_exception("Failed to remove hosted file", exc)
    return ok("Hosted file removed successfully")


ACTIONS = [hosted_file_remove]
