"""Finding actions."""

from __future__ import annotations

from pydantic import Field

from shiftbridge.actions.base import ActionContext, ActionInput, action
from shiftbridge.core.result import ActionResult, err, err_from_exception, ok

FINDING_REPORTER = "Shift Agent"


class FindingCreateInput(ActionInput):
    title: str = Field(
        min_length=1, description="Short, concise title that captures the finding"
    )
    description: str = Field(
        description="Markdown description with enough context to understand the finding"
    )
    request_id: str | None = Field(
        default=None,
        description="ID of the request the finding is about. Use null for the current request.",
    )


@action(
    "FindingCreate",
    "Create a new finding attached to a request.",
    FindingCreateInput,
)
async def finding_create(params: FindingCreateInput, context: ActionContext) -> ActionResult:
    request_id = params.request_id or context.context_field("request", "id")
    if not request_id:
        return err("No request ID provided and no current request is available")

    try:
        finding = await context.sdk.findings.create_finding(
            request_id,
            title=params.title,
            description=params.description,
            reporter=FINDING_REPORTER,
        )
    except Exception as exc:
        return err_from_exception("Failed to create finding", exc)
    if finding is None:
        return err("Failed to create finding")
    return ok("Created finding", id=finding.id)


ACTIONS = [finding_create]
