"""Convert-workflow actions."""

from __future__ import annotations

from functools import partial

from pydantic import Field

from shiftbridge.actions.base import ActionContext, ActionInput, action
from shiftbridge.actions.editor import mutate_active_editor, require_editor
from shiftbridge.core.errors import NoActiveEditorError
from shiftbridge.core.result import ActionResult, err, err_from_exception, ok


class WorkflowInput(ActionInput):
    id: str = Field(min_length=1, description="Workflow ID to run")
    input: str = Field(description="Input data for the workflow")


def _replace_first(text: str, old: str, new: str) -> str:
    return text.replace(old, new, 1) if old else text


@action(
    "WorkflowConvertRun",
    "Run a convert workflow with the given ID and input data and report its output.",
    WorkflowInput,
)
async def workflow_convert_run(params: WorkflowInput, context: ActionContext) -> ActionResult:
    try:
        output = await context.sdk.graphql.run_convert_workflow(params.id, params.input)
    except Exception as exc:
        return err_from_exception(f"Failed to run workflow {params.id}", exc)
    return ok(f"Convert workflow executed successfully. Output: {output}", output=output)


@action(
    "WorkflowRun",
    "Run a convert workflow on text from the active editor and replace that "
    "text with the workflow output.",
    WorkflowInput,
)
async def workflow_run(params: WorkflowInput, context: ActionContext) -> ActionResult:
    try:
        require_editor(context)
    except NoActiveEditorError as exc:
        return err(str(exc))

    try:
        output = await context.sdk.graphql.run_convert_workflow(params.id, params.input)
    except Exception as exc:
        return err_from_exception(f"Failed to run workflow {params.id}", exc)
    output = output or ""

    # The buffer is read only after the workflow has returned.
    return mutate_active_editor(
        context,
        partial(_replace_first, old=params.input, new=output),
        success_message=f"Convert workflow executed successfully. Output: {output}",
        error_message=f"Failed to apply output of workflow {params.id}",
    )


ACTIONS = [workflow_convert_run, workflow_run]
