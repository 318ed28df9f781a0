"""Scope preset actions."""

from __future__ import annotations

from pydantic import Field

from shiftbridge.actions.base import ActionContext, ActionInput, action
from shiftbridge.core.result import ActionResult, err, err_from_exception, ok


class ScopeAddInput(ActionInput):
    scope_name: str = Field(min_length=1, description="The name of the scope")
    allowlist: list[str] = Field(description="Hosts in scope. This can be empty.")
    denylist: list[str] = Field(description="Hosts out of scope. This can be empty.")


@action("ScopeAdd", "Create a new scope preset.", ScopeAddInput)
async def scope_add(params: ScopeAddInput, context: ActionContext) -> ActionResult:
    try:
        scope = await context.sdk.scopes.create_scope(
            name=params.scope_name, allowlist=params.allowlist, denylist=params.denylist
        )
    except Exception as exc:
        return err_from_exception("Failed to create scope", exc)
    if scope is None:
        return err("Failed to create scope")
    return ok(f"Scope {scope.name} created successfully", id=scope.id)


class ScopeUpdateInput(ActionInput):
    id: str = Field(min_length=1, description="The ID of the scope to update")
    scope_name: str = Field(min_length=1, description="The name of the scope")
    allowlist: list[str] = Field(description="Hosts in scope. This can be empty.")
    denylist: list[str] = Field(description="Hosts out of scope. This can be empty.")


@action(
    "ScopeUpdate",
    "Replace the name, allowlist and denylist of an existing scope preset.",
    ScopeUpdateInput,
)
async def scope_update(params: ScopeUpdateInput, context: ActionContext) -> ActionResult:
    try:
        scope = await context.sdk.scopes.update_scope(
            params.id,
            name=params.scope_name,
            allowlist=params.allowlist,
            denylist=params.denylist,
        )
    except Exception as exc:
        return err_from_exception("Failed to update scope", exc)
    if scope is None:
        return err("Failed to update scope")
    return ok(f"Scope {scope.name} updated successfully")


class ScopeDeleteInput(ActionInput):
    id: str = Field(min_length=1, description="The ID of the scope to delete")


@action("ScopeDelete", "Delete a scope preset.", ScopeDeleteInput)
async def scope_delete(params: ScopeDeleteInput, context: ActionContext) -> ActionResult:
    try:
        deleted = await context.sdk.scopes.delete_scope(params.id)
    except Exception as exc:
        return err_from_exception("Failed to delete scope", exc)
    if not deleted:
        return err("Failed to delete scope")
    return ok(f"Scope with ID {params.id} deleted successfully")


ACTIONS = [scope_add, scope_update, scope_delete]
