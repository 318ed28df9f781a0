"""Environment and environment-variable actions.

Variable edits rewrite the full variable list of one environment.  When
no environment id is given, the selected environment is used, falling
back to the global one.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Literal

from pydantic import Field

from shiftbridge.actions.base import ActionContext, ActionInput, action
from shiftbridge.core.result import ActionResult, err, err_from_exception, ok
from shiftbridge.host import EnvironmentVariable

if TYPE_CHECKING:
    from shiftbridge.host import Environment, HostSDK

logger = logging.getLogger(__name__)

VariableKind = Literal["PLAIN", "SECRET"]


class VariableInput(ActionInput):
    name: str = Field(min_length=1, description="Variable name")
    value: str = Field(description="Variable value")
    kind: VariableKind | None = Field(
        default=None, description="Variable kind; defaults to PLAIN"
    )

    def to_variable(self) -> EnvironmentVariable:
        kind = self.kind or "PLAIN"
        return EnvironmentVariable(
            name=self.name, value=self.value, kind=kind, is_secret=kind == "SECRET"
        )


async def resolve_environment(sdk: HostSDK, environment_id: str | None) -> Environment | None:
    """Find the environment to edit.

    Tries *environment_id*, then the selected environment, then the
    global one.
    """
    if environment_id:
        return await sdk.graphql.environment(environment_id)

    env_context = await sdk.graphql.environment_context()
    for summary in (env_context.selected, env_context.global_):
        if summary is None:
            continue
        environment = await sdk.graphql.environment(summary.id)
        if environment is not None:
            return environment
    return None


# ── Environments ─────────────────────────────────────────────────


class EnvironmentCreateInput(ActionInput):
    environment_name: str = Field(min_length=1, description="Name of the environment to create")
    variables: list[VariableInput] = Field(
        default_factory=list,
        description="Variables created alongside the environment. Use an empty list if none.",
    )


@action(
    "EnvironmentCreate",
    "Create a new environment, optionally pre-populated with variables.",
    EnvironmentCreateInput,
)
async def environment_create(
    params: EnvironmentCreateInput, context: ActionContext
) -> ActionResult:
    try:
        environment = await context.sdk.graphql.create_environment(
            name=params.environment_name,
            variables=[v.to_variable() for v in params.variables],
        )
    except Exception as exc:
        return err_from_exception("Failed to create environment", exc)
    if environment is None:
        return err("Failed to create environment")
    return ok(f"Environment {environment.name} created successfully", id=environment.id)


class EnvironmentDeleteInput(ActionInput):
    id: str = Field(min_length=1, description="ID of the environment to delete")


@action("EnvironmentDelete", "Delete an existing environment by id.", EnvironmentDeleteInput)
async def environment_delete(
    params: EnvironmentDeleteInput, context: ActionContext
) -> ActionResult:
    try:
        await context.sdk.graphql.delete_environment(params.id)
    except Exception as exc:
        return err_from_exception("Failed to delete environment", exc)
    return ok(f"Environment {params.id} deleted successfully")


# ── Variables ────────────────────────────────────────────────────


class VariableUpdateInput(ActionInput):
    environment_id: str | None = Field(
        description=(
            "ID of the environment to update. Use null for the selected "
            "environment, or Global if none is selected."
        )
    )
    variable: VariableInput


@action(
    "EnvironmentVariableUpdate",
    "Create or update a variable in an environment (defaults to the selected "
    "environment, or Global if none is selected).",
    VariableUpdateInput,
)
async def environment_variable_update(
    params: VariableUpdateInput, context: ActionContext
) -> ActionResult:
    try:
        environment = await resolve_environment(context.sdk, params.environment_id)
    except Exception as exc:
        return err_from_exception("Unable to resolve environment to update", exc)
    if environment is None:
        return err("Unable to resolve environment to update")

    updated = params.variable.to_variable()
    variables = list(environment.variables)
    for i, existing in enumerate(variables):
        if existing.name == updated.name:
            variables[i] = updated
            break
    else:
        variables.append(updated)

    try:
        await context.sdk.graphql.update_environment(
            environment.id,
            name=environment.name,
            version=environment.version,
            variables=variables,
        )
    except Exception as exc:
        return err_from_exception("Failed to update environment variable", exc)
    logger.debug("Variable %s written to environment %s", updated.name, environment.id)
    return ok(f"Variable {updated.name} updated successfully", environment_id=environment.id)


class VariableDeleteInput(ActionInput):
    environment_id: str | None = Field(
        description=(
            "ID of the environment to update. Use null for the selected "
            "environment, or Global if none is selected."
        )
    )
    variable_name: str = Field(min_length=1, description="Name of the variable to delete")


@action(
    "EnvironmentVariableDelete",
    "Delete a variable from an environment (defaults to the selected "
    "environment, or Global if none is selected).",
    VariableDeleteInput,
)
async def environment_variable_delete(
    params: VariableDeleteInput, context: ActionContext
) -> ActionResult:
    try:
        environment = await resolve_environment(context.sdk, params.environment_id)
    except Exception as exc:
        return err_from_exception("Unable to resolve environment to update", exc)
    if environment is None:
        return err("Unable to resolve environment to update")

    variables = [v for v in environment.variables if v.name != params.variable_name]
    if len(variables) == len(environment.variables):
        return err(f"Variable {params.variable_name} not found")

    try:
        await context.sdk.graphql.update_environment(
            environment.id,
            name=environment.name,
            version=environment.version,
            variables=variables,
        )
    except Exception as exc:
        return err_from_exception("Failed to delete environment variable", exc)
    return ok(f"Variable {params.variable_name} deleted successfully")


ACTIONS = [
    environment_create,
    environment_delete,
    environment_variable_update,
    environment_variable_delete,
]
