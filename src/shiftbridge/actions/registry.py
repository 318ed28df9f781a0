"""Action registry: name-keyed dispatch with a validation gate.

Provides registration, lookup, listing, and execution of
:class:`~shiftbridge.actions.base.Action` records.  Execution validates
the raw arguments against the action's input model before the executor
runs; every outcome, including an unknown name or bad arguments, comes
back as an :data:`~shiftbridge.core.result.ActionResult`.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from shiftbridge.core.errors import ActionInputError, ToolRegistrationError, UnknownToolError
from shiftbridge.core.result import Err, Ok, err, err_from_exception

if TYPE_CHECKING:
    from collections.abc import Iterable

    from shiftbridge.actions.base import Action, ActionContext, ToolCall, ToolDefinition
    from shiftbridge.core.result import ActionResult

logger = logging.getLogger(__name__)


def _validation_fields(exc: ValidationError) -> list[tuple[str, str]]:
    fields = []
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"]) or "<root>"
        fields.append((path, error["msg"]))
    return fields


class ActionRegistry:
    """Registry for the actions exposed to the agent.

    Names are unique; registration order is preserved when listing.
    The registry performs no retries and has no side effects of its own.
    """

    def __init__(self, actions: Iterable[Action[Any]] = ()) -> None:
        self._actions: dict[str, Action[Any]] = {}
        for entry in actions:
            self.register(entry)

    def register(self, action: Action[Any]) -> None:
        """Register an action.

        Raises:
            ToolRegistrationError: If the name is already registered.
        """
        if action.name in self._actions:
            raise ToolRegistrationError(action.name)
        self._actions[action.name] = action

    def get(self, name: str) -> Action[Any]:
        """Get an action by name.

        Raises:
            UnknownToolError: If no action has that name.
        """
        if name not in self._actions:
            raise UnknownToolError(name)
        return self._actions[name]

    def list_definitions(self) -> list[ToolDefinition]:
        """Return definitions for all registered actions.

        Suitable for passing to provider APIs as available tools.
        """
        return [a.definition() for a in self._actions.values()]

    def list_names(self) -> list[str]:
        """Return names of all registered actions."""
        return list(self._actions.keys())

    def __len__(self) -> int:
        return len(self._actions)

    def __contains__(self, name: object) -> bool:
        return name in self._actions

    async def execute(self, call: ToolCall, context: ActionContext) -> ActionResult:
        """Validate *call* and run the matching executor.

        The executor's result is returned unchanged.  An exception that
        escapes an executor is logged and reported as an ``Err``.
        """
        try:
            action = self.get(call.name)
        except UnknownToolError as exc:
            logger.warning("Unknown tool requested: %s", call.name)
            return err(str(exc))

        try:
            params = action.input_model.model_validate(call.arguments)
        except ValidationError as exc:
            input_error = ActionInputError(call.name, _validation_fields(exc))
            logger.warning("%s", input_error)
            return err(str(input_error))

        logger.debug("Dispatching %s (call %s)", call.name, call.id)
        try:
            result = action.execute(params, context)
            if inspect.isawaitable(result):
                result = await result
        except Exception as exc:
            logger.exception("Tool %s raised during execution", call.name)
            return err_from_exception(f"Tool {call.name} failed", exc)

        if not isinstance(result, (Ok, Err)):
            logger.error("Tool %s returned %r instead of a result", call.name, result)
            return err(f"Tool {call.name} returned an invalid result")

        if isinstance(result, Err):
            logger.warning("Tool %s failed: %s", call.name, result.error.message)
        return result
