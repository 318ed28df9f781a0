"""The full action catalog.

Tool names are part of the agent-facing contract: once published they
must not be renamed, since earlier conversation turns refer to them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from shiftbridge.actions import (
    cookies,
    editor_tools,
    environments,
    filters,
    findings,
    hosted_files,
    learnings,
    navigation,
    payloads,
    replay,
    scopes,
    workflows,
)
from shiftbridge.actions.registry import ActionRegistry

if TYPE_CHECKING:
    from shiftbridge.actions.base import Action

_MODULES = (
    editor_tools,
    cookies,
    filters,
    scopes,
    environments,
    learnings,
    navigation,
    replay,
    workflows,
    findings,
    hosted_files,
    payloads,
)


def all_actions() -> list[Action[Any]]:
    """Return every built-in action, grouped by domain."""
    return [entry for module in _MODULES for entry in module.ACTIONS]


def build_registry() -> ActionRegistry:
    """Build a registry holding every built-in action.

    Raises:
        ToolRegistrationError: If two actions share a name.
    """
    return ActionRegistry(all_actions())
