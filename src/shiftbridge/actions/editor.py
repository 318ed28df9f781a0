"""Editor mutation facade.

Every request-editing action goes through the same guarded sequence:
find the active editor, read its full text, apply a pure transform,
and write the result back with CRLF line endings.  A transform that
raises leaves the buffer untouched and becomes an ``Err`` carrying the
exception text as ``detail``.

The read, transform and write happen without an intervening ``await``;
anything asynchronous (placeholder resolution, remote workflows) must
be finished before the facade is entered.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from shiftbridge.core.errors import NoActiveEditorError
from shiftbridge.core.result import Err, Ok, err, err_from_exception, ok
from shiftbridge.host import Editor, EditorAccessor
from shiftbridge.http.request_text import normalize_line_endings

if TYPE_CHECKING:
    from shiftbridge.actions.base import ActionContext
    from shiftbridge.core.result import ActionError, ActionResult

__all__ = [
    "UNCHANGED_MESSAGE",
    "EditorAccessor",
    "MutationOutcome",
    "mutate_active_editor",
    "require_editor",
    "resolve_values",
    "with_active_editor",
]

logger = logging.getLogger(__name__)

UNCHANGED_MESSAGE = "Request has not changed"
PLACEHOLDER_ERROR = "Failed to resolve placeholders"


@dataclass(frozen=True, slots=True)
class MutationOutcome:
    """Buffer text before and after one facade call."""

    before: str
    after: str

    @property
    def changed(self) -> bool:
        return self.before != self.after


def require_editor(context: ActionContext) -> Editor:
    """Return the active editor.

    Raises:
        NoActiveEditorError: If no editor is focused or open.
    """
    editor = context.active_editor()
    if editor is None:
        raise NoActiveEditorError
    return editor


def with_active_editor(
    context: ActionContext, handler: Callable[[Editor], ActionResult]
) -> ActionResult:
    """Run *handler* against the active editor, or fail with ``NoActiveEditor``."""
    try:
        editor = require_editor(context)
    except NoActiveEditorError as exc:
        return err(str(exc))
    return handler(editor)


def apply_transform(editor: Editor, transform: Callable[[str], str]) -> MutationOutcome:
    """Read, transform and write back the editor buffer.

    The write is unconditional once *transform* returns; exceptions
    from *transform* propagate before anything is written.
    """
    before = editor.get_text()
    after = normalize_line_endings(transform(before))
    editor.set_text(after)
    editor.focus()
    return MutationOutcome(before=before, after=after)


def mutate_active_editor(
    context: ActionContext,
    transform: Callable[[str], str],
    *,
    success_message: str,
    error_message: str,
    unchanged_message: str | None = None,
) -> ActionResult:
    """Apply *transform* to the active editor's request text.

    Args:
        context: Execution context holding the editor accessor.
        transform: Pure ``text -> text`` function.  May raise.
        success_message: Reported when the buffer text changed.
        error_message: Headline of the ``Err`` when *transform* raises.
        unchanged_message: Reported when the text is identical after the
            write.  Defaults to *success_message*.

    Returns:
        ``Ok`` with ``changed`` in its data, or ``Err``.
    """
    try:
        editor = require_editor(context)
    except NoActiveEditorError as exc:
        return err(str(exc))

    try:
        outcome = apply_transform(editor, transform)
    except Exception as exc:
        logger.debug("Editor transform failed: %s", exc)
        return err_from_exception(error_message, exc)

    if outcome.changed or unchanged_message is None:
        return ok(success_message, changed=outcome.changed)
    return ok(unchanged_message, changed=False)


async def resolve_values(
    context: ActionContext, *values: str
) -> Ok[list[str]] | Err[ActionError]:
    """Resolve placeholders in each of *values*, in order.

    Stops at the first failure, which is returned as an action ``Err``.
    """
    resolved: list[str] = []
    for value in values:
        result = await context.resolve_placeholders(value)
        if isinstance(result, Err):
            return err(PLACEHOLDER_ERROR, result.error)
        resolved.append(result.value)
    return Ok(resolved)
