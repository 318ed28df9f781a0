"""Request-editor actions.

Each action edits the HTTP request in the active editor through
:func:`~shiftbridge.actions.editor.mutate_active_editor`, so a missing
editor or malformed request text never reaches the buffer.
"""

from __future__ import annotations

from functools import partial

from pydantic import Field

from shiftbridge.actions.base import ActionContext, ActionInput, action
from shiftbridge.actions.editor import mutate_active_editor, resolve_values, with_active_editor
from shiftbridge.core.result import ActionResult, Err, err, err_from_exception, ok
from shiftbridge.http import request_text
from shiftbridge.host import Editor

HEADER_FORMAT_ERROR = "Header must be in format 'Name: Value'"


def split_header_line(header: str) -> tuple[str, str] | None:
    """Split ``"Name: Value"`` into its parts, or None if there is no name."""
    name, colon, value = header.partition(":")
    name = name.strip()
    if not colon or not name:
        return None
    return name, value.strip()


# ── Headers ──────────────────────────────────────────────────────


class HeaderAddInput(ActionInput):
    header: str = Field(min_length=1, description="Header in format 'Name: Value'")
    replace: bool = Field(
        default=False, description="Replace an existing header with the same name"
    )


@action(
    "EditorHeaderAdd",
    "Add an HTTP header to the request in the active editor. "
    "Set replace to overwrite an existing header with the same name.",
    HeaderAddInput,
)
async def editor_header_add(params: HeaderAddInput, context: ActionContext) -> ActionResult:
    parts = split_header_line(params.header)
    if parts is None:
        return err(HEADER_FORMAT_ERROR)
    name, raw_value = parts

    resolved = await resolve_values(context, raw_value)
    if isinstance(resolved, Err):
        return resolved
    (value,) = resolved.value

    transform = request_text.set_header if params.replace else request_text.add_header
    verb = "set" if params.replace else "added"
    return mutate_active_editor(
        context,
        partial(transform, name=name, value=value),
        success_message=f"Header {name} {verb} in active editor",
        error_message=f"Failed to add header {name}",
    )


class HeaderSetInput(ActionInput):
    header_name: str = Field(min_length=1, description="Header name")
    header_value: str = Field(description="Header value to set")


@action(
    "EditorHeaderSet",
    "Set an HTTP header in the active editor. Replaces an existing header "
    "with the same name or adds it if not present.",
    HeaderSetInput,
)
async def editor_header_set(params: HeaderSetInput, context: ActionContext) -> ActionResult:
    resolved = await resolve_values(context, params.header_value)
    if isinstance(resolved, Err):
        return resolved
    (value,) = resolved.value

    return mutate_active_editor(
        context,
        partial(request_text.set_header, name=params.header_name, value=value),
        success_message=f"Header {params.header_name} set in active editor",
        error_message=f"Failed to set header {params.header_name}",
    )


class HeaderRemoveInput(ActionInput):
    header_name: str = Field(
        min_length=1, description="Name of the header to remove (case-insensitive)"
    )


@action(
    "EditorHeaderRemove",
    "Remove an HTTP header from the request in the active editor.",
    HeaderRemoveInput,
)
def editor_header_remove(params: HeaderRemoveInput, context: ActionContext) -> ActionResult:
    return mutate_active_editor(
        context,
        partial(request_text.remove_header, name=params.header_name),
        success_message=f"Header {params.header_name} removed from active editor",
        error_message=f"Failed to remove header {params.header_name}",
    )


# ── Query parameters ─────────────────────────────────────────────


class QueryValueInput(ActionInput):
    param_name: str = Field(min_length=1, description="Query parameter name")
    value: str = Field(description="Query parameter value")


@action(
    "EditorQueryAdd",
    "Add a query parameter to the HTTP request URL in the active editor.",
    QueryValueInput,
)
async def editor_query_add(params: QueryValueInput, context: ActionContext) -> ActionResult:
    resolved = await resolve_values(context, params.value)
    if isinstance(resolved, Err):
        return resolved
    (value,) = resolved.value

    return mutate_active_editor(
        context,
        partial(request_text.add_query_param, name=params.param_name, value=value),
        success_message=f"Query parameter {params.param_name} added in active editor",
        error_message=f"Failed to add query parameter {params.param_name}",
    )


@action(
    "EditorQuerySet",
    "Set a query parameter in the HTTP request URL in the active editor. "
    "Replaces an existing parameter with the same name or adds it if not present.",
    QueryValueInput,
)
async def editor_query_set(params: QueryValueInput, context: ActionContext) -> ActionResult:
    resolved = await resolve_values(context, params.value)
    if isinstance(resolved, Err):
        return resolved
    (value,) = resolved.value

    return mutate_active_editor(
        context,
        partial(request_text.set_query_param, name=params.param_name, value=value),
        success_message=f"Query parameter {params.param_name} set in active editor",
        error_message=f"Failed to set query parameter {params.param_name}",
    )


class QueryRemoveInput(ActionInput):
    param_name: str = Field(min_length=1, description="Query parameter name to remove")


@action(
    "EditorQueryRemove",
    "Remove a query parameter from the HTTP request URL in the active editor.",
    QueryRemoveInput,
)
def editor_query_remove(params: QueryRemoveInput, context: ActionContext) -> ActionResult:
    return mutate_active_editor(
        context,
        partial(request_text.remove_query_param, name=params.param_name),
        success_message=f"Query parameter {params.param_name} removed from active editor",
        error_message=f"Failed to remove query parameter {params.param_name}",
    )


# ── Request line and body ────────────────────────────────────────


class PathSetInput(ActionInput):
    path: str = Field(
        min_length=1, description="New request path; existing query parameters are kept"
    )


@action(
    "EditorPathSet",
    "Set the path portion of the HTTP request URL in the active editor while "
    "preserving query parameters. This CANNOT be used to change query parameters.",
    PathSetInput,
)
def editor_path_set(params: PathSetInput, context: ActionContext) -> ActionResult:
    return mutate_active_editor(
        context,
        partial(request_text.set_path, path=params.path),
        success_message="Path set in active editor",
        error_message="Failed to set path",
    )


class MethodSetInput(ActionInput):
    method: str = Field(min_length=1, description="HTTP method, e.g. GET, POST, PUT")


@action(
    "EditorMethodSet",
    "Set the HTTP method of the request in the active editor.",
    MethodSetInput,
)
def editor_method_set(params: MethodSetInput, context: ActionContext) -> ActionResult:
    return mutate_active_editor(
        context,
        partial(request_text.set_method, method=params.method),
        success_message=f"Method set to {params.method} in active editor",
        error_message=f"Failed to set method to {params.method}",
    )


class BodyReplaceInput(ActionInput):
    body: str = Field(description="New body content, replacing everything after the headers")


@action(
    "EditorBodyReplace",
    "Replace the body of the HTTP request in the active editor. "
    "Content-Length is updated when the request has one.",
    BodyReplaceInput,
)
async def editor_body_replace(params: BodyReplaceInput, context: ActionContext) -> ActionResult:
    resolved = await resolve_values(context, params.body)
    if isinstance(resolved, Err):
        return resolved
    (body,) = resolved.value

    return mutate_active_editor(
        context,
        partial(request_text.set_body, body=body),
        success_message="Body replaced in active editor",
        error_message="Failed to replace body",
    )


# ── Whole-buffer edits ───────────────────────────────────────────


class RawSetInput(ActionInput):
    content: str = Field(min_length=1, description="Raw request text to put in the editor")


def _replace_all(_: str, text: str) -> str:
    return text


@action(
    "EditorRawSet",
    "Replace the entire content of the active editor with raw request text.",
    RawSetInput,
)
async def editor_raw_set(params: RawSetInput, context: ActionContext) -> ActionResult:
    resolved = await resolve_values(context, params.content)
    if isinstance(resolved, Err):
        return resolved
    (content,) = resolved.value

    return mutate_active_editor(
        context,
        partial(_replace_all, text=content),
        success_message="Content set in active editor",
        error_message="Failed to set content",
    )


class StringReplaceInput(ActionInput):
    match: str = Field(min_length=1, description="Literal text to replace")
    replace: str = Field(description="Replacement text")


@action(
    "EditorStringReplace",
    "Replace all literal occurrences of a string in the active editor.",
    StringReplaceInput,
)
async def editor_string_replace(
    params: StringReplaceInput, context: ActionContext
) -> ActionResult:
    resolved = await resolve_values(context, params.replace)
    if isinstance(resolved, Err):
        return resolved
    (replacement,) = resolved.value

    return mutate_active_editor(
        context,
        partial(request_text.replace_literal, match=params.match, replacement=replacement),
        success_message="Text replaced in active editor",
        error_message="Failed to replace text",
        unchanged_message=f"No occurrences of {params.match!r} found in active editor",
    )


class SelectionReplaceInput(ActionInput):
    text: str = Field(min_length=1, description="Text to insert in place of the selection")


@action(
    "EditorSelectionReplace",
    "Replace the current selection in the active editor and focus it.",
    SelectionReplaceInput,
)
async def editor_selection_replace(
    params: SelectionReplaceInput, context: ActionContext
) -> ActionResult:
    resolved = await resolve_values(context, params.text)
    if isinstance(resolved, Err):
        return resolved
    (text,) = resolved.value

    def replace_selection(editor: Editor) -> ActionResult:
        try:
            editor.replace_selected_text(text)
            editor.focus()
        except Exception as exc:
            return err_from_exception("Failed to replace selection", exc)
        return ok("Selection replaced in active editor")

    return with_active_editor(context, replace_selection)


class RequestReplaceInput(ActionInput):
    text: str = Field(min_length=1, description="Complete raw HTTP request text")


@action(
    "ReplayRequestReplace",
    "Replace the entire request in the current replay tab editor.",
    RequestReplaceInput,
)
async def replay_request_replace(
    params: RequestReplaceInput, context: ActionContext
) -> ActionResult:
    resolved = await resolve_values(context, params.text)
    if isinstance(resolved, Err):
        return resolved
    (text,) = resolved.value

    return mutate_active_editor(
        context,
        partial(_replace_all, text=text),
        success_message="Request replaced in replay editor",
        error_message="Failed to replace request",
    )


ACTIONS = [
    editor_header_add,
    editor_header_set,
    editor_header_remove,
    editor_query_add,
    editor_query_set,
    editor_query_remove,
    editor_path_set,
    editor_method_set,
    editor_body_replace,
    editor_raw_set,
    editor_string_replace,
    editor_selection_replace,
    replay_request_replace,
]
