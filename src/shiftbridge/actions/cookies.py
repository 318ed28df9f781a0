"""Cookie actions on the request in the active editor.

Cookie names are matched case-sensitively.  Each action reports
whether the request text actually changed.
"""

from __future__ import annotations

from functools import partial

from pydantic import Field

from shiftbridge.actions.base import ActionContext, ActionInput, action
from shiftbridge.actions.editor import UNCHANGED_MESSAGE, mutate_active_editor, resolve_values
from shiftbridge.core.result import ActionResult, Err
from shiftbridge.http import request_text


class CookieValueInput(ActionInput):
    name: str = Field(
        min_length=1, description="Cookie name, e.g. sessionid or auth_token"
    )
    value: str = Field(description="Cookie value")


class CookieNameInput(ActionInput):
    name: str = Field(min_length=1, description="Cookie name to remove from the Cookie header")


@action(
    "RequestCookieAdd",
    "Append a cookie to the Cookie header of the current request without "
    "replacing existing cookies with the same name.",
    CookieValueInput,
)
async def request_cookie_add(params: CookieValueInput, context: ActionContext) -> ActionResult:
    resolved = await resolve_values(context, params.value)
    if isinstance(resolved, Err):
        return resolved
    (value,) = resolved.value

    return mutate_active_editor(
        context,
        partial(request_text.add_cookie, name=params.name, value=value),
        success_message="Cookie appended to request",
        error_message="Failed to add cookie",
        unchanged_message=UNCHANGED_MESSAGE,
    )


@action(
    "RequestCookieSet",
    "Set a cookie in the Cookie header of the current request. "
    "An existing cookie with the same name is replaced.",
    CookieValueInput,
)
async def request_cookie_set(params: CookieValueInput, context: ActionContext) -> ActionResult:
    resolved = await resolve_values(context, params.value)
    if isinstance(resolved, Err):
        return resolved
    (value,) = resolved.value

    return mutate_active_editor(
        context,
        partial(request_text.set_cookie, name=params.name, value=value),
        success_message="Cookie updated in request",
        error_message="Failed to update cookie",
        unchanged_message=UNCHANGED_MESSAGE,
    )


@action(
    "RequestCookieRemove",
    "Remove a cookie from the Cookie header of the current request.",
    CookieNameInput,
)
def request_cookie_remove(params: CookieNameInput, context: ActionContext) -> ActionResult:
    return mutate_active_editor(
        context,
        partial(request_text.remove_cookie, name=params.name),
        success_message="Cookie removed from request",
        error_message="Failed to delete cookie",
        unchanged_message=UNCHANGED_MESSAGE,
    )


ACTIONS = [request_cookie_add, request_cookie_set, request_cookie_remove]
