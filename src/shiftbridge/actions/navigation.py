"""Navigation and UI feedback actions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from shiftbridge.actions.base import ActionContext, ActionInput, action
from shiftbridge.core.result import ActionResult, Ok, err_from_exception, ok
from shiftbridge.host import ToastVariant

if TYPE_CHECKING:
    from shiftbridge.config.schema import ToastConfig
    from shiftbridge.host import HostSDK


def notify_result(sdk: HostSDK, result: ActionResult, config: ToastConfig) -> None:
    """Show a toast for a finished action.

    Successful results use the longer result duration; results with an
    empty message show nothing.
    """
    if isinstance(result, Ok):
        message, variant = result.value.message, "success"
    else:
        message, variant = result.error.message, "error"
    if message:
        sdk.window.show_toast(message, variant=variant, duration=config.result_duration_ms)


class NavigateInput(ActionInput):
    path: str = Field(min_length=1, description="Path of the page to navigate to")


@action("Navigate", "Navigate to a specific page by path.", NavigateInput)
def navigate(params: NavigateInput, context: ActionContext) -> ActionResult:
    path = params.path.removeprefix("#")
    try:
        context.sdk.navigation.go_to(path)
    except Exception as exc:
        return err_from_exception(f"Failed to navigate to page {path}", exc)
    return ok(f"Navigated to page {path}")


class ToastInput(ActionInput):
    content: str = Field(min_length=1, description="Toast content")
    variant: ToastVariant | None = Field(
        description="Toast variant, use null for the default (info)"
    )
    duration: int | None = Field(
        default=None, ge=1000, le=60000, description="Duration in milliseconds"
    )


@action("Toast", "Show a toast message to the user.", ToastInput)
def toast(params: ToastInput, context: ActionContext) -> ActionResult:
    variant = params.variant or "info"
    duration = params.duration or context.config.toast.default_duration_ms
    try:
        context.sdk.window.show_toast(params.content, variant=variant, duration=duration)
    except Exception as exc:
        return err_from_exception("Failed to show toast", exc)
    return ok("")


class HttpqlQueryInput(ActionInput):
    query: str = Field(
        min_length=1,
        description="Query for the HTTPQL filter. Follow HTTPQL syntax strictly.",
    )


@action(
    "HttpqlQuerySet",
    "Set the HTTPQL filter query on the HTTP History tab. "
    "This navigates to the HTTP History tab and sets the query.",
    HttpqlQueryInput,
)
def httpql_query_set(params: HttpqlQueryInput, context: ActionContext) -> ActionResult:
    try:
        context.sdk.http_history.set_query(params.query)
    except Exception as exc:
        return err_from_exception("Failed to set query", exc)
    return ok("Query set successfully")


ACTIONS = [navigate, toast, httpql_query_set]
