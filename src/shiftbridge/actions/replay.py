"""Replay session actions."""

from __future__ import annotations

import logging

from pydantic import Field

from shiftbridge.actions.base import ActionContext, ActionInput, action
from shiftbridge.actions.editor import resolve_values
from shiftbridge.core.result import ActionResult, Err, err, err_from_exception, ok

logger = logging.getLogger(__name__)

NO_SESSION_ERROR = "No session ID provided or the current tab is not a replay tab"


class ReplaySessionCreateInput(ActionInput):
    raw_request: str = Field(min_length=1, description="Raw HTTP request source")
    host: str = Field(min_length=1, description="Target host")
    port: int = Field(gt=0, le=65535, description="Target port")
    is_tls: bool = Field(description="Whether to use TLS")
    session_name: str | None = Field(
        default=None, description="Optional name for the session. Use null for the default."
    )


@action(
    "ReplaySessionCreate",
    "Create a new replay session with the given request and connection details, "
    "and open it in a tab.",
    ReplaySessionCreateInput,
)
async def replay_session_create(
    params: ReplaySessionCreateInput, context: ActionContext
) -> ActionResult:
    resolved = await resolve_values(context, params.raw_request)
    if isinstance(resolved, Err):
        return resolved
    (raw,) = resolved.value

    sdk = context.sdk
    try:
        session_id = await sdk.graphql.create_replay_session(
            raw=raw, host=params.host, port=params.port, is_tls=params.is_tls
        )
    except Exception as exc:
        return err_from_exception("Failed to create replay session", exc)
    if session_id is None:
        return err("Failed to create replay session")

    try:
        sdk.replay.open_tab(session_id)
    except Exception as exc:
        logger.warning("Created replay session %s but could not open it: %s", session_id, exc)
        return err_from_exception(
            f"Replay session {session_id} created but could not be opened", exc
        )
    if params.session_name:
        try:
            await sdk.graphql.rename_replay_session(session_id, params.session_name)
        except Exception as exc:
            logger.warning("Created replay session %s but rename failed: %s", session_id, exc)
            return err_from_exception(
                f"Replay session {session_id} created but could not be renamed", exc
            )
    return ok("Replay session created successfully", session_id=session_id)


class ReplayTabRenameInput(ActionInput):
    new_name: str = Field(min_length=1, description="New name for the replay tab")
    session_id: str | None = Field(
        default=None,
        description=(
            "Session ID of the replay tab to rename. Use null for the current tab; "
            '"this tab" most likely refers to the current tab.'
        ),
    )


@action("ReplayTabRename", "Rename a replay session tab.", ReplayTabRenameInput)
async def replay_tab_rename(params: ReplayTabRenameInput, context: ActionContext) -> ActionResult:
    session_id = params.session_id or context.context_field("replay", "sessionId")
    if not session_id:
        return err(NO_SESSION_ERROR)
    try:
        await context.sdk.replay.rename_session(session_id, params.new_name)
    except Exception as exc:
        return err_from_exception("Failed to rename replay tab", exc)
    return ok("Replay tab renamed successfully", session_id=session_id)


ACTIONS = [replay_session_create, replay_tab_rename]
