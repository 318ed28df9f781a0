"""Payload blob actions.

Large generated payloads are stored out of band for the current agent
run and referenced as ``§§§Blob§<blobId>§§§`` in other tools' inputs, so
the model never has to repeat them inline.
"""

from __future__ import annotations

from pydantic import Field

from shiftbridge.actions.base import ActionContext, ActionInput, action
from shiftbridge.core.result import ActionResult, err, err_from_exception, ok

PAYLOAD_BLOBS_UNAVAILABLE = "Payload blobs are not available in this context"


class PayloadBlobCreateInput(ActionInput):
    content: str = Field(min_length=1, description="Payload content, or the unit to repeat")
    repeat: int = Field(
        default=1,
        ge=1,
        le=1_000_000,
        description="Number of times to repeat content, e.g. 5000 for a long run of 'A'",
    )
    separator: str = Field(default="", description="Text placed between repetitions")


@action(
    "PayloadBlobCreate",
    """
    Generate a payload blob for the current agent run by repeating content.
    Reference the result with §§§Blob§blobId§§§ in tool inputs that accept
    placeholders.
    """,
    PayloadBlobCreateInput,
)
def payload_blob_create(params: PayloadBlobCreateInput, context: ActionContext) -> ActionResult:
    if context.payload_blobs is None:
        return err(PAYLOAD_BLOBS_UNAVAILABLE)

    size = (
        len(params.content.encode("utf-8")) * params.repeat
        + len(params.separator.encode("utf-8")) * (params.repeat - 1)
    )
    try:
        context.payload_blobs.check_size(size)
        blob = context.payload_blobs.create(
            params.separator.join([params.content] * params.repeat)
        )
    except ValueError as exc:
        return err_from_exception("Failed to store payload blob", exc)
    return ok(
        f"Payload blob created ({blob.length} chars)",
        blobId=blob.blob_id,
        length=blob.length,
        preview=blob.preview,
    )


ACTIONS = [payload_blob_create]
