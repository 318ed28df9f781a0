"""Context assembly: bounded prompt context for the agent.

Renders the ambient state the agent sees each turn (payload blobs,
learnings, the current request, environment variables) into a single
``<context>`` block.  Every free-form value passes through
:func:`truncate_context_value` so the block stays bounded.
Pure functions plus one small in-memory store; no host access.
"""

from __future__ import annotations

import json
import secrets
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from shiftbridge.config.schema import ContextConfig
from shiftbridge.context.truncation import truncate_context_value

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shiftbridge.host import EnvironmentVariable

_BLOB_LIST_PREVIEW_CHARS = 80


def _preview(text: str, limit: int) -> str:
    """Short single-purpose preview with a trailing ellipsis."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


@dataclass(frozen=True, slots=True)
class PayloadBlobMetadata:
    blob_id: str
    length: int
    preview: str


class PayloadBlobStore:
    """Out-of-band payloads referenced by ``§§§Blob§<id>§§§`` placeholders.

    Scoped to one agent run.  Large generated payloads live here so the
    model only ever sees their id, length and a short preview.
    """

    def __init__(self, config: ContextConfig | None = None) -> None:
        self._config = config or ContextConfig()
        self._blobs: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._blobs)

    def check_size(self, size: int) -> None:
        """Raise ValueError if a blob of *size* UTF-8 bytes exceeds the limit."""
        max_bytes = self._config.payload_blob_max_bytes
        if size > max_bytes:
            msg = (
                f"Payload blob is {size} bytes, exceeding the {max_bytes}-byte limit. "
                "Generate a smaller payload or split it into multiple blobs."
            )
            raise ValueError(msg)

    def create(self, content: str) -> PayloadBlobMetadata:
        """Store *content* and return its metadata.

        Raises:
            ValueError: If the per-run count or per-blob size limit is hit.
        """
        max_count = self._config.payload_blob_max_count
        if len(self._blobs) >= max_count:
            msg = (
                f"Cannot create more than {max_count} payload blobs in one run. "
                "Reuse an existing blobId or finish this run and start a new one."
            )
            raise ValueError(msg)

        self.check_size(len(content.encode("utf-8")))

        blob_id = ""
        while not blob_id or blob_id in self._blobs:
            blob_id = f"blob-{int(time.time() * 1000)}-{secrets.token_hex(4)}"

        self._blobs[blob_id] = content
        return PayloadBlobMetadata(
            blob_id=blob_id,
            length=len(content),
            preview=_preview(content, self._config.payload_blob_preview_chars),
        )

    async def get(self, blob_id: str) -> str | None:
        """Async lookup used by placeholder resolution."""
        return self._blobs.get(blob_id)

    def clear(self) -> None:
        self._blobs.clear()

    def summaries(self) -> list[dict[str, Any]]:
        return [
            {
                "blobId": blob_id,
                "length": len(value),
                "preview": _preview(value, _BLOB_LIST_PREVIEW_CHARS),
            }
            for blob_id, value in self._blobs.items()
        ]


def render_environment_variables(
    variables: Sequence[EnvironmentVariable],
    config: ContextConfig | None = None,
) -> str | None:
    """Serialize environment variables for the prompt, secrets masked."""
    if not variables:
        return None
    cfg = config or ContextConfig()
    limit = cfg.environment_variable_value_chars

    entries: list[dict[str, Any]] = []
    for variable in variables:
        if variable.is_secret:
            entries.append({"name": variable.name, "value": "[SECRET]"})
        elif len(variable.value) <= limit:
            entries.append({"name": variable.name, "value": variable.value})
        else:
            entries.append(
                {
                    "name": variable.name,
                    "value": truncate_context_value(variable.value, limit),
                    "valueLength": len(variable.value),
                }
            )

    serialized = json.dumps(entries, indent=2, ensure_ascii=False)
    return truncate_context_value(serialized, cfg.environment_variables_chars)


def build_context_prompt(
    *,
    learnings: Sequence[str] = (),
    http_request: str = "",
    blobs: PayloadBlobStore | None = None,
    environment_variables: Sequence[EnvironmentVariable] = (),
    config: ContextConfig | None = None,
) -> str:
    """Assemble the ``<context>`` block for an agent turn.

    Returns an empty string when there is nothing to show.
    """
    cfg = config or ContextConfig()
    parts: list[str] = []

    if blobs is not None and len(blobs) > 0:
        blob_list = json.dumps(blobs.summaries(), indent=2, ensure_ascii=False)
        parts.append(f"<payload_blobs>\n{blob_list}\n</payload_blobs>")

    if learnings:
        serialized = json.dumps(
            [{"index": i, "value": value} for i, value in enumerate(learnings)],
            indent=2,
            ensure_ascii=False,
        )
        parts.append(f"<learnings>\n{serialized}\n</learnings>")

    if http_request:
        request = truncate_context_value(http_request, cfg.http_request_chars)
        parts.append(f"<current_http_request>\n{request}\n</current_http_request>")

    env_prompt = render_environment_variables(environment_variables, cfg)
    if env_prompt is not None:
        parts.append(f"<environment_variables>\n{env_prompt}\n</environment_variables>")

    if not parts:
        return ""

    body = "\n\n".join(parts)
    return f"<context>\n{body}\n</context>"
