"""Action protocol and data types.

An *action* is a named, schema-validated unit of agent-invocable
behaviour with one bounded effect on host state.  This module defines
the action record, the per-invocation execution context, and the
provider-facing definition and call types.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from shiftbridge.config.schema import ShiftBridgeConfig
from shiftbridge.context.placeholders import resolve_placeholders

if TYPE_CHECKING:
    from shiftbridge.context.assembly import PayloadBlobStore
    from shiftbridge.context.placeholders import PayloadBlobLookup
    from shiftbridge.core.result import ActionResult, Result
    from shiftbridge.host import EditorAccessor, HostSDK, LearningsStore

InputT = TypeVar("InputT", bound=BaseModel)


class ActionInput(BaseModel):
    """Base for action input schemas.

    Fields are exposed to the agent in camelCase; unknown fields are rejected.
    """

    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)


@dataclass(frozen=True, slots=True)
class ToolDefinition:
    """Schema definition for an action, suitable for passing to providers."""

    name: str
    description: str
    parameters_schema: dict[str, Any]


@dataclass(frozen=True, slots=True)
class ToolCall:
    """An action invocation requested by a model."""

    id: str
    name: str
    arguments: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ContextValue:
    """An ambient reference the agent may use in arguments."""

    description: str
    value: Any


@dataclass(slots=True)
class ActionContext:
    """Everything an executor may touch, built fresh per invocation.

    Attributes:
        sdk: Host capability handle.
        active_editor: Returns the focused request editor, or None.
        context: Read-only ambient values (e.g. the current replay session).
        learnings: The persistent learnings store, when available.
        payload_blob_lookup: Async lookup for ``§§§Blob§id§§§`` placeholders.
            Defaults to the lookup of ``payload_blobs``.
        payload_blobs: Per-run payload blob store, when available.
        config: Runtime configuration.
    """

    sdk: HostSDK
    active_editor: EditorAccessor
    context: Mapping[str, ContextValue] = field(default_factory=dict)
    learnings: LearningsStore | None = None
    payload_blob_lookup: PayloadBlobLookup | None = None
    payload_blobs: PayloadBlobStore | None = None
    config: ShiftBridgeConfig = field(default_factory=ShiftBridgeConfig)

    def __post_init__(self) -> None:
        self.context = MappingProxyType(dict(self.context))

    def context_field(self, name: str, key: str) -> Any:
        """Return ``context[name].value[key]``, or None if any part is missing."""
        entry = self.context.get(name)
        if entry is None:
            return None
        value = entry.value
        if isinstance(value, Mapping):
            return value.get(key)
        return getattr(value, key, None)

    def _blob_lookup(self) -> PayloadBlobLookup | None:
        if self.payload_blob_lookup is None and self.payload_blobs is not None:
            return self.payload_blobs.get
        return self.payload_blob_lookup

    async def resolve_placeholders(self, text: str) -> Result[str, str]:
        """Resolve environment and blob placeholders in agent-supplied text."""
        return await resolve_placeholders(
            text, sdk=self.sdk, payload_blob_lookup=self._blob_lookup()
        )


Executor = Callable[[InputT, ActionContext], "ActionResult | Awaitable[ActionResult]"]


@dataclass(frozen=True, slots=True)
class Action(Generic[InputT]):
    """A registered action.

    ``name`` is the agent-facing identifier and must never change once
    published; earlier conversation turns may refer to it.
    ``description`` is read by the model, not by code.
    """

    name: str
    description: str
    input_model: type[InputT]
    execute: Executor[InputT]

    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name=self.name,
            description=self.description,
            parameters_schema=self.input_model.model_json_schema(),
        )


def action(
    name: str, description: str, input_model: type[InputT]
) -> Callable[[Executor[InputT]], Action[InputT]]:
    """Decorator turning an executor function into an :class:`Action`."""

    def wrap(fn: Executor[InputT]) -> Action[InputT]:
        return Action(
            name=name,
            description=" ".join(description.split()),
            input_model=input_model,
            execute=fn,
        )

    return wrap
