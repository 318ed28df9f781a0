"""Host application interfaces.

The host owns every piece of mutable session state: the request editor,
filters, scopes, environments, replay sessions and the learnings store.
Actions reach it only through the protocols below, passed explicitly in
the :class:`~shiftbridge.actions.base.ActionContext`.  Remote operations
are coroutines that either return or raise exactly once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Protocol

ToastVariant = Literal["info", "success", "warning", "error"]


# ── Host entities ────────────────────────────────────────────────


@dataclass(slots=True)
class Filter:
    id: str
    name: str
    alias: str
    query: str


@dataclass(slots=True)
class Scope:
    id: str
    name: str
    allowlist: list[str] = field(default_factory=list)
    denylist: list[str] = field(default_factory=list)


@dataclass(slots=True)
class EnvironmentVariable:
    name: str
    value: str
    kind: str = "PLAIN"
    is_secret: bool = False


@dataclass(slots=True)
class EnvironmentSummary:
    id: str
    name: str


@dataclass(slots=True)
class Environment:
    id: str
    name: str
    version: int = 0
    variables: list[EnvironmentVariable] = field(default_factory=list)


@dataclass(slots=True)
class EnvironmentContext:
    """Which environment is selected, and which one is global."""

    selected: EnvironmentSummary | None = None
    global_: EnvironmentSummary | None = None


@dataclass(slots=True)
class Finding:
    id: str
    title: str


# ── Editor ───────────────────────────────────────────────────────


class Editor(Protocol):
    """The focused request editor."""

    def get_text(self) -> str:
        """Return the full buffer text."""
        ...

    def set_text(self, text: str) -> None:
        """Replace the full buffer text."""
        ...

    def replace_selected_text(self, text: str) -> None:
        """Replace the current selection with *text*."""
        ...

    def focus(self) -> None:
        ...


class EditorAccessor(Protocol):
    """Returns the active editor, or ``None`` when none is focused."""

    def __call__(self) -> Editor | None: ...


# ── SDK surfaces ─────────────────────────────────────────────────


class FiltersAPI(Protocol):
    def get_all(self) -> list[Filter]: ...

    async def create(self, *, name: str, query: str, alias: str) -> Filter | None: ...

    async def update(self, id: str, *, name: str, alias: str, query: str) -> Filter | None: ...

    async def delete(self, id: str) -> None: ...


class ScopesAPI(Protocol):
    async def create_scope(
        self, *, name: str, allowlist: list[str], denylist: list[str]
    ) -> Scope | None: ...

    async def update_scope(
        self, id: str, *, name: str, allowlist: list[str], denylist: list[str]
    ) -> Scope | None: ...

    async def delete_scope(self, id: str) -> bool: ...


class GraphQLAPI(Protocol):
    async def environments(self) -> list[EnvironmentSummary]: ...

    async def environment(self, id: str) -> Environment | None: ...

    async def environment_context(self) -> EnvironmentContext: ...

    async def create_environment(
        self, *, name: str, variables: list[EnvironmentVariable]
    ) -> Environment | None: ...

    async def update_environment(
        self, id: str, *, name: str, version: int, variables: list[EnvironmentVariable]
    ) -> Environment | None: ...

    async def delete_environment(self, id: str) -> None: ...

    async def create_replay_session(
        self, *, raw: str, host: str, port: int, is_tls: bool
    ) -> str | None:
        """Create a replay session and return its id."""
        ...

    async def rename_replay_session(self, id: str, name: str) -> None: ...

    async def run_convert_workflow(self, id: str, input: str) -> str | None:
        """Run a convert workflow and return its output."""
        ...


class FilesAPI(Protocol):
    async def delete(self, id: str) -> None: ...


class ReplayAPI(Protocol):
    def open_tab(self, session_id: str) -> None: ...

    async def rename_session(self, session_id: str, name: str) -> None: ...


class NavigationAPI(Protocol):
    def go_to(self, path: str) -> None: ...


class WindowAPI(Protocol):
    def show_toast(self, content: str, *, variant: ToastVariant, duration: int) -> None: ...


class HttpHistoryAPI(Protocol):
    def set_query(self, query: str) -> None: ...


class FindingsAPI(Protocol):
    async def create_finding(
        self, request_id: str, *, title: str, description: str, reporter: str
    ) -> Finding | None: ...


class HostSDK(Protocol):
    """Capability handle for the host application."""

    filters: FiltersAPI
    scopes: ScopesAPI
    graphql: GraphQLAPI
    files: FilesAPI
    replay: ReplayAPI
    navigation: NavigationAPI
    window: WindowAPI
    http_history: HttpHistoryAPI
    findings: FindingsAPI


class LearningsStore(Protocol):
    """Persistent, index-addressed learnings.

    ``entries`` is read fresh on every access; callers must not cache it
    across an ``await``.
    """

    @property
    def entries(self) -> list[str]: ...

    async def add(self, content: str) -> None: ...

    async def update(self, index: int, content: str) -> None: ...

    async def remove(self, indexes: list[int]) -> None:
        """Remove entries; every index refers to the pre-removal sequence."""
        ...
