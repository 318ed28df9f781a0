"""Rich rendering for the CLI.

Accepts an optional :class:`~rich.console.Console` for dependency
injection in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shiftbridge.actions.base import ToolDefinition

_DESCRIPTION_LEN = 100


def _shorten(text: str, limit: int = _DESCRIPTION_LEN) -> str:
    if len(text) <= limit:
        return text
    return text[:limit].rstrip() + " ..."


class ToolDisplay:
    """Tabular listing of registered tools."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def show_tools(self, definitions: Sequence[ToolDefinition]) -> None:
        table = Table(title=f"Tools ({len(definitions)})")
        table.add_column("Name", style="bold cyan", no_wrap=True)
        table.add_column("Arguments", style="green")
        table.add_column("Description")

        for definition in definitions:
            properties = definition.parameters_schema.get("properties", {})
            required = set(definition.parameters_schema.get("required", []))
            arguments = ", ".join(
                name if name in required else f"{name}?" for name in properties
            )
            table.add_row(definition.name, arguments, _shorten(definition.description))

        self._console.print(table)
