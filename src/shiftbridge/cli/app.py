"""Main CLI application.

Developer tooling for shiftbridge: list the registered tools and their
schemas, preview how text is bounded before it reaches the agent, and
show the effective configuration.
"""

from __future__ import annotations

import json as json_mod
import logging
import sys
from dataclasses import asdict
from typing import TYPE_CHECKING, TextIO

import click

from shiftbridge import __version__
from shiftbridge.config.loader import load_config
from shiftbridge.core.errors import ConfigError

if TYPE_CHECKING:
    from shiftbridge.config.schema import LoggingConfig, ShiftBridgeConfig


# ── Helpers ──────────────────────────────────────────────────────


def _error(msg: str) -> None:
    """Print an error message to stderr and exit."""
    click.echo(f"Error: {msg}", err=True)
    sys.exit(1)


def _load_config(config_path: str | None) -> ShiftBridgeConfig:
    """Load config with user-friendly error handling."""
    try:
        return load_config(path=config_path)
    except ConfigError as e:
        _error(str(e))
        raise  # unreachable, keeps mypy happy


def _setup_logging(config: LoggingConfig) -> None:
    level = getattr(logging, config.level.upper(), logging.INFO)
    kwargs: dict[str, object] = {}
    if config.file:
        kwargs["filename"] = config.file
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        **kwargs,  # type: ignore[arg-type]
    )


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="shiftbridge")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Path to config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None) -> None:
    """shiftbridge - tools that let an agent edit HTTP requests.

    Inspect the tool catalog and the context bounds applied to agent input.
    """
    ctx.ensure_object(dict)
    config = _load_config(config_path)
    _setup_logging(config.logging)
    ctx.obj["config"] = config
    ctx.obj["config_path"] = config_path
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# ── tools ────────────────────────────────────────────────────────


@cli.command()
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print provider-ready tool definitions as JSON.",
)
def tools(as_json: bool) -> None:
    """List the tools exposed to the agent."""
    from shiftbridge.actions.catalog import build_registry

    definitions = build_registry().list_definitions()

    if as_json:
        click.echo(json_mod.dumps([asdict(d) for d in definitions], indent=2))
        return

    from shiftbridge.cli.display import ToolDisplay

    ToolDisplay().show_tools(definitions)


# ── truncate ─────────────────────────────────────────────────────


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--max-length",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum length in characters (default: the HTTP request context bound).",
)
@click.pass_context
def truncate(ctx: click.Context, source: TextIO, max_length: int | None) -> None:
    """Print SOURCE (a file, or - for stdin) bounded for agent context."""
    from shiftbridge.context.truncation import truncate_context_value

    config: ShiftBridgeConfig = ctx.obj["config"]
    limit = config.context.http_request_chars if max_length is None else max_length
    click.echo(truncate_context_value(source.read(), limit), nl=False)


# ── config ───────────────────────────────────────────────────────


@cli.command("config")
@click.option(
    "--sources",
    is_flag=True,
    default=False,
    help="List the config files that were merged, lowest priority first.",
)
@click.pass_context
def show_config(ctx: click.Context, sources: bool) -> None:
    """Print the effective configuration as JSON."""
    if sources:
        from shiftbridge.config.loader import config_sources

        try:
            paths = config_sources(ctx.obj["config_path"])
        except ConfigError as e:
            _error(str(e))
            raise  # unreachable
        if not paths:
            click.echo("No config files found; using built-in defaults.")
        for path in paths:
            click.echo(str(path))
        return

    config: ShiftBridgeConfig = ctx.obj["config"]
    click.echo(json_mod.dumps(config.model_dump(mode="json"), indent=2))
