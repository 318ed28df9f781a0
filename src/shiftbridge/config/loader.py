"""Configuration loading for the bridge and its CLI.

Config files are TOML.  They are merged in this order, each later file
overriding keys of the earlier ones:

    1. ``$XDG_CONFIG_HOME/shiftbridge/config.toml`` (or ``~/.config/...``)
    2. ``./shiftbridge.toml``
    3. the file named by ``$SHIFTBRIDGE_CONFIG``
    4. the ``--config`` path handed to the CLI

Overrides given to :func:`load_config` win over every file.  Anything
absent falls back to the model defaults in :mod:`.schema`.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from shiftbridge.core.errors import ConfigError

from .schema import ShiftBridgeConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SHIFTBRIDGE_CONFIG"
PROJECT_CONFIG_NAME = "shiftbridge.toml"


def user_config_path() -> Path:
    """Per-user config file, honouring ``XDG_CONFIG_HOME``."""
    xdg = os.environ.get("XDG_CONFIG_HOME", "")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "shiftbridge" / "config.toml"


def _required_file(path: str | Path, origin: str) -> Path:
    p = Path(path)
    if not p.is_file():
        msg = f"{origin} points to non-existent file: {path}"
        raise ConfigError(msg)
    return p


def config_sources(path: str | Path | None = None) -> list[Path]:
    """Return the config files that apply, lowest priority first.

    The user and project files are optional.  A file named by the
    environment variable or by *path* must exist.

    Raises:
        ConfigError: If ``$SHIFTBRIDGE_CONFIG`` or *path* names a missing file.
    """
    optional = [user_config_path(), Path.cwd() / PROJECT_CONFIG_NAME]
    sources = [p for p in optional if p.is_file()]

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        sources.append(_required_file(env_path, CONFIG_ENV_VAR))
    if path is not None:
        sources.append(_required_file(path, "Config path"))
    return sources


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Cannot read config file {path}: {e}"
        raise ConfigError(msg) from e


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge *override* into a copy of *base*; nested tables merge key by key."""
    merged = base.copy()
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(
    path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> ShiftBridgeConfig:
    """Load, merge and validate configuration.

    Args:
        path: Explicit config file; outranks every discovered file.
        overrides: Nested dict applied after all files.

    Raises:
        ConfigError: On a missing explicit file, invalid TOML, or a value
            the schema rejects.
    """
    merged: dict[str, Any] = {}
    for source in config_sources(path):
        logger.debug("Reading config from %s", source)
        merged = _deep_merge(merged, _read_toml(source))

    if overrides:
        merged = _deep_merge(merged, overrides)

    try:
        return ShiftBridgeConfig.model_validate(merged)
    except ValidationError as e:
        msg = f"Configuration validation failed: {e}"
        raise ConfigError(msg) from e
