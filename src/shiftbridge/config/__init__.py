"""Configuration loading and validation."""

from shiftbridge.config.loader import config_sources, load_config
from shiftbridge.config.schema import (
    ContextConfig,
    LoggingConfig,
    ShiftBridgeConfig,
    ToastConfig,
)

__all__ = [
    "ContextConfig",
    "LoggingConfig",
    "ShiftBridgeConfig",
    "ToastConfig",
    "config_sources",
    "load_config",
]
