"""Pydantic models for shiftbridge configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ContextConfig(BaseModel):
    """Bounds applied to text entering agent-visible context."""

    http_request_chars: int = Field(default=12_000, ge=1)
    environment_variable_value_chars: int = Field(default=400, ge=1)
    environment_variables_chars: int = Field(default=8_000, ge=1)
    payload_blob_max_count: int = Field(default=20, ge=1)
    payload_blob_max_bytes: int = Field(default=1_000_000, ge=1)
    payload_blob_preview_chars: int = Field(default=200, ge=1)


class ToastConfig(BaseModel):
    """Toast durations, in milliseconds.

    ``default_duration_ms`` applies when the Toast action receives a null
    duration; ``result_duration_ms`` is used when an action's success
    message is surfaced to the user.
    """

    default_duration_ms: int = Field(default=3000, ge=1000, le=60_000)
    result_duration_ms: int = Field(default=6000, ge=1000, le=60_000)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file: str = ""


class ShiftBridgeConfig(BaseModel):
    """Top-level configuration for shiftbridge."""

    context: ContextConfig = Field(default_factory=ContextConfig)
    toast: ToastConfig = Field(default_factory=ToastConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
