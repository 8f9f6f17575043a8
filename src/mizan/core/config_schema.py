"""Pydantic models for config validation.

``load_settings`` merges file, environment and CLI values into a plain
dict and validates it once into ``MizanConfig``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class DisplayConfig(BaseModel):
    """How amounts are rendered in the terminal."""

    currency: str = "$"


class LoggingConfig(BaseModel):
    """Loguru sink settings."""

    level: str = "WARNING"
    file: Path | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().upper()
            if v not in _LOG_LEVELS:
                raise ValueError(f"unknown log level {v!r}, expected one of {sorted(_LOG_LEVELS)}")
        return v

    @field_validator("file", mode="before")
    @classmethod
    def _expand_user(cls, v: Any) -> Any:
        if isinstance(v, str) and v:
            return Path(v).expanduser()
        return v or None


class ConnectionsConfig(BaseModel):
    """Simulated account connection rules."""

    min_api_key_length: int = 20

    @field_validator("min_api_key_length")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("min_api_key_length must be at least 1")
        return v


class MizanConfig(BaseModel):
    """Root configuration model.

    Uses ``extra="allow"`` so custom sections survive validation.
    """

    model_config = ConfigDict(extra="allow")

    display: DisplayConfig = DisplayConfig()
    logging: LoggingConfig = LoggingConfig()
    connections: ConnectionsConfig = ConnectionsConfig()
