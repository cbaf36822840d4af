"""Logging configuration model."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator

from credcache.shared.constants import Logging


class LoggingSettings(BaseModel):
    """Logging configuration.

    Controls the level, optional JSON log file, and whether console output
    goes through rich or as JSON lines.
    """

    level: str = Field(default=Logging.DEFAULT_LEVEL, description="Logging level")
    file: str | None = Field(default=None, description="JSON log file path")
    rich_console: bool = Field(default=True, description="Use rich console output")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate the logging level name."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f"Unknown logging level: {v}"
            raise ValueError(msg)
        return level


__all__ = ["LoggingSettings"]
