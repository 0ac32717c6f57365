"""Pydantic models describing mkfilep configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoggingConfig(BaseModel):
    """Diagnostic logging written to stderr and, optionally, a file."""

    model_config = ConfigDict(extra="allow")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_path: Optional[Path] = None

    @field_validator("level", mode="before")
    @classmethod
    def _normalise_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


class CreationConfig(BaseModel):
    """How the target file is created."""

    model_config = ConfigDict(extra="allow")

    exist_ok: bool = True


class MkfilepConfig(BaseModel):
    """Root configuration object for the mkfilep command."""

    model_config = ConfigDict(extra="allow")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    creation: CreationConfig = Field(default_factory=CreationConfig)


__all__ = ["CreationConfig", "LoggingConfig", "MkfilepConfig"]
