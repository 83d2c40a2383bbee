"""Pydantic models describing hashcheck configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HashingConfig(BaseModel):
    """How files are read and where their fingerprints are recorded."""

    model_config = ConfigDict(extra="forbid")

    algorithm: Literal["sha256"] = "sha256"
    chunk_size: int = Field(default=8192, ge=1)
    manifest_extension: str = ".sha256"

    @field_validator("manifest_extension")
    @classmethod
    def _validate_extension(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError("manifest_extension must start with '.', e.g. '.sha256'.")
        return value


class LoggingConfig(BaseModel):
    """Diagnostic output settings for the CLI."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_path: Optional[Path] = None

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class HashCheckConfig(BaseModel):
    """Root configuration object."""

    model_config = ConfigDict(extra="forbid")

    hashing: HashingConfig = Field(default_factory=HashingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


__all__ = ["HashCheckConfig", "HashingConfig", "LoggingConfig"]
