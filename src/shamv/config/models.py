"""Configuration models describing shamv settings."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ShamvBaseModel(BaseModel):
    """Shared configuration for shamv Pydantic models."""

    model_config = ConfigDict(extra="forbid")


class DigestSettings(ShamvBaseModel):
    """Digest defaults.

    Attributes:
        algorithm: Algorithm used when `--algorithm` is not given.
    """

    algorithm: Literal["sha224", "sha256", "sha384", "sha512"] = "sha256"


class RenameSettings(ShamvBaseModel):
    """Rename behavior.

    Attributes:
        on_conflict: What to do when the destination path already exists.
    """

    on_conflict: Literal["fail", "overwrite"] = "fail"


class LoggingSettings(ShamvBaseModel):
    """Runtime logging configuration.

    Attributes:
        level: Logging verbosity level.
    """

    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown logging level {value!r}")
        return normalized


class ShamvConfig(ShamvBaseModel):
    """Top-level configuration struct for shamv.

    Attributes:
        digest: Digest selection defaults.
        rename: Rename behavior.
        logging: Logging configuration.
    """

    digest: DigestSettings = Field(default_factory=DigestSettings)
    rename: RenameSettings = Field(default_factory=RenameSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


__all__ = [
    "ShamvBaseModel",
    "DigestSettings",
    "RenameSettings",
    "LoggingSettings",
    "ShamvConfig",
]
