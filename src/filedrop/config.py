"""Application configuration for filedrop.

The shared upload secret and the public base URL are mandatory: the service
refuses to start without them. Everything else has defaults suitable for a
single-host deployment behind a reverse proxy.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


def _default_upload_dir() -> Path:
    return Path("./uploads")


class ConfigError(RuntimeError):
    """Raised when required startup configuration is missing or invalid."""


class AppConfig(BaseSettings):
    """Immutable settings container shared by every request handler."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    upload_password: str = Field(
        min_length=1,
        repr=False,
        description="Shared secret gating uploads and keying delete tokens.",
    )
    public_url: str = Field(
        min_length=1,
        description="Public base URL used when building file and delete links.",
    )
    upload_dir: Path = Field(
        default_factory=_default_upload_dir,
        description="Flat directory holding uploaded files.",
    )
    host: str = Field(
        default="127.0.0.1",
        validation_alias="FILEDROP_HOST",
    )
    port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        validation_alias="FILEDROP_PORT",
    )
    chunk_size_bytes: int = Field(
        default=1 * 1024 * 1024,
        ge=1024,
        description="Chunk size used when streaming uploads to disk.",
    )
    log_level: str = "INFO"

    @field_validator("public_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        stripped = value.strip().rstrip("/")
        if not stripped:
            raise ValueError("public_url must not be blank")
        return stripped

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.strip().upper() or "INFO"
        level = _LEVEL_ALIASES.get(level, level)
        if level not in LOG_LEVELS:
            raise ValueError("log_level must be one of " + ", ".join(LOG_LEVELS))
        return level


def load_config(**overrides: object) -> AppConfig:
    """Load configuration from the environment (and ``.env`` when present)."""
    try:
        return AppConfig(**overrides)  # type: ignore[arg-type]
    except ValidationError as exc:
        missing = sorted(
            str(error["loc"][0]) for error in exc.errors() if error.get("loc")
        )
        raise ConfigError(
            "invalid configuration for: " + ", ".join(missing or ["<unknown>"])
        ) from exc


__all__ = ["LOG_LEVELS", "AppConfig", "ConfigError", "load_config"]
