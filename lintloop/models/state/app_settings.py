"""Application settings models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lintloop.constants.defaults import (
    CODE_LANGUAGE_DEFAULT,
    FILE_EXTENSION_DEFAULT,
    LINT_COMMAND_DEFAULT,
    MAX_RETRIES_DEFAULT,
    MODEL_DEFAULT,
    OLLAMA_URL_DEFAULT,
    ROOT_DIR_DEFAULT,
    STREAM_DEFAULT,
)
from lintloop.constants.limits import (
    EVENT_QUEUE_CAPACITY,
    EVENT_QUEUE_CAPACITY_MIN,
    MAX_RETRIES_MIN,
)
from lintloop.constants.timeouts import (
    LINT_COMMAND_TIMEOUT,
    PATCH_REQUEST_TIMEOUT,
    WORKER_DEADLINE_SECONDS,
)
from lintloop.errors import LintLoopError


class FixerSettings(BaseModel):
    """Run settings with validation. Read once at startup."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    # Discovery
    root_dir: str = ROOT_DIR_DEFAULT
    file_extension: str = FILE_EXTENSION_DEFAULT
    code_language: str = CODE_LANGUAGE_DEFAULT

    # Fix loop
    max_retries: int = Field(default=MAX_RETRIES_DEFAULT, ge=MAX_RETRIES_MIN)
    lint_command: str = LINT_COMMAND_DEFAULT
    worker_deadline_seconds: float = Field(default=WORKER_DEADLINE_SECONDS, gt=0)
    lint_timeout_seconds: float = Field(default=LINT_COMMAND_TIMEOUT, gt=0)

    # Patch service
    ollama_url: str = OLLAMA_URL_DEFAULT
    model: str = MODEL_DEFAULT
    stream: bool = STREAM_DEFAULT
    request_timeout_seconds: float = Field(default=PATCH_REQUEST_TIMEOUT, gt=0)

    # Event bus
    event_queue_capacity: int = Field(
        default=EVENT_QUEUE_CAPACITY,
        ge=EVENT_QUEUE_CAPACITY_MIN,
    )

    @field_validator("lint_command", "model")
    @classmethod
    def _require_non_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value.strip()

    @field_validator("ollama_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        normalized = value.strip().rstrip("/")
        if not normalized:
            raise ValueError("must not be blank")
        return normalized

    @field_validator("file_extension")
    @classmethod
    def _normalize_extension(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("must not be blank")
        return normalized if normalized.startswith(".") else f".{normalized}"

    def with_overrides(self, overrides: dict[str, Any]) -> FixerSettings:
        """Return a validated copy with the non-None overrides applied."""
        merged = self.model_dump()
        merged.update({key: value for key, value in overrides.items() if value is not None})
        return FixerSettings.model_validate(merged)


class ConfigError(LintLoopError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "FixerSettings",
]
