"""Load FixerSettings from an optional YAML file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from lintloop.constants.defaults import CONFIG_FILE_DEFAULT
from lintloop.models.state.app_settings import (
    ConfigError,
    ConfigLoadError,
    FixerSettings,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Reads settings files. Keys mirror FixerSettings field names."""

    DEFAULT_PATH = Path(CONFIG_FILE_DEFAULT)

    @classmethod
    def resolve_path(cls, explicit: Path | None) -> Path | None:
        """Return the file to load, or None when nothing applies.

        An explicit path is always returned (and must exist at load time);
        otherwise the default file is used only if present.
        """
        if explicit is not None:
            return explicit.expanduser()
        if cls.DEFAULT_PATH.is_file():
            return cls.DEFAULT_PATH
        return None

    @classmethod
    def load(cls, path: Path | None = None) -> FixerSettings:
        """Load and validate settings.

        Raises:
            ConfigLoadError: unreadable file, invalid YAML, a non-mapping
                document, or values that fail validation.
        """
        resolved = cls.resolve_path(path)
        if resolved is None:
            logger.debug("No settings file found; using defaults")
            return FixerSettings()

        raw = cls._read_mapping(resolved)
        try:
            settings = FixerSettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {resolved}: {exc}") from exc
        logger.info("Loaded settings from %s", resolved)
        return settings

    @staticmethod
    def _read_mapping(path: Path) -> dict[str, Any]:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigLoadError(f"Cannot read settings file {path}: {exc}") from exc
        try:
            payload = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigLoadError(f"Invalid YAML in {path}: {exc}") from exc
        if payload is None:
            return {}
        if not isinstance(payload, dict):
            raise ConfigLoadError(f"Settings file {path} must contain a mapping")
        return payload


__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
]
