"""Settings persistence."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from kubedeck.constants.defaults import SETTINGS_PATH_DEFAULT
from kubedeck.models.state.app_settings import (
    AppSettings,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads and saves :class:`AppSettings` as JSON."""

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else SETTINGS_PATH_DEFAULT

    def load(self) -> AppSettings:
        """Read stored settings, or defaults when no file exists yet.

        Raises:
            ConfigLoadError: The file exists but is unreadable or invalid.
        """
        if not self.path.exists():
            logger.debug("No settings file at %s, using defaults", self.path)
            return AppSettings()
        try:
            raw = self.path.read_text(encoding="utf-8")
            return AppSettings.model_validate_json(raw)
        except (OSError, ValidationError) as e:
            raise ConfigLoadError(f"Failed to load settings from {self.path}: {e}") from e

    def save(self, settings: AppSettings) -> None:
        """Write settings, creating the parent directory when needed.

        Raises:
            ConfigSaveError: The file could not be written.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(settings.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            raise ConfigSaveError(f"Failed to save settings to {self.path}: {e}") from e
        logger.info("Settings saved to %s", self.path)
