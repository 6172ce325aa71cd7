"""Settings persistence helpers."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from .schema import Settings

logger = logging.getLogger(__name__)


class SettingsStore:
    """Load and save :class:`Settings` to disk."""

    @staticmethod
    def settings_path() -> Path:
        """Return the path to the settings JSON file."""
        home = os.environ.get("PIXELTURTLE_HOME")
        if home:
            base = Path(home).expanduser()
        else:
            base = Path(os.path.expanduser("~/.pixelturtle"))
        return base / "settings.json"

    @classmethod
    def ensure_home(cls) -> Path:
        """Ensure the settings directory exists and return it."""
        path = cls.settings_path().parent
        path.mkdir(parents=True, exist_ok=True)
        return path

    @classmethod
    def load(cls) -> Settings:
        """Load settings from disk, returning defaults when absent or invalid."""
        path = cls.settings_path()
        if not path.exists():
            return Settings()
        try:
            data = json.loads(path.read_text())
            return Settings.model_validate(data)
        except (OSError, ValueError, ValidationError) as exc:
            logger.warning("ignoring invalid settings file %s: %s", path, exc)
            return Settings()

    @classmethod
    def save(cls, settings: Settings) -> None:
        """Atomically persist *settings* to disk."""
        path = cls.settings_path()
        cls.ensure_home()
        tmp = path.with_suffix(".tmp")
        tmp.write_text(settings.model_dump_json(indent=2))
        os.replace(tmp, path)
