"""
Settings storage for Browser Sim GUI.

Provides persistent JSON-based settings storage.
"""

import json
import logging
import threading
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional

from .config import get_base_dir
from .search_engines import SearchEngine, parse_search_engine


logger = logging.getLogger("browser_sim.settings")


def get_settings_path() -> Path:
    """Get the path to the settings file."""
    return get_base_dir() / "settings.json"


@dataclass
class Settings:
    """Application settings."""

    # Navigation settings
    search_engine: str = SearchEngine.GOOGLE.value

    # Session settings
    log_sessions: bool = True

    # Window settings
    window_width: int = 1100
    window_height: int = 760
    history_panel_visible: bool = False

    def get_search_engine(self) -> SearchEngine:
        """Get the configured search engine."""
        return parse_search_engine(self.search_engine)


class SettingsStore:
    """Thread-safe settings storage."""

    _instance: Optional["SettingsStore"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "SettingsStore":
        """Singleton pattern."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return
        self._initialized = True
        self._settings: Settings = Settings()
        self._file_lock = threading.Lock()
        self._load()

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the singleton so the next access reloads from disk."""
        with cls._lock:
            cls._instance = None

    @property
    def settings(self) -> Settings:
        """Get current settings."""
        return self._settings

    def _load(self) -> None:
        """Load settings from file.

        Fields with a missing or mistyped value keep their default.
        """
        path = get_settings_path()
        if not path.exists():
            return

        try:
            with self._file_lock:
                data = json.loads(path.read_text())
        except json.JSONDecodeError:
            logger.warning("Settings file %s is not valid JSON, using defaults", path)
            self._settings = Settings()
            return

        if not isinstance(data, dict):
            logger.warning("Settings file %s is not an object, using defaults", path)
            self._settings = Settings()
            return

        defaults = asdict(Settings())
        values = {}
        for name, default in defaults.items():
            value = data.get(name, default)
            # bool is an int subclass, so compare exact types
            if type(value) is not type(default):
                logger.warning("Ignoring invalid %s=%r in %s", name, value, path)
                value = default
            values[name] = value
        self._settings = Settings(**values)

    def save(self) -> None:
        """Save settings to file."""
        path = get_settings_path()
        path.parent.mkdir(parents=True, exist_ok=True)

        with self._file_lock:
            path.write_text(json.dumps(asdict(self._settings), indent=2))

    def update(self, **kwargs) -> None:
        """Update settings and save.

        Args:
            **kwargs: Settings fields to update
        """
        names = {f.name for f in fields(Settings)}
        for key, value in kwargs.items():
            if key in names:
                setattr(self._settings, key, value)
        self.save()

    def reset(self) -> None:
        """Reset to default settings."""
        self._settings = Settings()
        self.save()


def get_settings() -> Settings:
    """Get the current settings."""
    return SettingsStore().settings


def update_settings(**kwargs) -> None:
    """Update and save settings."""
    SettingsStore().update(**kwargs)
