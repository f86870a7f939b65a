"""
Configuration management for Browser Sim.

Provides configuration dataclass and environment variable loading.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .search_engines import SearchEngine, get_search_endpoint, parse_search_engine

# Load environment variables from .env file if present
load_dotenv()


# Storage key the visit history is kept under
HISTORY_KEY = "browser-history"


def get_base_dir() -> Path:
    """Get the base directory for browser sim data.

    Honors BROWSER_SIM_HOME so tests and portable installs can relocate it.
    """
    override = os.getenv("BROWSER_SIM_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".browser_sim"


def get_storage_path() -> Path:
    """Get the path to the key-value storage file."""
    return get_base_dir() / "storage.json"


def get_sessions_dir() -> Path:
    """Get the directory for session event logs."""
    return get_base_dir() / "sessions"


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes")


@dataclass
class BrowserConfig:
    """Configuration for a browsing session."""

    # Search engine used for non-URL input
    search_engine: SearchEngine = field(
        default_factory=lambda: parse_search_engine(
            os.getenv("BROWSER_SIM_SEARCH_ENGINE", "google")
        )
    )

    # Storage settings
    history_key: str = HISTORY_KEY
    storage_path: Optional[Path] = None
    in_memory: bool = False

    # Write a JSONL event log for each session
    log_sessions: bool = True

    # Debug mode - enables verbose logging (off by default)
    debug: bool = field(default_factory=lambda: _env_flag("BROWSER_SIM_DEBUG"))

    @property
    def search_endpoint(self) -> str:
        """Get the query endpoint for the configured search engine."""
        return get_search_endpoint(self.search_engine)

    @property
    def resolved_storage_path(self) -> Path:
        """Get the storage file path, defaulting under the base directory."""
        return self.storage_path or get_storage_path()

    def ensure_directories(self) -> None:
        """Ensure all required directories exist."""
        get_base_dir().mkdir(parents=True, exist_ok=True)
        if self.log_sessions:
            get_sessions_dir().mkdir(parents=True, exist_ok=True)
        if not self.in_memory:
            self.resolved_storage_path.parent.mkdir(parents=True, exist_ok=True)

    @classmethod
    def from_cli_args(
        cls,
        engine: Optional[str] = None,
        in_memory: bool = False,
        no_session_log: bool = False,
        debug: bool = False,
    ) -> "BrowserConfig":
        """Create configuration from CLI arguments."""
        config = cls(in_memory=in_memory, log_sessions=not no_session_log)
        if engine:
            config.search_engine = parse_search_engine(engine)
        if debug:
            config.debug = True
        return config


# Default configuration values for documentation
DEFAULTS = {
    "search_engine": SearchEngine.GOOGLE.value,
    "history_key": HISTORY_KEY,
    "storage_file": "storage.json",
    "log_sessions": True,
    "debug": False,
}
