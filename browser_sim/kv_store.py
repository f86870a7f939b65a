"""
Key-value storage for Browser Sim.

Provides a local-storage style string store, backed either by a JSON file
or by memory. The history store writes through one of these on every
change.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Protocol


logger = logging.getLogger("browser_sim.kv_store")


class KeyValueStore(Protocol):
    """Minimal string-to-string store interface."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


class MemoryStore:
    """In-memory store for tests and throwaway sessions."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


class JsonFileStore:
    """Store persisted as a single JSON object on disk.

    Every write rewrites the whole file synchronously. A missing file is an
    empty store; an unreadable one is logged and treated as empty, and is
    replaced on the next write.
    """

    def __init__(self, path: Path):
        """Initialize the store.

        Args:
            path: JSON file holding the key-value mapping
        """
        self.path = Path(path)
        self._data: dict[str, str] = self._load()

    def _load(self) -> dict[str, str]:
        """Load the mapping from file."""
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable storage file {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring storage file {self.path}: expected an object")
            return {}

        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _save(self) -> None:
        """Save the mapping to file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self._save()

    def remove(self, key: str) -> None:
        if key in self._data:
            del self._data[key]
            self._save()

    def keys(self) -> list[str]:
        return list(self._data)
