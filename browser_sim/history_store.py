"""
Visit history for Browser Sim.

Provides the persisted, newest-first log of navigations and the relative
time labels shown next to each entry.
"""

import json
import logging
import time
import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from .config import HISTORY_KEY
from .kv_store import KeyValueStore
from .types import HistoryEntry


logger = logging.getLogger("browser_sim.history_store")


class HistoryRecord(BaseModel):
    """Persisted form of a history entry."""

    id: str = Field(min_length=1, description="Unique entry identifier")
    url: str = Field(description="Visited URL")
    title: str = Field(description="Query text used for the visit")
    timestamp: int = Field(ge=0, description="Visit time in epoch milliseconds")

    def to_entry(self) -> HistoryEntry:
        return HistoryEntry(
            id=self.id,
            url=self.url,
            title=self.title,
            visited_at=self.timestamp,
        )


_records_adapter = TypeAdapter(list[HistoryRecord])


def now_ms() -> int:
    """Get the current time in epoch milliseconds."""
    return int(time.time() * 1000)


def parse_history(raw: Optional[str]) -> list[HistoryEntry]:
    """Parse a persisted history value.

    Args:
        raw: Stored JSON string, or None if nothing is stored

    Returns:
        Entries in stored order; empty if the value is absent or corrupt
    """
    if raw is None:
        return []

    try:
        records = _records_adapter.validate_json(raw)
    except ValidationError as e:
        logger.warning(f"Discarding corrupt history ({e.error_count()} errors)")
        return []

    return [record.to_entry() for record in records]


class HistoryStore:
    """Newest-first visit log persisted to a key-value store."""

    def __init__(self, storage: KeyValueStore, key: str = HISTORY_KEY):
        """Initialize and hydrate from storage.

        Args:
            storage: Durable key-value store
            key: Storage key the history is kept under
        """
        self.storage = storage
        self.key = key
        self._entries: list[HistoryEntry] = self.load_all()

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        """Get all entries, newest first."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def load_all(self) -> list[HistoryEntry]:
        """Read the persisted history.

        Returns:
            Entries newest first; empty if nothing usable is stored
        """
        entries = parse_history(self.storage.get(self.key))
        self._entries = sorted(entries, key=lambda e: e.visited_at, reverse=True)
        return list(self._entries)

    def append(self, url: str, title: str) -> HistoryEntry:
        """Record a visit and persist immediately.

        Args:
            url: Visited URL
            title: Query text used for the visit

        Returns:
            The new entry
        """
        entry = HistoryEntry(
            id=uuid.uuid4().hex,
            url=url,
            title=title,
            visited_at=now_ms(),
        )
        self._entries.insert(0, entry)
        self._save()
        logger.debug(f"Recorded visit: {url}")
        return entry

    def clear(self) -> None:
        """Erase all history, in memory and in storage."""
        self._entries = []
        self.storage.remove(self.key)
        logger.debug("History cleared")

    def _save(self) -> None:
        data = [entry.to_dict() for entry in self._entries]
        self.storage.set(self.key, json.dumps(data))


def format_date(timestamp: int, now: Optional[int] = None) -> str:
    """Format a visit time relative to now.

    Buckets are floored and inclusive on their lower bound, so exactly
    60 minutes is "1 h ago" and exactly 24 hours is "1 d ago".

    Args:
        timestamp: Visit time in epoch milliseconds
        now: Reference time in epoch milliseconds (defaults to the clock)

    Returns:
        Relative label, or the locale's calendar date after a week
    """
    if now is None:
        now = now_ms()

    diff = now - timestamp
    minutes = diff // 60_000
    hours = diff // 3_600_000
    days = diff // 86_400_000

    if minutes < 1:
        return "just now"
    if minutes < 60:
        return f"{minutes} min ago"
    if hours < 24:
        return f"{hours} h ago"
    if days < 7:
        return f"{days} d ago"
    return datetime.fromtimestamp(timestamp / 1000).strftime("%x")
