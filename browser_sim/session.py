"""
Session assembly for Browser Sim.

Wires storage, history, tabs, and the coordinator together from a
BrowserConfig so the GUI and the shell start up the same way.
"""

import logging
from typing import Optional

from .config import BrowserConfig
from .history_store import HistoryStore
from .kv_store import JsonFileStore, KeyValueStore, MemoryStore
from .logger import SessionLogger
from .navigation import NavigationCoordinator
from .tabs import TabCollection


logger = logging.getLogger("browser_sim.session")


def create_storage(config: BrowserConfig) -> KeyValueStore:
    """Create the key-value store the history persists to."""
    if config.in_memory:
        return MemoryStore()
    return JsonFileStore(config.resolved_storage_path)


def create_coordinator(
    config: Optional[BrowserConfig] = None,
    enable_console: bool = False,
    storage: Optional[KeyValueStore] = None,
) -> NavigationCoordinator:
    """Build a coordinator with one blank tab and the persisted history.

    Args:
        config: Session configuration (environment defaults if omitted)
        enable_console: Whether the session logger prints to the console
        storage: Store to use instead of the configured one

    Returns:
        Ready-to-use NavigationCoordinator
    """
    config = config or BrowserConfig()
    config.ensure_directories()

    history = HistoryStore(storage or create_storage(config), key=config.history_key)
    session_logger = SessionLogger(
        enable_console=enable_console,
        write_events=config.log_sessions,
    )
    logger.debug(f"Session started with {len(history)} history entries")

    return NavigationCoordinator(
        tabs=TabCollection(),
        history=history,
        search_endpoint=config.search_endpoint,
        session_logger=session_logger,
    )
