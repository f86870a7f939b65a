"""
Navigation coordinator for Browser Sim.

Turns user intents into changes to the tab collection and the history
store, and publishes the derived navigation state to the presentation
layer after each one.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from .history_store import HistoryStore
from .kv_store import MemoryStore
from .logger import SessionLogger
from .search_engines import DEFAULT_SEARCH_ENDPOINT
from .tabs import TabCollection
from .types import Destination, HistoryEntry, NavigationState
from .url_resolver import resolve


logger = logging.getLogger("browser_sim.navigation")


@dataclass(frozen=True)
class Submit:
    """Address bar submission."""
    text: str


@dataclass(frozen=True)
class NewTab:
    """Open a blank tab."""


@dataclass(frozen=True)
class CloseTab:
    """Close a tab by id."""
    tab_id: str


@dataclass(frozen=True)
class SwitchTab:
    """Activate a tab by id."""
    tab_id: str


@dataclass(frozen=True)
class OpenHistory:
    """Replay a history entry in the active tab."""
    entry: HistoryEntry


@dataclass(frozen=True)
class ClearHistory:
    """Erase the visit history."""


NavigationEvent = Union[Submit, NewTab, CloseTab, SwitchTab, OpenHistory, ClearHistory]

StateListener = Callable[[NavigationState], None]


class NavigationCoordinator:
    """Keeps tabs, history, and the current destination consistent.

    Intents are handled one at a time, to completion. The coordinator owns
    no records itself; it caches only the derived NavigationState and
    notifies subscribers whenever that state changes.
    """

    def __init__(
        self,
        tabs: Optional[TabCollection] = None,
        history: Optional[HistoryStore] = None,
        search_endpoint: str = DEFAULT_SEARCH_ENDPOINT,
        session_logger: Optional[SessionLogger] = None,
    ):
        """Initialize the coordinator.

        Args:
            tabs: Tab collection (a fresh one with a blank tab by default)
            history: History store to record visits in
            search_endpoint: Search URL prefix for non-URL input
            session_logger: Optional event sink for the session log
        """
        self.tabs = tabs if tabs is not None else TabCollection()
        self.history = history if history is not None else HistoryStore(MemoryStore())
        self.search_endpoint = search_endpoint
        self.session_logger = session_logger
        self._listeners: list[StateListener] = []

        self._destination: Optional[Destination] = None
        self._input_text = ""
        self._sync_from_active_tab()
        self._state = self._build_state()

    @property
    def state(self) -> NavigationState:
        """Get the current derived navigation state."""
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a state listener.

        Args:
            listener: Called with the new NavigationState after each change

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, event: NavigationEvent) -> NavigationState:
        """Handle one user intent.

        Args:
            event: The intent to handle

        Returns:
            The navigation state after handling it

        Raises:
            TypeError: If the event type is not a navigation event
        """
        if isinstance(event, Submit):
            self.submit(event.text)
        elif isinstance(event, NewTab):
            self.new_tab()
        elif isinstance(event, CloseTab):
            self.close_tab(event.tab_id)
        elif isinstance(event, SwitchTab):
            self.switch_tab(event.tab_id)
        elif isinstance(event, OpenHistory):
            self.open_history(event.entry)
        elif isinstance(event, ClearHistory):
            self.clear_history()
        else:
            raise TypeError(f"Unknown navigation event: {event!r}")
        return self._state

    def submit(self, text: str) -> Optional[Destination]:
        """Navigate the active tab to whatever the user typed.

        Blank input is ignored. This is the only path that records history.

        Returns:
            The resolved destination, or None if the input was blank
        """
        if not text.strip():
            return None

        destination = resolve(text, self.search_endpoint)
        self.history.append(destination.resolved_url, destination.raw_query)
        self.tabs.update_active_tab(destination.resolved_url, destination.raw_query)
        self._destination = destination
        self._input_text = destination.raw_query

        self._log("submit", destination.to_dict())
        self._publish()
        return destination

    def new_tab(self) -> str:
        """Open and activate a blank tab.

        Returns:
            Id of the new tab
        """
        tab_id = self.tabs.add_tab()
        self._destination = None
        self._input_text = ""

        self._log("new_tab", {"tab_id": tab_id})
        self._publish()
        return tab_id

    def close_tab(self, tab_id: str) -> bool:
        """Close a tab and follow activation to its successor.

        Returns:
            True if the tab was closed
        """
        if not self.tabs.close_tab(tab_id):
            return False

        self._sync_from_active_tab()
        self._log("close_tab", {"tab_id": tab_id, "active_tab_id": self.tabs.active_tab.id})
        self._publish()
        return True

    def switch_tab(self, tab_id: str) -> bool:
        """Activate a tab and show its content.

        Returns:
            True if the tab exists
        """
        if not self.tabs.switch_to(tab_id):
            return False

        self._sync_from_active_tab()
        self._log("switch_tab", {"tab_id": tab_id})
        self._publish()
        return True

    def open_history(self, entry: HistoryEntry) -> Destination:
        """Replay a history entry in the active tab without recording a visit."""
        destination = Destination(raw_query=entry.title, resolved_url=entry.url)
        self.tabs.update_active_tab(entry.url, entry.title)
        self._destination = destination
        self._input_text = entry.title

        self._log("open_history", {"entry_id": entry.id, "url": entry.url})
        self._publish()
        return destination

    def clear_history(self) -> None:
        """Erase the visit history. Tabs keep their current pages."""
        self.history.clear()
        self._log("clear_history")
        self._publish()

    def set_input_text(self, text: str) -> None:
        """Track address bar edits without navigating."""
        if text == self._input_text:
            return
        self._input_text = text
        self._publish()

    def _sync_from_active_tab(self) -> None:
        tab = self.tabs.active_tab
        if tab.is_blank:
            self._destination = None
            self._input_text = ""
        else:
            self._destination = Destination(raw_query=tab.title, resolved_url=tab.url)
            self._input_text = tab.title

    def _build_state(self) -> NavigationState:
        return NavigationState(
            active_tab_id=self.tabs.active_tab.id,
            current_destination=self._destination,
            pending_input_text=self._input_text,
            tabs=self.tabs.tabs,
            history=self.history.entries,
        )

    def _publish(self) -> None:
        self._state = self._build_state()
        for listener in list(self._listeners):
            listener(self._state)

    def _log(self, event: str, data: Optional[dict] = None) -> None:
        logger.debug(f"{event}: {data or {}}")
        if self.session_logger:
            self.session_logger.log_event(event, data)
