"""
Tab collection for Browser Sim.

Keeps the ordered tab strip and guarantees that it is never empty and
that exactly one tab is active after every operation.
"""

import logging
import uuid
from typing import Iterator, Optional

from .errors import TabStateError
from .types import Tab


logger = logging.getLogger("browser_sim.tabs")


def new_tab_id() -> str:
    """Generate a unique tab identifier."""
    return uuid.uuid4().hex


class TabCollection:
    """Ordered set of tabs with a single active tab.

    Starts with one blank active tab. Tab records are owned here and only
    handed out as copies through `tabs` and `active_tab`.
    """

    def __init__(self):
        self._tabs: list[Tab] = [Tab(id=new_tab_id(), is_active=True)]

    def __len__(self) -> int:
        return len(self._tabs)

    def __iter__(self) -> Iterator[Tab]:
        return iter(self.tabs)

    @property
    def tabs(self) -> tuple[Tab, ...]:
        """Get a snapshot of all tabs in strip order."""
        return tuple(tab.copy() for tab in self._tabs)

    @property
    def active_tab(self) -> Tab:
        """Get a copy of the active tab."""
        return self._active().copy()

    @property
    def active_index(self) -> int:
        return self._tabs.index(self._active())

    def get(self, tab_id: str) -> Optional[Tab]:
        """Get a copy of a tab by id, or None if absent."""
        index = self.index_of(tab_id)
        if index is None:
            return None
        return self._tabs[index].copy()

    def index_of(self, tab_id: str) -> Optional[int]:
        """Get the strip position of a tab, or None if absent."""
        for index, tab in enumerate(self._tabs):
            if tab.id == tab_id:
                return index
        return None

    def add_tab(self) -> str:
        """Open a blank tab at the end of the strip and activate it.

        Returns:
            Id of the new tab
        """
        for tab in self._tabs:
            tab.is_active = False
        tab = Tab(id=new_tab_id(), is_active=True)
        self._tabs.append(tab)
        self.check_invariants()
        return tab.id

    def close_tab(self, tab_id: str) -> bool:
        """Close a tab.

        The last remaining tab is never closed. If the closed tab was
        active, the tab that slides into its position becomes active, or
        the new last tab if it was at the end.

        Args:
            tab_id: Tab to close

        Returns:
            True if a tab was removed
        """
        if len(self._tabs) == 1:
            return False

        index = self.index_of(tab_id)
        if index is None:
            logger.warning(f"Ignoring close of unknown tab {tab_id}")
            return False

        removed = self._tabs.pop(index)
        if removed.is_active:
            self._tabs[min(index, len(self._tabs) - 1)].is_active = True

        self.check_invariants()
        return True

    def switch_to(self, tab_id: str) -> bool:
        """Activate a tab and deactivate all others.

        Args:
            tab_id: Tab to activate

        Returns:
            True if the tab exists; False leaves activation unchanged
        """
        if self.index_of(tab_id) is None:
            logger.warning(f"Ignoring switch to unknown tab {tab_id}")
            return False

        for tab in self._tabs:
            tab.is_active = tab.id == tab_id

        self.check_invariants()
        return True

    def update_active_tab(self, url: str, title: str) -> None:
        """Overwrite the active tab's url and title in place."""
        tab = self._active()
        tab.url = url
        tab.title = title

    def check_invariants(self) -> None:
        """Verify the strip is non-empty with exactly one active tab.

        Raises:
            TabStateError: If the invariant does not hold
        """
        if not self._tabs:
            raise TabStateError("Tab collection is empty")

        active_count = sum(1 for tab in self._tabs if tab.is_active)
        if active_count != 1:
            raise TabStateError(f"Expected exactly one active tab, found {active_count}")

    def _active(self) -> Tab:
        for tab in self._tabs:
            if tab.is_active:
                return tab
        raise TabStateError("No active tab")
