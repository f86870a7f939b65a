"""
Type definitions for Browser Sim.

Provides typed dataclasses for the navigation state shared between the
core modules and the presentation layers. These types are the contract
the GUI and the text shell render from.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Optional


# Label shown for a tab that has not navigated anywhere yet
BLANK_TAB_TITLE = "New Tab"


@dataclass(frozen=True)
class Destination:
    """Resolved navigation target.

    Attributes:
        raw_query: What the user typed (stripped)
        resolved_url: Absolute http(s) URL to load
    """
    raw_query: str
    resolved_url: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {
            "raw_query": self.raw_query,
            "resolved_url": self.resolved_url,
        }


@dataclass(frozen=True)
class HistoryEntry:
    """A single recorded visit.

    Attributes:
        id: Unique identifier
        url: Visited URL
        title: Query text the visit was made with
        visited_at: Visit time in epoch milliseconds
    """
    id: str
    url: str
    title: str
    visited_at: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to the persisted record format."""
        return {
            "id": self.id,
            "url": self.url,
            "title": self.title,
            "timestamp": self.visited_at,
        }


@dataclass
class Tab:
    """A navigable slot in the tab strip.

    Attributes:
        id: Unique identifier
        url: Current URL, empty for a blank tab
        title: Title of the current page, empty for a blank tab
        is_active: Whether this tab's content is displayed
    """
    id: str
    url: str = ""
    title: str = ""
    is_active: bool = False

    @property
    def is_blank(self) -> bool:
        return not self.url

    @property
    def display_title(self) -> str:
        """Title for the tab strip, with a placeholder for blank tabs."""
        return self.title or BLANK_TAB_TITLE

    def copy(self) -> "Tab":
        return replace(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "url": self.url,
            "title": self.title,
            "is_active": self.is_active,
        }


@dataclass(frozen=True)
class NavigationState:
    """Derived state published to the presentation layer.

    Recomputed after every mutation; `tabs` holds copies so subscribers
    cannot change the collection behind the coordinator's back.

    Attributes:
        active_tab_id: Id of the single active tab
        current_destination: What the content viewer should show, if anything
        pending_input_text: Text for the address bar
        tabs: Snapshot of the tab strip, in order
        history: Snapshot of the visit history, newest first
    """
    active_tab_id: str
    current_destination: Optional[Destination] = None
    pending_input_text: str = ""
    tabs: tuple[Tab, ...] = field(default_factory=tuple)
    history: tuple[HistoryEntry, ...] = field(default_factory=tuple)

    @property
    def current_url(self) -> str:
        """URL to load, or an empty string for a blank tab."""
        if self.current_destination is None:
            return ""
        return self.current_destination.resolved_url
