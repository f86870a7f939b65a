"""
History side panel for Browser Sim GUI.

Lists visits newest first with relative times, and offers clearing.
"""

from typing import Iterable

from PySide6.QtWidgets import (
    QDockWidget, QWidget, QVBoxLayout, QLabel,
    QListWidget, QListWidgetItem, QPushButton,
)
from PySide6.QtCore import Qt, Signal

from ..history_store import format_date
from ..types import HistoryEntry


class HistoryPanel(QDockWidget):
    """Dockable history list."""

    entry_activated = Signal(object)
    clear_requested = Signal()

    def __init__(self, parent=None):
        super().__init__("History", parent)
        self._entries: list[HistoryEntry] = []
        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        """Set up the panel UI."""
        self.setObjectName("historyPanel")
        self.setAllowedAreas(Qt.DockWidgetArea.LeftDockWidgetArea | Qt.DockWidgetArea.RightDockWidgetArea)
        self.setMinimumWidth(300)

        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        self.empty_label = QLabel("🕘\n\nHistory is empty")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_label.setStyleSheet("color: #808080; padding: 40px;")
        layout.addWidget(self.empty_label)

        self.list_widget = QListWidget()
        self.list_widget.setWordWrap(True)
        layout.addWidget(self.list_widget, 1)

        self.clear_btn = QPushButton("🗑 Clear history")
        layout.addWidget(self.clear_btn)

        self.setWidget(container)

    def _connect_signals(self):
        """Connect UI signals."""
        self.list_widget.itemActivated.connect(self._on_item_activated)
        self.list_widget.itemClicked.connect(self._on_item_activated)
        self.clear_btn.clicked.connect(self.clear_requested.emit)

    def set_entries(self, entries: Iterable[HistoryEntry]):
        """Replace the listed entries."""
        entries = list(entries)
        if entries == self._entries:
            return
        self._entries = entries
        self.refresh()

    def refresh(self):
        """Rebuild the list so relative times stay current."""
        self.list_widget.clear()
        for entry in self._entries:
            item = QListWidgetItem(
                f"{entry.title}\n{entry.url}\n{format_date(entry.visited_at)}"
            )
            item.setToolTip(entry.url)
            item.setData(Qt.ItemDataRole.UserRole, entry)
            self.list_widget.addItem(item)

        has_entries = bool(self._entries)
        self.empty_label.setVisible(not has_entries)
        self.list_widget.setVisible(has_entries)
        self.clear_btn.setEnabled(has_entries)

    def _on_item_activated(self, item: QListWidgetItem):
        entry = item.data(Qt.ItemDataRole.UserRole)
        if entry is not None:
            self.entry_activated.emit(entry)
