"""
Main window for Browser Sim GUI.

Renders the navigation state (address bar, tab strip, history panel, and
web content) and turns widget signals into navigation intents.
"""

import sys
from typing import Optional

from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QLineEdit, QPushButton, QTabBar, QStackedWidget,
    QStatusBar, QMessageBox,
)
from PySide6.QtCore import Qt, QTimer, QUrl
from PySide6.QtGui import QColor, QPalette
from PySide6.QtWebEngineCore import QWebEngineSettings
from PySide6.QtWebEngineWidgets import QWebEngineView

from ..config import BrowserConfig
from ..navigation import (
    ClearHistory, CloseTab, NavigationCoordinator, NewTab,
    OpenHistory, Submit, SwitchTab,
)
from ..search_engines import SEARCH_ENGINE_DISPLAY_NAMES, get_search_endpoint
from ..session import create_coordinator
from ..settings_store import get_settings, update_settings
from ..types import HistoryEntry, NavigationState, Tab

from .history_panel import HistoryPanel
from .settings_dialog import SettingsDialog


# Dark theme colors
DARK_BG = "#1e1e1e"
DARK_SURFACE = "#252526"
DARK_SURFACE_LIGHT = "#2d2d30"
DARK_BORDER = "#3e3e42"
DARK_TEXT = "#cccccc"
DARK_TEXT_DIM = "#808080"
DARK_ACCENT = "#0e639c"
DARK_ACCENT_HOVER = "#1177bb"

# Relative times in the history panel are refreshed this often
HISTORY_REFRESH_MS = 60_000

# How long transient status messages stay visible
STATUS_TIMEOUT_MS = 3000


DARK_STYLESHEET = f"""
    QMainWindow {{
        background: {DARK_BG};
    }}
    QWidget {{
        background: {DARK_BG};
        color: {DARK_TEXT};
        font-family: 'Segoe UI', 'Ubuntu', sans-serif;
    }}
    QLabel {{
        background: transparent;
        color: {DARK_TEXT};
    }}
    QLineEdit {{
        background: {DARK_SURFACE};
        border: 2px solid {DARK_BORDER};
        border-radius: 18px;
        padding: 8px 16px;
        color: {DARK_TEXT};
        font-size: 14px;
    }}
    QLineEdit:focus {{
        border-color: {DARK_ACCENT};
    }}
    QPushButton {{
        background: {DARK_SURFACE_LIGHT};
        border: 1px solid {DARK_BORDER};
        border-radius: 4px;
        padding: 8px 16px;
        color: {DARK_TEXT};
    }}
    QPushButton:hover {{
        background: {DARK_BORDER};
    }}
    QPushButton:disabled {{
        background: {DARK_SURFACE};
        color: {DARK_TEXT_DIM};
    }}
    QTabBar::tab {{
        background: {DARK_SURFACE};
        color: {DARK_TEXT_DIM};
        padding: 6px 14px;
        margin-right: 2px;
        border-radius: 6px;
        max-width: 160px;
    }}
    QTabBar::tab:selected {{
        background: {DARK_SURFACE_LIGHT};
        color: {DARK_TEXT};
        border: 1px solid {DARK_ACCENT};
    }}
    QListWidget {{
        background: {DARK_SURFACE};
        border: none;
        color: {DARK_TEXT};
    }}
    QListWidget::item {{
        padding: 8px;
        border-bottom: 1px solid {DARK_BORDER};
    }}
    QListWidget::item:hover {{
        background: {DARK_SURFACE_LIGHT};
    }}
    QDockWidget::title {{
        background: {DARK_SURFACE_LIGHT};
        padding: 8px;
    }}
    QStatusBar {{
        background: {DARK_SURFACE_LIGHT};
        color: {DARK_TEXT_DIM};
    }}
    QGroupBox {{
        font-weight: bold;
        border: 1px solid {DARK_BORDER};
        border-radius: 4px;
        margin-top: 12px;
        padding-top: 12px;
        color: {DARK_TEXT};
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 10px;
        padding: 0 5px;
    }}
    QComboBox {{
        background: {DARK_SURFACE};
        border: 1px solid {DARK_BORDER};
        border-radius: 4px;
        padding: 6px;
        color: {DARK_TEXT};
    }}
    QComboBox QAbstractItemView {{
        background: {DARK_SURFACE};
        border: 1px solid {DARK_BORDER};
        color: {DARK_TEXT};
        selection-background-color: {DARK_ACCENT};
    }}
    QCheckBox {{
        color: {DARK_TEXT};
    }}
    QScrollBar:vertical {{
        background: {DARK_SURFACE};
        width: 12px;
        border-radius: 6px;
    }}
    QScrollBar::handle:vertical {{
        background: {DARK_BORDER};
        border-radius: 6px;
        min-height: 20px;
    }}
    QScrollBar::add-line:vertical, QScrollBar::sub-line:vertical {{
        height: 0px;
    }}
    QDialog {{
        background: {DARK_BG};
    }}
"""


WELCOME_HTML = f"""
<div style="text-align: center;">
  <p style="font-size: 64px;">🧭</p>
  <h1 style="font-size: 36px; color: #ffffff;">Browser Sim</h1>
  <p style="font-size: 16px; color: {DARK_TEXT_DIM};">
    Enter a site address or a search query above
  </p>
</div>
"""


class MainWindow(QMainWindow):
    """Main browser window with dark theme."""

    def __init__(self, coordinator: Optional[NavigationCoordinator] = None):
        super().__init__()

        if coordinator is None:
            settings = get_settings()
            config = BrowserConfig(
                search_engine=settings.get_search_engine(),
                log_sessions=settings.log_sessions,
            )
            coordinator = create_coordinator(config)
        self.coordinator = coordinator

        self._rendering = False
        self._rendered_tabs: tuple[Tab, ...] = ()
        self._loaded_url = ""

        self._setup_ui()
        self._connect_signals()
        self._update_status_bar()

        self._unsubscribe = self.coordinator.subscribe(self._render)
        self._render(self.coordinator.state)

    def _setup_ui(self):
        """Set up the main window UI."""
        self.setWindowTitle("Browser Sim")
        self.setMinimumSize(800, 560)

        # Load window size from settings
        settings = get_settings()
        self.resize(settings.window_width, settings.window_height)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setSpacing(6)
        layout.setContentsMargins(12, 12, 12, 12)

        # Toolbar with address bar
        toolbar = QHBoxLayout()

        self.history_btn = QPushButton("☰")
        self.history_btn.setToolTip("History")
        self.history_btn.setCheckable(True)
        toolbar.addWidget(self.history_btn)

        self.address_edit = QLineEdit()
        self.address_edit.setPlaceholderText("Search or enter address")
        self.address_edit.setClearButtonEnabled(True)
        toolbar.addWidget(self.address_edit, 1)

        self.new_tab_btn = QPushButton("+")
        self.new_tab_btn.setToolTip("New tab")
        self.new_tab_btn.setStyleSheet(f"""
            QPushButton {{
                background: {DARK_ACCENT};
                color: white;
                font-weight: bold;
                font-size: 16px;
                border-radius: 16px;
                border: none;
                padding: 6px 14px;
            }}
            QPushButton:hover {{
                background: {DARK_ACCENT_HOVER};
            }}
        """)
        toolbar.addWidget(self.new_tab_btn)

        self.settings_btn = QPushButton("⚙")
        self.settings_btn.setToolTip("Settings")
        toolbar.addWidget(self.settings_btn)

        layout.addLayout(toolbar)

        # Tab strip
        self.tab_bar = QTabBar()
        self.tab_bar.setExpanding(False)
        self.tab_bar.setElideMode(Qt.TextElideMode.ElideRight)
        self.tab_bar.setDocumentMode(True)
        layout.addWidget(self.tab_bar)

        # Content: welcome page for blank tabs, web view otherwise
        self.content_stack = QStackedWidget()

        self.welcome_label = QLabel(WELCOME_HTML)
        self.welcome_label.setTextFormat(Qt.TextFormat.RichText)
        self.welcome_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.content_stack.addWidget(self.welcome_label)

        self.web_view = QWebEngineView()
        self._configure_web_view()
        self.content_stack.addWidget(self.web_view)

        layout.addWidget(self.content_stack, 1)

        # History panel
        self.history_panel = HistoryPanel(self)
        self.addDockWidget(Qt.DockWidgetArea.LeftDockWidgetArea, self.history_panel)
        self.history_panel.setVisible(settings.history_panel_visible)
        self.history_btn.setChecked(settings.history_panel_visible)

        self._history_timer = QTimer(self)
        self._history_timer.setInterval(HISTORY_REFRESH_MS)

        # Status bar
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

        self.engine_label = QLabel()
        self.status_bar.addPermanentWidget(self.engine_label)

        self.tab_count_label = QLabel()
        self.status_bar.addPermanentWidget(self.tab_count_label)

    def _configure_web_view(self):
        """Allow scripts, popups, and forms in the content view."""
        web_settings = self.web_view.settings()
        web_settings.setAttribute(QWebEngineSettings.WebAttribute.JavascriptEnabled, True)
        web_settings.setAttribute(QWebEngineSettings.WebAttribute.JavascriptCanOpenWindows, True)
        web_settings.setAttribute(QWebEngineSettings.WebAttribute.LocalContentCanAccessFileUrls, False)

    def _connect_signals(self):
        """Connect UI signals."""
        self.address_edit.returnPressed.connect(self._on_submit)
        self.address_edit.textEdited.connect(self.coordinator.set_input_text)
        self.new_tab_btn.clicked.connect(self._on_new_tab)
        self.settings_btn.clicked.connect(self._on_settings)
        self.history_btn.toggled.connect(self.history_panel.setVisible)
        self.history_panel.visibilityChanged.connect(self.history_btn.setChecked)
        self.history_panel.entry_activated.connect(self._on_history_entry)
        self.history_panel.clear_requested.connect(self._on_clear_history)
        self.tab_bar.currentChanged.connect(self._on_tab_changed)
        self.tab_bar.tabCloseRequested.connect(self._on_tab_close)
        self._history_timer.timeout.connect(self.history_panel.refresh)
        self._history_timer.start()

    def _update_status_bar(self):
        """Update the status bar with current settings."""
        engine = get_settings().get_search_engine()
        self.engine_label.setText(f"Search: {SEARCH_ENGINE_DISPLAY_NAMES[engine]}")

    def _render(self, state: NavigationState):
        """Bring every widget in line with the navigation state."""
        self._rendering = True
        try:
            self._render_tabs(state)

            if self.address_edit.text() != state.pending_input_text:
                self.address_edit.setText(state.pending_input_text)

            self.history_panel.set_entries(state.history)
            self._render_content(state.current_url)
        finally:
            self._rendering = False

    def _render_tabs(self, state: NavigationState):
        if state.tabs != self._rendered_tabs:
            while self.tab_bar.count():
                self.tab_bar.removeTab(0)
            for tab in state.tabs:
                index = self.tab_bar.addTab(tab.display_title)
                self.tab_bar.setTabData(index, tab.id)
                self.tab_bar.setTabToolTip(index, tab.url or tab.display_title)
            self._rendered_tabs = state.tabs

        for index, tab in enumerate(state.tabs):
            if tab.id == state.active_tab_id:
                self.tab_bar.setCurrentIndex(index)
                break

        # The last tab cannot be closed, so hide its close button
        self.tab_bar.setTabsClosable(len(state.tabs) > 1)
        self.tab_count_label.setText(f"Tabs: {len(state.tabs)}")

    def _render_content(self, url: str):
        if not url:
            self._loaded_url = ""
            self.content_stack.setCurrentWidget(self.welcome_label)
            return

        if url != self._loaded_url:
            self._loaded_url = url
            self.web_view.load(QUrl(url))
        self.content_stack.setCurrentWidget(self.web_view)

    def _on_submit(self):
        """Navigate the active tab to the address bar text."""
        text = self.address_edit.text()
        if not text.strip():
            return
        self.coordinator.dispatch(Submit(text))
        self.status_bar.showMessage("Site loaded", STATUS_TIMEOUT_MS)

    def _on_new_tab(self):
        self.coordinator.dispatch(NewTab())
        self.address_edit.setFocus()

    def _on_tab_changed(self, index: int):
        if self._rendering or index < 0:
            return
        tab_id = self.tab_bar.tabData(index)
        if tab_id:
            self.coordinator.dispatch(SwitchTab(tab_id))

    def _on_tab_close(self, index: int):
        tab_id = self.tab_bar.tabData(index)
        if tab_id:
            self.coordinator.dispatch(CloseTab(tab_id))

    def _on_history_entry(self, entry: HistoryEntry):
        """Replay a history entry and close the panel."""
        self.coordinator.dispatch(OpenHistory(entry))
        self.history_panel.hide()

    def _on_clear_history(self):
        """Clear history after confirmation."""
        result = QMessageBox.question(
            self,
            "Clear History",
            "Remove all visited sites from history?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
        )
        if result != QMessageBox.StandardButton.Yes:
            return

        self.coordinator.dispatch(ClearHistory())
        self.history_panel.hide()
        self.status_bar.showMessage("History cleared", STATUS_TIMEOUT_MS)

    def _on_settings(self):
        """Open settings dialog."""
        dialog = SettingsDialog(self)
        if dialog.exec():
            engine = get_settings().get_search_engine()
            self.coordinator.search_endpoint = get_search_endpoint(engine)
            self._update_status_bar()

    def closeEvent(self, event):
        """Handle window close."""
        # Save window layout
        update_settings(
            window_width=self.width(),
            window_height=self.height(),
            history_panel_visible=self.history_panel.isVisible(),
        )

        self._history_timer.stop()
        self._unsubscribe()
        event.accept()


def run_gui():
    """Run the GUI application."""
    app = QApplication(sys.argv)
    app.setApplicationName("Browser Sim")
    app.setStyle("Fusion")

    # Apply dark theme
    app.setStyleSheet(DARK_STYLESHEET)

    # Set dark palette for native widgets
    palette = QPalette()
    palette.setColor(QPalette.ColorRole.Window, QColor(DARK_BG))
    palette.setColor(QPalette.ColorRole.WindowText, QColor(DARK_TEXT))
    palette.setColor(QPalette.ColorRole.Base, QColor(DARK_SURFACE))
    palette.setColor(QPalette.ColorRole.AlternateBase, QColor(DARK_SURFACE_LIGHT))
    palette.setColor(QPalette.ColorRole.Text, QColor(DARK_TEXT))
    palette.setColor(QPalette.ColorRole.Button, QColor(DARK_SURFACE_LIGHT))
    palette.setColor(QPalette.ColorRole.ButtonText, QColor(DARK_TEXT))
    palette.setColor(QPalette.ColorRole.Highlight, QColor(DARK_ACCENT))
    palette.setColor(QPalette.ColorRole.HighlightedText, QColor("#ffffff"))
    app.setPalette(palette)

    window = MainWindow()
    window.show()

    return app.exec()
