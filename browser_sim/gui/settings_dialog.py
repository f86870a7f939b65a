"""
Settings dialog for Browser Sim GUI.

Provides search engine and session logging settings.
"""

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout,
    QLabel, QComboBox, QCheckBox, QPushButton, QGroupBox, QMessageBox,
)

from ..search_engines import (
    SearchEngine,
    SEARCH_ENDPOINTS,
    SEARCH_ENGINE_DISPLAY_NAMES,
)
from ..settings_store import SettingsStore


class SettingsDialog(QDialog):
    """Settings dialog for configuring the browser."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.store = SettingsStore()
        self._setup_ui()
        self._load_settings()
        self._connect_signals()

    def _setup_ui(self):
        """Set up the dialog UI."""
        self.setWindowTitle("Settings")
        self.setMinimumWidth(440)
        self.setModal(True)

        layout = QVBoxLayout(self)
        layout.setSpacing(16)

        # Search settings group
        search_group = QGroupBox("Search")
        search_layout = QFormLayout(search_group)
        search_layout.setSpacing(12)

        self.engine_combo = QComboBox()
        for engine in SearchEngine:
            self.engine_combo.addItem(SEARCH_ENGINE_DISPLAY_NAMES[engine], engine.value)
        search_layout.addRow("Search engine:", self.engine_combo)

        self.endpoint_label = QLabel()
        self.endpoint_label.setStyleSheet("color: #888; font-size: 11px;")
        search_layout.addRow("", self.endpoint_label)

        layout.addWidget(search_group)

        # Session settings group
        session_group = QGroupBox("Session")
        session_layout = QVBoxLayout(session_group)

        self.log_sessions_check = QCheckBox("Write a navigation event log for each session")
        session_layout.addWidget(self.log_sessions_check)

        note = QLabel("Takes effect the next time the browser starts.")
        note.setStyleSheet("color: #888; font-size: 11px;")
        session_layout.addWidget(note)

        layout.addWidget(session_group)

        # Buttons
        button_layout = QHBoxLayout()

        self.reset_btn = QPushButton("Reset to Defaults")
        button_layout.addWidget(self.reset_btn)
        button_layout.addStretch()

        self.cancel_btn = QPushButton("Cancel")
        button_layout.addWidget(self.cancel_btn)

        self.save_btn = QPushButton("Save")
        self.save_btn.setDefault(True)
        button_layout.addWidget(self.save_btn)

        layout.addLayout(button_layout)

    def _load_settings(self):
        """Load current settings into the form."""
        settings = self.store.settings
        index = self.engine_combo.findData(settings.get_search_engine().value)
        self.engine_combo.setCurrentIndex(max(index, 0))
        self.log_sessions_check.setChecked(settings.log_sessions)
        self._update_endpoint_label()

    def _connect_signals(self):
        """Connect UI signals."""
        self.engine_combo.currentIndexChanged.connect(self._update_endpoint_label)
        self.reset_btn.clicked.connect(self._on_reset)
        self.cancel_btn.clicked.connect(self.reject)
        self.save_btn.clicked.connect(self._on_save)

    def _update_endpoint_label(self):
        engine = SearchEngine(self.engine_combo.currentData())
        self.endpoint_label.setText(f"Queries go to {SEARCH_ENDPOINTS[engine]}…")

    def _on_save(self):
        """Save settings and close."""
        self.store.update(
            search_engine=self.engine_combo.currentData(),
            log_sessions=self.log_sessions_check.isChecked(),
        )
        self.accept()

    def _on_reset(self):
        """Reset to default settings."""
        result = QMessageBox.question(
            self,
            "Reset Settings",
            "Are you sure you want to reset all settings to defaults?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
        )

        if result == QMessageBox.StandardButton.Yes:
            self.store.reset()
            self._load_settings()
