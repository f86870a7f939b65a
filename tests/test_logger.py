"""
Tests for session logging.
"""

import json
import logging

from rich.console import Console
from rich.logging import RichHandler

from browser_sim.logger import SessionLogger, configure_logging
from browser_sim.types import Destination, HistoryEntry, Tab


class TestSessionLoggerEvents:
    """Tests for the JSONL event log."""

    def test_writes_one_line_per_event(self, tmp_path):
        logger = SessionLogger(enable_console=False, log_dir=tmp_path)

        logger.log_event("submit", {"resolved_url": "https://a.com"})
        logger.log_event("new_tab")

        lines = logger.events_file.read_text().splitlines()
        records = [json.loads(line) for line in lines]
        assert [r["event"] for r in records] == ["submit", "new_tab"]
        assert [r["seq"] for r in records] == [1, 2]
        assert records[0]["data"] == {"resolved_url": "https://a.com"}
        assert records[1]["data"] == {}

    def test_default_dir_is_sessions(self, isolated_home):
        logger = SessionLogger(enable_console=False)

        assert logger.events_file.parent == isolated_home / "sessions"

    def test_events_disabled(self, isolated_home):
        logger = SessionLogger(enable_console=False, write_events=False)
        logger.log_event("submit")

        assert logger.events_file is None
        assert logger.event_count == 1
        assert not (isolated_home / "sessions").exists()


class TestSessionLoggerConsole:
    """Tests for rich console rendering."""

    def make_logger(self):
        logger = SessionLogger(write_events=False)
        logger.console = Console(record=True, width=120)
        return logger

    def test_print_tabs(self):
        logger = self.make_logger()
        logger.print_tabs([
            Tab(id="1", url="https://a.com", title="a.com", is_active=True),
            Tab(id="2"),
        ])

        output = logger.console.export_text()
        assert "a.com" in output
        assert "New Tab" in output

    def test_print_history(self):
        logger = self.make_logger()
        entry = HistoryEntry(id="1", url="https://a.com", title="a.com", visited_at=0)
        logger.print_history([entry], now=30_000)

        output = logger.console.export_text()
        assert "https://a.com" in output
        assert "just now" in output

    def test_print_history_with_brackets(self):
        logger = self.make_logger()
        entry = HistoryEntry(
            id="1",
            url="https://a.b[/x]",
            title="[/x] tag",
            visited_at=0,
        )
        logger.print_history([entry], now=30_000)

        output = logger.console.export_text()
        assert "[/x] tag" in output
        assert "https://a.b[/x]" in output

    def test_print_tabs_with_brackets(self):
        logger = self.make_logger()
        logger.print_tabs([
            Tab(id="1", url="https://a.b[/x]", title="[bold]x", is_active=True),
        ])

        output = logger.console.export_text()
        assert "[bold]x" in output
        assert "https://a.b[/x]" in output

    def test_print_empty_history(self):
        logger = self.make_logger()
        logger.print_history([])

        assert "History is empty" in logger.console.export_text()

    def test_print_destination(self):
        logger = self.make_logger()
        logger.print_destination(Destination("a.com", "https://a.com"))
        logger.print_destination(None)

        output = logger.console.export_text()
        assert "https://a.com" in output
        assert "Blank tab" in output

    def test_console_disabled_is_silent(self):
        logger = SessionLogger(enable_console=False, write_events=False)

        logger.print_tabs([Tab(id="1", is_active=True)])
        logger.print_history([])
        logger.print_message("hi")


class TestConfigureLogging:
    """Tests for logging setup."""

    def test_installs_single_handler(self):
        root = logging.getLogger("browser_sim")
        original = list(root.handlers)
        try:
            configure_logging(debug=True)
            configure_logging(debug=False)

            handlers = [h for h in root.handlers if isinstance(h, RichHandler)]
            assert len(handlers) == 1
            assert root.level == logging.WARNING
        finally:
            root.handlers = original
