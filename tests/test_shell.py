"""
Tests for the text-mode browser shell.
"""

import pytest
from rich.console import Console

from browser_sim.history_store import HistoryStore
from browser_sim.kv_store import MemoryStore
from browser_sim.logger import SessionLogger
from browser_sim.navigation import NavigationCoordinator
from browser_sim.shell import BrowserShell


@pytest.fixture
def shell():
    console = Console(record=True, width=120)
    session_logger = SessionLogger(write_events=False)
    session_logger.console = console
    coordinator = NavigationCoordinator(
        history=HistoryStore(MemoryStore()),
        session_logger=session_logger,
    )
    return BrowserShell(coordinator, console=console)


class TestShellCommands:
    """Tests for command handling."""

    def test_go_navigates(self, shell):
        assert shell.handle("go hello   world") is True

        state = shell.coordinator.state
        assert state.current_url == "https://www.google.com/search?q=hello%20%20%20world"
        assert "google.com" in shell.console.export_text()

    def test_go_without_text(self, shell):
        shell.handle("go")

        assert len(shell.coordinator.history) == 0
        assert "Usage" in shell.console.export_text()

    def test_new_switch_close(self, shell):
        shell.handle("go a.com")
        shell.handle("new")
        assert len(shell.coordinator.state.tabs) == 2

        shell.handle("switch 1")
        assert shell.coordinator.state.current_url == "https://a.com"

        shell.handle("close 1")
        state = shell.coordinator.state
        assert len(state.tabs) == 1
        assert state.current_destination is None

    def test_close_last_tab_warns(self, shell):
        shell.handle("close 1")

        assert len(shell.coordinator.state.tabs) == 1
        assert "cannot be closed" in shell.console.export_text()

    def test_open_history_entry(self, shell):
        shell.handle("go a.com")
        shell.handle("go b.com")
        shell.handle("open 2")

        assert shell.coordinator.state.current_url == "https://a.com"
        assert len(shell.coordinator.history) == 2

    def test_clear(self, shell):
        shell.handle("go a.com")
        shell.handle("clear")

        assert shell.coordinator.state.history == ()

    @pytest.mark.parametrize("line", ["switch", "switch x", "switch 9", "open 1"])
    def test_bad_numbers(self, shell, line):
        assert shell.handle(line) is True
        assert "Error" in shell.console.export_text()

    def test_unknown_command(self, shell):
        shell.handle("fly")

        assert "Unknown command" in shell.console.export_text()

    def test_blank_line(self, shell):
        assert shell.handle("   ") is True

    @pytest.mark.parametrize("line", ["quit", "exit", "QUIT"])
    def test_quit(self, shell, line):
        assert shell.handle(line) is False

    def test_run_stops_at_eof(self, shell, monkeypatch):
        lines = iter(["go a.com", "tabs"])

        def fake_input(prompt=""):
            try:
                return next(lines)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr(shell.console, "input", fake_input)

        assert shell.run() == 0
        assert shell.coordinator.state.current_url == "https://a.com"


class TestShellMarkupSafety:
    """Tests that typed text is shown literally, never parsed as markup."""

    def test_bracketed_query_in_prompt(self, shell, monkeypatch):
        lines = iter(["go [/x] tag", "tabs"])

        def fake_input(prompt=""):
            shell.console.print(prompt, end="")
            try:
                return next(lines)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr(shell.console, "input", fake_input)

        assert shell.run() == 0
        output = shell.console.export_text()
        assert "[1] [/x] tag" in output

    def test_bracketed_domain_in_history(self, shell):
        shell.handle("go a.b[/x]")
        shell.handle("history")

        output = shell.console.export_text()
        assert "https://a.b[/x]" in output

    def test_bracketed_unknown_command(self, shell):
        shell.handle("[/bold]")

        assert "Unknown command '[/bold]'" in shell.console.export_text()
