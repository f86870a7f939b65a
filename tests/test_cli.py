"""
Tests for the command-line interface.
"""

import json
import logging

import pytest

from browser_sim import cli
from browser_sim.cli import create_parser, main
from browser_sim.config import BrowserConfig
from browser_sim.history_store import HistoryStore
from browser_sim.session import create_coordinator, create_storage


class TestParser:
    """Tests for argument parsing."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "browser-sim" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            create_parser().parse_args(["--version"])
        assert exc.value.code == 0
        assert "Browser Sim" in capsys.readouterr().out

    def test_rejects_unknown_engine(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["resolve", "x", "--engine", "altavista"])


class TestResolveCommand:
    """Tests for the resolve command."""

    def test_domain(self, capsys):
        assert main(["resolve", "example.com"]) == 0
        assert capsys.readouterr().out.strip() == "https://example.com"

    def test_search_with_engine(self, capsys):
        assert main(["resolve", "hello world", "--engine", "duckduckgo"]) == 0
        assert capsys.readouterr().out.strip() == "https://duckduckgo.com/?q=hello%20world"

    def test_blank(self):
        assert main(["resolve", "  "]) == 1


class TestHistoryCommand:
    """Tests for the history command."""

    def seed(self, *urls):
        history = HistoryStore(create_storage(BrowserConfig()))
        for url in urls:
            history.append(url, url)

    def test_json_output(self, capsys):
        self.seed("https://a.com", "https://b.com")

        assert main(["history", "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert [item["url"] for item in data] == ["https://b.com", "https://a.com"]
        assert set(data[0]) == {"id", "url", "title", "timestamp"}

    def test_clear(self):
        self.seed("https://a.com")

        assert main(["history", "--clear"]) == 0

        assert HistoryStore(create_storage(BrowserConfig())).entries == ()

    def test_table_output(self, capsys):
        self.seed("https://a.com")

        assert main(["history"]) == 0
        assert "https://a.com" in capsys.readouterr().out

    def test_table_output_with_brackets(self, capsys):
        self.seed("https://a.b[/x]")

        assert main(["history"]) == 0
        assert "https://a.b[/x]" in capsys.readouterr().out


class TestMain:
    """Tests for top-level error handling and logging setup."""

    @pytest.mark.parametrize("command", ["gui", "history"])
    def test_keyboard_interrupt_exits_130(self, monkeypatch, command):
        def interrupted(*args):
            raise KeyboardInterrupt

        monkeypatch.setattr(cli, f"{command}_command", interrupted)

        assert main([command]) == 130

    def test_os_error_exits_1(self, monkeypatch, capsys):
        def failing(args):
            raise OSError("disk [full]")

        monkeypatch.setattr(cli, "history_command", failing)

        assert main(["history"]) == 1
        assert "disk [full]" in capsys.readouterr().out

    def test_debug_from_environment(self, monkeypatch):
        monkeypatch.setenv("BROWSER_SIM_DEBUG", "1")
        package_logger = logging.getLogger("browser_sim")
        previous = package_logger.level
        try:
            assert main(["resolve", "a.com"]) == 0
            assert package_logger.level == logging.DEBUG
        finally:
            package_logger.setLevel(previous)

    def test_default_level_is_warning(self):
        package_logger = logging.getLogger("browser_sim")
        previous = package_logger.level
        try:
            assert main(["resolve", "a.com"]) == 0
            assert package_logger.level == logging.WARNING
        finally:
            package_logger.setLevel(previous)


class TestCreateCoordinator:
    """Tests for session assembly."""

    def test_persistent_session(self, isolated_home):
        nav = create_coordinator(BrowserConfig())
        nav.submit("a.com")

        reopened = create_coordinator(BrowserConfig())
        assert [e.url for e in reopened.state.history] == ["https://a.com"]
        assert (isolated_home / "storage.json").exists()
        assert list((isolated_home / "sessions").glob("*.jsonl"))

    def test_in_memory_session(self, isolated_home):
        nav = create_coordinator(BrowserConfig(in_memory=True, log_sessions=False))
        nav.submit("a.com")

        assert not (isolated_home / "storage.json").exists()
        assert create_coordinator(BrowserConfig(in_memory=True)).state.history == ()
