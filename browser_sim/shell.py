"""
Text-mode browser shell for Browser Sim.

A line-oriented presentation layer: each command becomes one navigation
intent, and the resulting state is rendered with rich.
"""

from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape

from .navigation import (
    ClearHistory,
    CloseTab,
    NavigationCoordinator,
    NewTab,
    OpenHistory,
    Submit,
    SwitchTab,
)


HELP_TEXT = """\
[bold]go TEXT[/bold]      open a URL, domain, or search in the active tab
[bold]new[/bold]          open a blank tab
[bold]close N[/bold]      close tab number N
[bold]switch N[/bold]     activate tab number N
[bold]tabs[/bold]         list tabs
[bold]history[/bold]      list visit history
[bold]open N[/bold]       reopen history entry number N
[bold]clear[/bold]        clear visit history
[bold]help[/bold]         show this help
[bold]quit[/bold]         leave the shell"""


class BrowserShell:
    """Interactive shell driving a NavigationCoordinator."""

    def __init__(self, coordinator: NavigationCoordinator, console: Optional[Console] = None):
        self.coordinator = coordinator
        self.console = console or Console()
        self._commands: dict[str, Callable[[list[str]], None]] = {
            "go": self._go,
            "new": self._new,
            "close": self._close,
            "switch": self._switch,
            "tabs": self._tabs,
            "history": self._history,
            "open": self._open,
            "clear": self._clear,
            "help": self._help,
        }

    @property
    def session_logger(self):
        return self.coordinator.session_logger

    def handle(self, line: str) -> bool:
        """Run one command line.

        Args:
            line: Raw command text

        Returns:
            False when the shell should exit
        """
        parts = line.strip().split(None, 1)
        if not parts:
            return True

        command = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""
        if command in ("quit", "exit"):
            return False

        handler = self._commands.get(command)
        if handler is None:
            self._error(f"Unknown command '{command}'. Type 'help' for commands.")
            return True

        # "go" takes the rest of the line verbatim so queries keep their spacing
        handler([rest] if command == "go" else rest.split())
        return True

    def run(self) -> int:
        """Read and run commands until quit or end of input.

        Returns:
            Exit code
        """
        if self.session_logger:
            self.session_logger.print_header()

        while True:
            prompt = self._prompt()
            try:
                line = self.console.input(prompt)
            except EOFError:
                self.console.print()
                return 0
            if not self.handle(line):
                return 0

    def _prompt(self) -> str:
        tab = self.coordinator.tabs.active_tab
        index = self.coordinator.tabs.active_index + 1
        return f"[bold cyan]\\[{index}] {escape(tab.display_title)}[/bold cyan] > "

    def _go(self, args: list[str]) -> None:
        text = " ".join(args)
        if not text.strip():
            self._error("Usage: go TEXT")
            return
        state = self.coordinator.dispatch(Submit(text))
        self._show_destination(state.current_destination)

    def _new(self, args: list[str]) -> None:
        self.coordinator.dispatch(NewTab())
        self._show_tabs()

    def _close(self, args: list[str]) -> None:
        tab = self._tab_at(args)
        if tab is None:
            return
        if len(self.coordinator.tabs) == 1:
            self._message("The last tab cannot be closed.", "warning")
            return
        state = self.coordinator.dispatch(CloseTab(tab.id))
        self._show_tabs()
        self._show_destination(state.current_destination)

    def _switch(self, args: list[str]) -> None:
        tab = self._tab_at(args)
        if tab is None:
            return
        state = self.coordinator.dispatch(SwitchTab(tab.id))
        self._show_destination(state.current_destination)

    def _tabs(self, args: list[str]) -> None:
        self._show_tabs()

    def _history(self, args: list[str]) -> None:
        if self.session_logger:
            self.session_logger.print_history(self.coordinator.state.history)

    def _open(self, args: list[str]) -> None:
        entries = self.coordinator.state.history
        number = self._parse_number(args, len(entries), "history entry")
        if number is None:
            return
        state = self.coordinator.dispatch(OpenHistory(entries[number - 1]))
        self._show_destination(state.current_destination)

    def _clear(self, args: list[str]) -> None:
        self.coordinator.dispatch(ClearHistory())
        self._message("History cleared", "success")

    def _help(self, args: list[str]) -> None:
        self.console.print(HELP_TEXT)

    def _tab_at(self, args: list[str]):
        tabs = self.coordinator.state.tabs
        number = self._parse_number(args, len(tabs), "tab")
        if number is None:
            return None
        return tabs[number - 1]

    def _parse_number(self, args: list[str], count: int, kind: str) -> Optional[int]:
        if len(args) != 1 or not args[0].isdigit():
            self._error(f"Expected a {kind} number")
            return None
        number = int(args[0])
        if not 1 <= number <= count:
            self._error(f"No {kind} {number}")
            return None
        return number

    def _show_tabs(self) -> None:
        if self.session_logger:
            self.session_logger.print_tabs(self.coordinator.state.tabs)

    def _show_destination(self, destination) -> None:
        if self.session_logger:
            self.session_logger.print_destination(destination)

    def _message(self, message: str, level: str) -> None:
        if self.session_logger:
            self.session_logger.print_message(message, level)

    def _error(self, message: str) -> None:
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}")
