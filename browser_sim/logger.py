"""
Logging for Browser Sim.

Handles logging setup, JSONL session event logs, and rich console output.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import get_sessions_dir
from .history_store import format_date
from .types import Destination, HistoryEntry, Tab


def configure_logging(debug: bool = False) -> None:
    """Route browser_sim loggers through a rich handler.

    Args:
        debug: Show DEBUG records instead of WARNING and above
    """
    root = logging.getLogger("browser_sim")
    root.setLevel(logging.DEBUG if debug else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(RichHandler(show_path=debug, rich_tracebacks=True))


class SessionLogger:
    """Records navigation events for one browsing session."""

    def __init__(
        self,
        enable_console: bool = True,
        log_dir: Optional[Path] = None,
        write_events: bool = True,
    ):
        """Initialize the session logger.

        Args:
            enable_console: Whether to print to console
            log_dir: Directory for the event log (defaults to the sessions dir)
            write_events: Whether to write the JSONL event log at all
        """
        self.console = Console() if enable_console else None
        self.event_count = 0
        self.events_file: Optional[Path] = None

        if write_events:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
            directory = log_dir or get_sessions_dir()
            directory.mkdir(parents=True, exist_ok=True)
            self.events_file = directory / f"{timestamp}.jsonl"
            self.events_file.touch()

    def log_event(self, event: str, data: Optional[dict[str, Any]] = None) -> None:
        """Append one navigation event to the JSONL file.

        Args:
            event: Event name, e.g. "submit" or "close_tab"
            data: Event details
        """
        self.event_count += 1
        if self.events_file is None:
            return

        record = {
            "seq": self.event_count,
            "timestamp": datetime.now().isoformat(),
            "event": event,
            "data": data or {},
        }
        with open(self.events_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(record) + "\n")

    def print_header(self) -> None:
        """Print the session banner to console."""
        if not self.console:
            return

        self.console.print()
        self.console.print(Panel(
            "Type [bold]go[/bold] followed by a URL or search, or [bold]help[/bold] for commands.",
            title="🧭 Browser Sim",
            border_style="cyan",
        ))
        self.console.print()

    def print_destination(self, destination: Optional[Destination]) -> None:
        """Print what the content viewer would load."""
        if not self.console:
            return

        if destination is None:
            self.console.print("  [dim]Blank tab[/dim]")
            return

        line = Text()
        line.append("  → ", style="bold cyan")
        line.append(destination.resolved_url, style="underline")
        self.console.print(line)

    def print_tabs(self, tabs: Iterable[Tab]) -> None:
        """Print the tab strip as a table."""
        if not self.console:
            return

        table = Table(title="Tabs")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Title")
        table.add_column("URL", style="dim")

        for number, tab in enumerate(tabs, start=1):
            marker = "▶ " if tab.is_active else "  "
            style = "bold cyan" if tab.is_active else ""
            table.add_row(str(number), Text(marker + tab.display_title, style=style), Text(tab.url))

        self.console.print(table)

    def print_history(self, entries: Iterable[HistoryEntry], now: Optional[int] = None) -> None:
        """Print the visit history as a table, newest first."""
        if not self.console:
            return

        entries = list(entries)
        if not entries:
            self.console.print("[dim]History is empty.[/dim]")
            return

        table = Table(title="History")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Title", style="cyan")
        table.add_column("URL")
        table.add_column("Visited", style="dim")

        for number, entry in enumerate(entries, start=1):
            table.add_row(
                str(number),
                Text(entry.title),
                Text(entry.url),
                format_date(entry.visited_at, now),
            )

        self.console.print(table)

    def print_message(self, message: str, level: str = "info") -> None:
        """Print a status line with color coding."""
        if not self.console:
            return

        colors = {"info": "white", "success": "green", "warning": "yellow", "error": "red"}
        color = colors.get(level, "white")
        self.console.print(f"  [{color}]{message}[/{color}]")
