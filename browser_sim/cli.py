"""
CLI for Browser Sim.

Provides the command-line interface using argparse.
"""

import argparse
import json
import sys
from typing import Optional

from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import BrowserConfig, DEFAULTS
from .errors import EmptyQueryError
from .logger import SessionLogger, configure_logging
from .search_engines import SearchEngine, get_search_endpoint, parse_search_engine
from .url_resolver import resolve


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="browser-sim",
        description="Browser Sim - a tabbed browser simulator with persistent history.",
        epilog="""
Examples:
  # Open the browser window
  browser-sim gui

  # Browse from the terminal
  browser-sim shell

  # See where an address bar entry would go
  browser-sim resolve "hello world" --engine duckduckgo

  # Show or clear the visit history
  browser-sim history
  browser-sim history --clear
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Browser Sim {__version__}",
    )

    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        default=False,
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    engines = [engine.value for engine in SearchEngine]

    # GUI command
    subparsers.add_parser(
        "gui",
        help="Launch the browser window",
    )

    # Shell command
    shell_parser = subparsers.add_parser(
        "shell",
        help="Browse from an interactive text shell",
    )

    shell_parser.add_argument(
        "--engine",
        choices=engines,
        default=None,
        help=f"Search engine for non-URL input (default: {DEFAULTS['search_engine']})",
    )

    shell_parser.add_argument(
        "--no-persist",
        action="store_true",
        default=False,
        help="Keep history in memory only for this session",
    )

    shell_parser.add_argument(
        "--no-session-log",
        action="store_true",
        default=False,
        help="Do not write a JSONL event log for this session",
    )

    # Resolve command
    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Print the URL an address bar entry resolves to",
    )

    resolve_parser.add_argument(
        "text",
        type=str,
        help="URL, domain, or search query",
    )

    resolve_parser.add_argument(
        "--engine",
        choices=engines,
        default=None,
        help=f"Search engine for non-URL input (default: {DEFAULTS['search_engine']})",
    )

    # History command
    history_parser = subparsers.add_parser(
        "history",
        help="Show or clear the visit history",
    )

    history_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output history as JSON",
    )

    history_parser.add_argument(
        "--clear",
        action="store_true",
        default=False,
        help="Clear the visit history",
    )

    return parser


def resolve_command(args: argparse.Namespace) -> int:
    """Execute the resolve command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    console = Console()
    config = BrowserConfig()
    engine = parse_search_engine(args.engine) if args.engine else config.search_engine

    try:
        destination = resolve(args.text, get_search_endpoint(engine))
    except EmptyQueryError:
        console.print("[bold red]Error: nothing to resolve[/bold red]")
        return 1

    print(destination.resolved_url)
    return 0


def history_command(args: argparse.Namespace) -> int:
    """Execute the history command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    from .history_store import HistoryStore
    from .session import create_storage

    console = Console()
    config = BrowserConfig(log_sessions=False)
    config.ensure_directories()
    history = HistoryStore(create_storage(config), key=config.history_key)

    if args.clear:
        count = len(history)
        history.clear()
        console.print(f"[green]✓ Cleared {count} history entries.[/green]")
        return 0

    if args.json:
        print(json.dumps([entry.to_dict() for entry in history.entries], indent=2))
        return 0

    SessionLogger(write_events=False).print_history(history.entries)
    return 0


def shell_command(args: argparse.Namespace) -> int:
    """Execute the shell command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    from .session import create_coordinator
    from .shell import BrowserShell

    config = BrowserConfig.from_cli_args(
        engine=args.engine,
        in_memory=args.no_persist,
        no_session_log=args.no_session_log,
        debug=args.debug,
    )
    coordinator = create_coordinator(config, enable_console=True)
    shell = BrowserShell(coordinator)

    return shell.run()


def gui_command() -> int:
    """Launch the GUI application.

    Returns:
        Exit code
    """
    from .gui import run_gui
    return run_gui()


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point.

    Args:
        argv: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(debug=args.debug or BrowserConfig(log_sessions=False).debug)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        if args.command == "gui":
            return gui_command()

        if args.command == "shell":
            return shell_command(args)

        if args.command == "resolve":
            return resolve_command(args)

        if args.command == "history":
            return history_command(args)
    except KeyboardInterrupt:
        Console().print("\n[yellow]Interrupted by user[/yellow]")
        return 130
    except OSError as e:
        Console().print(f"[bold red]Fatal error: {escape(str(e))}[/bold red]")
        return 1

    # Unknown command
    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
