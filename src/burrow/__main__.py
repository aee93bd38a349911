"""Entry point for burrow."""

import argparse
import logging
import os
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .config import Config

# Exit code when the help text is shown instead of browsing
EXIT_USAGE = 1

KEYBINDINGS = [
    ("Arrows, hjkl", "Move cursor"),
    ("Shift+Arrows, g/G", "Jump to edge"),
    ("Enter", "Enter directory or edit file"),
    ("Backspace", "Exit directory"),
    ("/", "Fuzzy search"),
    ("Space", "Toggle preview"),
    ("Esc", "Exit with cd"),
    ("Ctrl+C", "Exit without cd"),
]


def print_usage(console: Console) -> None:
    """Print the usage line and keybinding table."""
    console.print()
    console.print(Text.assemble("  ", Text(" burrow ", style="#FFFFFF on #825DF2")))
    console.print()
    console.print(Text("  Usage: burrow [path]"))
    console.print()
    table = Table.grid(padding=(0, 2))
    table.add_column()
    table.add_column()
    for keys, action in KEYBINDINGS:
        table.add_row("    " + keys, action)
    console.print(table, highlight=False)
    console.print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="burrow", add_help=False)
    parser.add_argument("path", nargs="?", default=None)
    parser.add_argument("-h", "--help", action="store_true")
    return parser


def configure_logging(log_file: str) -> None:
    """Send logs to a file; the terminal belongs to the UI."""
    if not log_file:
        return
    logging.basicConfig(
        filename=str(Path(log_file).expanduser()),
        level=logging.DEBUG,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for burrow."""
    args = build_parser().parse_args(argv)
    if args.help:
        print_usage(Console(stderr=True))
        return EXIT_USAGE

    start_path = Path(os.path.abspath(args.path)) if args.path else Path.cwd()

    try:
        # Load configuration
        config = Config.load()
        configure_logging(config.log_file)

        # Imported late so --help stays fast
        from .app import run_app

        # Run the application
        code, path = run_app(config, start_path)
    except KeyboardInterrupt:
        return 2
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if code == 0 and path is not None:
        # For shell integration: cd "$(burrow)"
        print(path)
    return code


def run() -> None:
    """Console script wrapper."""
    sys.exit(main())


if __name__ == "__main__":
    run()
