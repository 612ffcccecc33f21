"""Shared CLI utilities: console output, logging setup and option decorators."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ..config import BrowserConfig

# Shared console instance for all CLI output
console = Console()


def make_console(width: int | None) -> Console:
    """Console for rendering listings, wrapped to width if given."""
    if width is None:
        return console
    return Console(width=width)


def setup_logging(debug: bool = False) -> None:
    """Send log records to stderr through rich.

    Level is DEBUG with --debug, otherwise PG_BROWSER_LOG_LEVEL (WARNING).
    """
    level = logging.DEBUG if debug else BrowserConfig.log_level()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def print_error(message: object) -> None:
    console.print(f"[red]Error: {escape(str(message))}[/red]")


# Common CLI option decorators
def pgdata_option():
    """Decorator for --pgdata option."""
    return click.option(
        "--pgdata",
        "pgdata",
        type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
        help="PostgreSQL data directory (or set PGDATA env var; default: current directory)",
    )


def width_option():
    """Decorator for --width option."""
    return click.option(
        "-w",
        "--width",
        type=click.IntRange(min=20),
        default=None,
        help="Render width in columns (or set PG_BROWSER_WIDTH; default: terminal width)",
    )
