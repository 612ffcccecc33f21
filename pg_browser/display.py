"""Rendering of view listings to the terminal.

Nothing here takes part in classification; it only styles the items a view
produced and word-wraps descriptions to the console width.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .core.classify import (
    DatabaseDir,
    EntryError,
    FileNodeMapFile,
    ItemState,
    KnownEntry,
    PgVersionFile,
    UnknownEntry,
)
from .core.entries import EntryKind
from .core.names import ForkSegmentFile
from .views.view import Listing

# OIDs are at most 10 digits wide
OID_WIDTH = 10

UNRESOLVED_DB_NAME = "(unresolved)"
UNEXPECTED_DESCRIPTION = "Unexpected entry"


def format_header(listing: Listing) -> Text:
    """PGDATA path, dimmed, followed by the view's relative path."""
    header = Text(str(listing.pgdata), style="dim")
    if listing.title:
        header.append(f"/{listing.title}", style="yellow")
    return header


def format_item(item) -> tuple[Text, Text, Text]:
    """Return the (type, name, description) cells for any classified item."""
    if isinstance(item, KnownEntry):
        letter = item.entry.kind.letter
        if item.state is ItemState.PRESENT:
            return (
                Text(letter, style="green"),
                Text(item.entry.name, style="blue"),
                Text(item.description),
            )
        return (
            Text(letter, style="yellow"),
            Text(item.entry.name, style="dim"),
            Text(item.description, style="dim"),
        )

    if isinstance(item, UnknownEntry):
        return (
            Text(item.entry.kind.letter, style="magenta"),
            Text(item.entry.name, style="magenta"),
            Text(UNEXPECTED_DESCRIPTION, style="dim"),
        )

    if isinstance(item, DatabaseDir):
        # oid is an unsigned 32-bit integer, at most 10 characters
        name = item.dir_name.rjust(OID_WIDTH)
        if item.db_name is None:
            db_name = Text(UNRESOLVED_DB_NAME, style="dim")
        else:
            db_name = Text(item.db_name)
        return (Text(EntryKind.DIRECTORY.letter), Text(name, style="bright_blue"), db_name)

    if isinstance(item, ForkSegmentFile):
        return (
            Text(EntryKind.FILE.letter),
            Text(item.entry_name, style="bright_blue"),
            Text(f"{item.fork.label} fork, segment {item.segment}"),
        )

    if isinstance(item, (PgVersionFile, FileNodeMapFile)):
        return (Text(EntryKind.FILE.letter), Text(item.name, style="blue"), Text(item.description))

    if isinstance(item, EntryError):
        return (
            Text("E", style="red"),
            Text(item.name, style="red"),
            Text(item.message, style="red"),
        )

    raise TypeError(f"Cannot display {item!r}")


def build_table(items: list) -> Table:
    """Three-column grid; the description column wraps to the remaining width."""
    table = Table.grid(padding=(0, 1))
    table.add_column("Type", no_wrap=True)
    table.add_column("Name", no_wrap=True)
    table.add_column("Description", overflow="fold")
    for item in items:
        table.add_row(*format_item(item))
    return table


def print_listing(listing: Listing, console: Console) -> None:
    """Print a view listing: header, description and one row per item."""
    console.print(format_header(listing))
    if listing.description:
        console.print(listing.description, style="italic")

    if not listing.items:
        console.print("[yellow]Directory is empty.[/yellow]")
        return

    console.print(build_table(listing.items))
