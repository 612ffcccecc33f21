"""CLI entry point for the pg-browser command."""

import logging
from pathlib import Path

import click

from .. import __version__
from ..config import BrowserConfig, get_pgdata_info
from ..display import print_listing
from ..errors import PgBrowserError
from ..views import RootView, resolve
from .common import (
    console,
    make_console,
    pgdata_option,
    print_error,
    setup_logging,
    width_option,
)

logger = logging.getLogger(__name__)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="pg-browser")
@click.argument("tokens", nargs=-1, metavar="[PATH]...")
@pgdata_option()
@width_option()
@click.option(
    "--show-config",
    is_flag=True,
    help="Show which PGDATA directory would be browsed and why",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Log each directory read and navigation step to stderr",
)
def pg_browser_cli(
    tokens: tuple[str, ...],
    pgdata: Path | None,
    width: int | None,
    show_config: bool,
    debug: bool,
):
    """Browse a PostgreSQL data directory.

    Lists the known members of PGDATA and marks each one present, missing
    or unexpected. PATH descends into the tree one level per argument.

    \b
    Examples:
      pg-browser                         # PGDATA root
      pg-browser --pgdata /srv/pg/data   # explicit data directory
      pg-browser base                    # per-database directories
      pg-browser base 16384              # relation files of database 16384
    """
    setup_logging(debug)

    pgdata_path, source = get_pgdata_info(pgdata)

    if width is None:
        try:
            width = BrowserConfig.width()
        except ValueError as e:
            print_error(e)
            raise SystemExit(1)

    if show_config:
        console.print("[bold]Configuration[/bold]")
        console.print(f"  PGDATA: {pgdata_path}")
        console.print(f"  Source: {source}")
        console.print(f"  Width: {width if width is not None else 'terminal'}")
        return

    logger.debug(f"Browsing {pgdata_path} ({source}), path={list(tokens)}")
    try:
        view = resolve(RootView(pgdata_path), tokens)
        listing = view.render()
    except PgBrowserError as e:
        print_error(e)
        raise SystemExit(1)

    print_listing(listing, make_console(width))


if __name__ == "__main__":
    pg_browser_cli()
