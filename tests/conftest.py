"""Shared fixtures: synthetic PGDATA trees."""

import pytest

from pg_browser.core.catalog import KNOWN_ITEMS
from pg_browser.core.entries import EntryKind

from stubs import touch

# Not created by initdb; only present while the server runs / logs
NOT_CREATED_BY_INITDB = ("current_logfiles", "postmaster.pid")


@pytest.fixture
def empty_pgdata(tmp_path):
    """An empty directory standing in for PGDATA."""
    pgdata = tmp_path / "pgdata"
    pgdata.mkdir()
    return pgdata


@pytest.fixture
def pgdata(empty_pgdata):
    """A PGDATA tree laid out the way initdb leaves it.

    Creates:
        every catalog member except current_logfiles and postmaster.pid
        base/1, base/4, base/5, base/16384 database directories
        base/16384 with PG_VERSION, pg_filenode.map and a few relation files
    """
    for known in KNOWN_ITEMS:
        if known.entry.name in NOT_CREATED_BY_INITDB:
            continue
        path = empty_pgdata / known.entry.name
        if known.entry.kind is EntryKind.DIRECTORY:
            path.mkdir()
        else:
            touch(path)

    base = empty_pgdata / "base"
    for oid in ("1", "4", "5", "16384"):
        (base / oid).mkdir()

    db_dir = base / "16384"
    for name in (
        "PG_VERSION",
        "pg_filenode.map",
        "1259",
        "1259_fsm",
        "1259_vm",
        "16385",
        "16385.1",
        "16385.2",
    ):
        touch(db_dir / name)

    return empty_pgdata
