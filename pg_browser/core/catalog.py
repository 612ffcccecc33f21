"""Catalog of the entries PostgreSQL keeps at the top level of PGDATA.

Descriptions follow the "Database File Layout" chapter of the PostgreSQL
documentation. Membership and kinds are relied upon by the renderer and tests.
"""

from dataclasses import dataclass
from enum import Enum

from .entries import DirEntry


class KnownTag(Enum):
    PG_VERSION = "PG_VERSION"
    BASE = "base"
    CURRENT_LOGFILES = "current_logfiles"
    GLOBAL = "global"
    PG_COMMIT_TS = "pg_commit_ts"
    PG_DYNSHMEM = "pg_dynshmem"
    PG_HBA_CONF = "pg_hba.conf"
    PG_IDENT_CONF = "pg_ident.conf"
    PG_LOGICAL = "pg_logical"
    PG_MULTIXACT = "pg_multixact"
    PG_NOTIFY = "pg_notify"
    PG_REPLSLOT = "pg_replslot"
    PG_SERIAL = "pg_serial"
    PG_SNAPSHOTS = "pg_snapshots"
    PG_STAT = "pg_stat"
    PG_STAT_TMP = "pg_stat_tmp"
    PG_SUBTRANS = "pg_subtrans"
    PG_TBLSPC = "pg_tblspc"
    PG_TWOPHASE = "pg_twophase"
    PG_WAL = "pg_wal"
    PG_XACT = "pg_xact"
    POSTGRESQL_CONF = "postgresql.conf"
    POSTGRESQL_AUTO_CONF = "postgresql.auto.conf"
    POSTMASTER_OPTS = "postmaster.opts"
    POSTMASTER_PID = "postmaster.pid"


@dataclass(frozen=True)
class KnownItem:
    """A structurally expected PGDATA member."""

    entry: DirEntry
    description: str
    tag: KnownTag


# fmt: off
KNOWN_ITEMS: tuple[KnownItem, ...] = (
    KnownItem(DirEntry.file("PG_VERSION"), "Major version number of PostgreSQL", KnownTag.PG_VERSION),
    KnownItem(DirEntry.dir("base"), "Per-database directories", KnownTag.BASE),
    KnownItem(DirEntry.file("current_logfiles"), "File recording the log file(s) currently written to by the logging collector", KnownTag.CURRENT_LOGFILES),
    KnownItem(DirEntry.dir("global"), "Cluster-wide tables, such as pg_database", KnownTag.GLOBAL),
    KnownItem(DirEntry.dir("pg_commit_ts"), "Transaction commit timestamp data", KnownTag.PG_COMMIT_TS),
    KnownItem(DirEntry.dir("pg_dynshmem"), "Files used by the dynamic shared memory subsystem", KnownTag.PG_DYNSHMEM),
    KnownItem(DirEntry.file("pg_hba.conf"), "Client authentication configuration file", KnownTag.PG_HBA_CONF),
    KnownItem(DirEntry.file("pg_ident.conf"), "User name mappings for external authentication systems", KnownTag.PG_IDENT_CONF),
    KnownItem(DirEntry.dir("pg_logical"), "Status data for logical decoding", KnownTag.PG_LOGICAL),
    KnownItem(DirEntry.dir("pg_multixact"), "Multitransaction status data (used for shared row locks)", KnownTag.PG_MULTIXACT),
    KnownItem(DirEntry.dir("pg_notify"), "LISTEN/NOTIFY status data", KnownTag.PG_NOTIFY),
    KnownItem(DirEntry.dir("pg_replslot"), "Replication slot data", KnownTag.PG_REPLSLOT),
    KnownItem(DirEntry.dir("pg_serial"), "Information about committed serializable transactions", KnownTag.PG_SERIAL),
    KnownItem(DirEntry.dir("pg_snapshots"), "Exported snapshots", KnownTag.PG_SNAPSHOTS),
    KnownItem(DirEntry.dir("pg_stat"), "Permanent files for the statistics subsystem", KnownTag.PG_STAT),
    KnownItem(DirEntry.dir("pg_stat_tmp"), "Temporary files for the statistics subsystem", KnownTag.PG_STAT_TMP),
    KnownItem(DirEntry.dir("pg_subtrans"), "Subtransaction status data", KnownTag.PG_SUBTRANS),
    KnownItem(DirEntry.dir("pg_tblspc"), "Symbolic links to tablespaces", KnownTag.PG_TBLSPC),
    KnownItem(DirEntry.dir("pg_twophase"), "State files for prepared transactions", KnownTag.PG_TWOPHASE),
    KnownItem(DirEntry.dir("pg_wal"), "WAL (Write Ahead Log) files", KnownTag.PG_WAL),
    KnownItem(DirEntry.dir("pg_xact"), "Transaction commit status data", KnownTag.PG_XACT),
    KnownItem(DirEntry.file("postgresql.conf"), "Configuration parameters set manually by the system administrator", KnownTag.POSTGRESQL_CONF),
    KnownItem(DirEntry.file("postgresql.auto.conf"), "Configuration parameters set by ALTER SYSTEM", KnownTag.POSTGRESQL_AUTO_CONF),
    KnownItem(DirEntry.file("postmaster.opts"), "Command-line options the server was last started with", KnownTag.POSTMASTER_OPTS),
    KnownItem(DirEntry.file("postmaster.pid"), "Lock file recording the current postmaster process ID (PID) and other running server data", KnownTag.POSTMASTER_PID),
)
# fmt: on


def find_by_name(name: str) -> KnownItem | None:
    """Return the catalog item with the given name, regardless of kind."""
    for item in KNOWN_ITEMS:
        if item.entry.name == name:
            return item
    return None


def find_by_tag(tag: KnownTag) -> KnownItem:
    for item in KNOWN_ITEMS:
        if item.tag is tag:
            return item
    raise KeyError(tag)
