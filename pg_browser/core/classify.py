"""Classification of directory listings at each PGDATA level.

Three levels are understood:

    <pgdata>/                  classify_root()   catalog reconciliation
    <pgdata>/base/             classify_base()   one directory per database
    <pgdata>/base/<oid>/       classify_db_dir() relation fork segment files

Per-entry failures at every level are returned as EntryError items so that one
unreadable entry never hides its siblings.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Union

from ..errors import EntryTypeError
from .catalog import KnownItem, KnownTag
from .entries import DirEntry, EntryKind, RawEntry
from .names import (
    FILENODE_MAP_FILE,
    PG_VERSION_FILE,
    ForkSegmentFile,
    PgOid,
    is_filenode_map_file,
    is_pg_version_file,
    parse_fork_segment,
)

logger = logging.getLogger(__name__)


class ItemState(Enum):
    PRESENT = "present"
    MISSING = "missing"


@dataclass(frozen=True)
class KnownEntry:
    """A catalog member, with whether it was found on disk."""

    entry: DirEntry
    tag: KnownTag
    state: ItemState
    description: str = field(default="", compare=False)


@dataclass(frozen=True)
class UnknownEntry:
    """An entry that no rule at its level recognizes."""

    entry: DirEntry


@dataclass(frozen=True)
class EntryError:
    """An entry whose type could not be determined."""

    name: str
    cause: Exception = field(compare=False)

    @property
    def message(self) -> str:
        return str(self.cause)


@dataclass(frozen=True)
class DatabaseDir:
    """A ``base/<oid>`` directory.

    db_name is None until resolved from the system catalog, which is not
    implemented; it is never guessed.
    """

    oid: PgOid
    db_name: str | None = None

    @property
    def dir_name(self) -> str:
        return str(self.oid)


@dataclass(frozen=True)
class FileNodeMapFile:
    name = FILENODE_MAP_FILE
    description = "Mapping of mapped catalogs to their relation file nodes"


@dataclass(frozen=True)
class PgVersionFile:
    name = PG_VERSION_FILE
    description = "Major version number of PostgreSQL"


ClassifiedItem = Union[KnownEntry, UnknownEntry]
RootDirItem = Union[KnownEntry, UnknownEntry, EntryError]
BaseDirItem = Union[DatabaseDir, UnknownEntry, EntryError]
DbDirItem = Union[ForkSegmentFile, FileNodeMapFile, PgVersionFile, UnknownEntry, EntryError]


# ============================================================================
# Root level
# ============================================================================


def classify(catalog: Iterable[KnownItem], actual: Iterable[DirEntry]) -> list[ClassifiedItem]:
    """Reconcile the catalog against an actual root listing.

    Every catalog item and every actual entry appears exactly once in the
    result. A catalog item matches an actual entry only if both name and kind
    agree (a file named ``base`` does not satisfy the ``base`` directory).

    Args:
        catalog: Expected items
        actual: Entries found on disk, in any order

    Returns:
        Items sorted by (name, kind)
    """
    working: dict[DirEntry, ClassifiedItem] = {}
    for known in catalog:
        working[known.entry] = KnownEntry(
            known.entry, known.tag, ItemState.MISSING, known.description
        )

    for entry in actual:
        item = working.pop(entry, None)
        if isinstance(item, KnownEntry):
            working[entry] = KnownEntry(entry, item.tag, ItemState.PRESENT, item.description)
        elif item is None:
            working[entry] = UnknownEntry(entry)
        else:
            # Same entry listed twice; keep the first classification
            working[entry] = item

    return sorted(working.values(), key=lambda item: item.entry.sort_key())


def classify_root(catalog: Iterable[KnownItem], raw_entries: Iterable[RawEntry]) -> list[RootDirItem]:
    """Reconcile the catalog against a root listing whose types are unresolved.

    Entries whose type cannot be determined become EntryError items after the
    classified ones. They never mark a catalog item present, so a dangling
    ``pg_wal`` symlink shows both the missing ``pg_wal`` directory and the
    error.
    """
    actual: list[DirEntry] = []
    errors: list[EntryError] = []
    for raw_entry in raw_entries:
        try:
            actual.append(raw_entry.to_dir_entry())
        except EntryTypeError as e:
            logger.warning(f"Cannot classify {raw_entry.name}: {e}")
            errors.append(EntryError(raw_entry.name, e))

    errors.sort(key=lambda error: error.name)
    return [*classify(catalog, actual), *errors]


# ============================================================================
# base/ level
# ============================================================================


def classify_base_entry(raw_entry: RawEntry) -> BaseDirItem:
    try:
        kind = raw_entry.kind()
    except EntryTypeError as e:
        logger.warning(f"Cannot classify base/{raw_entry.name}: {e}")
        return EntryError(raw_entry.name, e)

    if kind is EntryKind.DIRECTORY:
        oid = PgOid.parse(raw_entry.name)
        if oid is not None:
            return DatabaseDir(oid)
    return UnknownEntry(DirEntry(raw_entry.name, kind))


def classify_base(raw_entries: Iterable[RawEntry]) -> list[BaseDirItem]:
    """Classify the entries of ``base/``, one item per entry, in input order."""
    return [classify_base_entry(raw_entry) for raw_entry in raw_entries]


def base_item_sort_key(item: BaseDirItem) -> tuple:
    """Databases by numeric OID, then unknown entries, then errors."""
    if isinstance(item, DatabaseDir):
        return (0, item.oid.value, "", 0)
    if isinstance(item, UnknownEntry):
        return (1, 0, item.entry.name, item.entry.kind.value)
    return (2, 0, item.name, 0)


# ============================================================================
# base/<oid>/ level
# ============================================================================


def classify_db_dir_entry(raw_entry: RawEntry) -> DbDirItem:
    try:
        kind = raw_entry.kind()
    except EntryTypeError as e:
        logger.warning(f"Cannot classify {raw_entry.name}: {e}")
        return EntryError(raw_entry.name, e)

    name = raw_entry.name
    if kind is EntryKind.FILE:
        fork_segment = parse_fork_segment(name)
        if fork_segment is not None:
            return fork_segment
        if is_filenode_map_file(name):
            return FileNodeMapFile()
        if is_pg_version_file(name):
            return PgVersionFile()
    return UnknownEntry(DirEntry(name, kind))


def classify_db_dir(raw_entries: Iterable[RawEntry]) -> list[DbDirItem]:
    """Classify the entries of a database directory, one item per entry."""
    return [classify_db_dir_entry(raw_entry) for raw_entry in raw_entries]


_FORK_ORDER = {"": 0, "fsm": 1, "vm": 2}


def db_item_sort_key(item: DbDirItem) -> tuple:
    """PG_VERSION, pg_filenode.map, relation files, unknown entries, errors."""
    if isinstance(item, PgVersionFile):
        return (0, 0, 0, 0, "")
    if isinstance(item, FileNodeMapFile):
        return (1, 0, 0, 0, "")
    if isinstance(item, ForkSegmentFile):
        return (2, item.oid.value, _FORK_ORDER[item.fork.value], item.segment, item.entry_name)
    if isinstance(item, UnknownEntry):
        return (3, 0, item.entry.kind.value, 0, item.entry.name)
    return (4, 0, 0, 0, item.name)
