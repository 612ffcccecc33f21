"""Filename grammar for PGDATA members.

PostgreSQL encodes object identifiers directly in file and directory names:

    base/<database oid>/
    base/<database oid>/<relfilenode>[_fsm|_vm][.<segment>]

Everything here is pure string parsing; nothing touches the filesystem.
"""

import re
from dataclasses import dataclass, field
from enum import Enum

# Largest value of an unsigned 32-bit OID
OID_MAX = 4294967295

# Segment numbers are stored as u16
SEGMENT_MAX = 65535

PG_VERSION_FILE = "PG_VERSION"
FILENODE_MAP_FILE = "pg_filenode.map"

# <oid>[_fsm|_vm][.<segment>], an empty segment is accepted as segment 0
FORK_SEGMENT_PATTERN = re.compile(r"([0-9]{1,10})(_(fsm|vm))?(\.([0-9]*))?")


@dataclass(frozen=True, order=True)
class PgOid:
    """PostgreSQL object identifier (unsigned 32-bit integer)."""

    value: int

    def __post_init__(self):
        if not 0 <= self.value <= OID_MAX:
            raise ValueError(f"OID out of range: {self.value}")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def parse(cls, text: str) -> "PgOid | None":
        """Parse an OID from its decimal text form.

        Only ASCII digits are accepted (no sign, whitespace or underscores).

        Returns:
            PgOid, or None if text is not numeric or overflows 32 bits
        """
        if not text or not (text.isascii() and text.isdigit()):
            return None
        value = int(text)
        if value > OID_MAX:
            return None
        return cls(value)


class ForkType(Enum):
    """Relation fork stored in a separate file."""

    MAIN = ""
    FREE_SPACE_MAP = "fsm"
    VISIBILITY_MAP = "vm"

    @classmethod
    def from_suffix(cls, suffix: str | None) -> "ForkType | None":
        """Map the ``_fsm`` / ``_vm`` suffix body (or its absence) to a fork."""
        if suffix is None:
            return cls.MAIN
        if suffix == "fsm":
            return cls.FREE_SPACE_MAP
        if suffix == "vm":
            return cls.VISIBILITY_MAP
        return None

    @property
    def label(self) -> str:
        return self.value or "main"


@dataclass(frozen=True)
class ForkSegmentFile:
    """One segment file of one fork of a relation.

    name is the file name as found on disk. It can differ from the canonical
    filename, e.g. "16385_fsm.0", "0016385" or "1259.".
    """

    oid: PgOid
    fork: ForkType
    segment: int = 0
    name: str | None = field(default=None, compare=False)

    @property
    def entry_name(self) -> str:
        """Name on disk, or the canonical filename when built directly."""
        return self.filename if self.name is None else self.name

    @property
    def filename(self) -> str:
        """Canonical file name; segment 0 is written without a suffix."""
        name = str(self.oid)
        if self.fork is not ForkType.MAIN:
            name += f"_{self.fork.value}"
        if self.segment:
            name += f".{self.segment}"
        return name


def parse_fork_segment(filename: str) -> ForkSegmentFile | None:
    """Parse a relation fork segment file name.

    Examples:
        >>> parse_fork_segment("12345_vm.2")
        ForkSegmentFile(oid=PgOid(value=12345), fork=<ForkType.VISIBILITY_MAP: 'vm'>, segment=2, name='12345_vm.2')
        >>> parse_fork_segment("pg_filenode.map") is None
        True

    Returns:
        ForkSegmentFile, or None when the whole name does not match the grammar
    """
    match = FORK_SEGMENT_PATTERN.fullmatch(filename)
    if not match:
        return None

    oid = PgOid.parse(match.group(1))
    if oid is None:
        return None

    fork = ForkType.from_suffix(match.group(3))
    if fork is None:
        return None

    segment_text = match.group(5)
    segment = int(segment_text) if segment_text else 0
    if segment > SEGMENT_MAX:
        return None

    return ForkSegmentFile(oid=oid, fork=fork, segment=segment, name=filename)


def is_pg_version_file(filename: str) -> bool:
    return filename == PG_VERSION_FILE


def is_filenode_map_file(filename: str) -> bool:
    return filename == FILENODE_MAP_FILE
