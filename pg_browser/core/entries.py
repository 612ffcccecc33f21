"""Directory entries and the single-level directory listing primitive."""

import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ..errors import DirectoryReadError, EntryTypeError

logger = logging.getLogger(__name__)


class EntryKind(Enum):
    """Type of a directory entry. Directories sort before files."""

    DIRECTORY = 0
    FILE = 1

    @property
    def letter(self) -> str:
        return "D" if self is EntryKind.DIRECTORY else "F"


@dataclass(frozen=True)
class DirEntry:
    """A named entry of a known kind. Compared by (name, kind)."""

    name: str
    kind: EntryKind

    @classmethod
    def file(cls, name: str) -> "DirEntry":
        return cls(name, EntryKind.FILE)

    @classmethod
    def dir(cls, name: str) -> "DirEntry":
        return cls(name, EntryKind.DIRECTORY)

    def sort_key(self) -> tuple[str, int]:
        return (self.name, self.kind.value)


class RawEntry(ABC):
    """An entry as returned by a directory listing, before its type is known.

    Determining the type may need a stat() call which can fail per entry
    (e.g. a dangling symlink), so kind() is allowed to raise EntryTypeError.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def kind(self) -> EntryKind:
        """Return the entry kind, following symbolic links.

        Raises:
            EntryTypeError: If the type cannot be determined or is neither
                a regular file nor a directory
        """
        pass

    def to_dir_entry(self) -> DirEntry:
        return DirEntry(self.name, self.kind())


class ScandirEntry(RawEntry):
    """RawEntry backed by an ``os.DirEntry``."""

    def __init__(self, entry: os.DirEntry):
        self._entry = entry

    @property
    def name(self) -> str:
        return self._entry.name

    @property
    def path(self) -> Path:
        return Path(self._entry.path)

    def kind(self) -> EntryKind:
        try:
            if self._entry.is_dir():
                return EntryKind.DIRECTORY
            if self._entry.is_file():
                return EntryKind.FILE
            is_link = self._entry.is_symlink()
        except OSError as e:
            raise EntryTypeError(self.path, e.strerror or str(e)) from e

        if is_link:
            raise EntryTypeError(self.path, "broken symbolic link")
        raise EntryTypeError(self.path, "not a regular file or directory")

    def __repr__(self):
        return f"<ScandirEntry({self.name!r})>"


def list_directory(path: Path) -> list[RawEntry]:
    """List one directory level.

    The scandir handle is closed before returning; entry types are resolved
    lazily by RawEntry.kind().

    Args:
        path: Directory to list

    Returns:
        Entries in OS order

    Raises:
        DirectoryReadError: If the directory cannot be opened or read
    """
    logger.debug(f"Listing {path}")
    try:
        with os.scandir(path) as it:
            entries: list[RawEntry] = [ScandirEntry(entry) for entry in it]
    except OSError as e:
        raise DirectoryReadError(path, e) from e
    logger.debug(f"{path}: {len(entries)} entries")
    return entries

