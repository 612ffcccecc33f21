"""Tests for directory entry modeling and listing."""

import os

import pytest

from pg_browser.core.entries import (
    DirEntry,
    EntryKind,
    ScandirEntry,
    list_directory,
)
from pg_browser.errors import DirectoryReadError, EntryTypeError

from stubs import make_broken_symlink, touch


class TestDirEntry:
    """Tests for the DirEntry value type."""

    def test_equality_uses_name_and_kind(self):
        assert DirEntry.dir("base") == DirEntry("base", EntryKind.DIRECTORY)
        assert DirEntry.dir("base") != DirEntry.file("base")
        assert len({DirEntry.dir("base"), DirEntry.dir("base"), DirEntry.file("base")}) == 2

    def test_sort_key_puts_directories_first_for_same_name(self):
        entries = [DirEntry.file("x"), DirEntry.dir("x"), DirEntry.dir("a")]
        assert sorted(entries, key=DirEntry.sort_key) == [
            DirEntry.dir("a"),
            DirEntry.dir("x"),
            DirEntry.file("x"),
        ]

    def test_kind_letter(self):
        assert EntryKind.DIRECTORY.letter == "D"
        assert EntryKind.FILE.letter == "F"


class TestListDirectory:
    """Tests for reading one directory level from disk."""

    def test_lists_files_and_directories(self, tmp_path):
        touch(tmp_path / "a_file")
        (tmp_path / "a_dir").mkdir()

        entries = list_directory(tmp_path)

        assert all(isinstance(entry, ScandirEntry) for entry in entries)
        kinds = {entry.name: entry.kind() for entry in entries}
        assert kinds == {"a_file": EntryKind.FILE, "a_dir": EntryKind.DIRECTORY}

    def test_empty_directory(self, tmp_path):
        assert list_directory(tmp_path) == []

    def test_missing_directory_raises(self, tmp_path):
        missing = tmp_path / "missing"
        with pytest.raises(DirectoryReadError) as exc_info:
            list_directory(missing)
        assert exc_info.value.path == missing
        assert isinstance(exc_info.value.cause, FileNotFoundError)

    def test_file_instead_of_directory_raises(self, tmp_path):
        touch(tmp_path / "plain")
        with pytest.raises(DirectoryReadError):
            list_directory(tmp_path / "plain")

    def test_symlink_to_directory_is_directory(self, tmp_path):
        (tmp_path / "real_wal").mkdir()
        os.symlink(tmp_path / "real_wal", tmp_path / "pg_wal")

        kinds = {entry.name: entry.kind() for entry in list_directory(tmp_path)}

        assert kinds["pg_wal"] is EntryKind.DIRECTORY

    def test_broken_symlink_kind_raises(self, tmp_path):
        make_broken_symlink(tmp_path / "dangling")

        (entry,) = list_directory(tmp_path)

        assert entry.name == "dangling"
        with pytest.raises(EntryTypeError, match="broken symbolic link"):
            entry.kind()

    def test_fifo_kind_raises(self, tmp_path):
        if not hasattr(os, "mkfifo"):
            pytest.skip("mkfifo not available")
        os.mkfifo(tmp_path / "pipe")

        (entry,) = list_directory(tmp_path)

        with pytest.raises(EntryTypeError, match="not a regular file or directory"):
            entry.kind()


class TestToDirEntry:
    """Tests for resolving a raw entry into a DirEntry."""

    def test_resolves_kinds(self, tmp_path):
        touch(tmp_path / "PG_VERSION")
        (tmp_path / "base").mkdir()

        entries = {entry.to_dir_entry() for entry in list_directory(tmp_path)}

        assert entries == {DirEntry.file("PG_VERSION"), DirEntry.dir("base")}

    def test_unresolvable_entry_raises_for_that_entry_only(self, tmp_path):
        (tmp_path / "base").mkdir()
        make_broken_symlink(tmp_path / "pg_wal")

        entries = {entry.name: entry for entry in list_directory(tmp_path)}

        assert entries["base"].to_dir_entry() == DirEntry.dir("base")
        with pytest.raises(EntryTypeError, match="pg_wal"):
            entries["pg_wal"].to_dir_entry()
