"""Test doubles and small filesystem helpers."""

import os
from pathlib import Path

from pg_browser.core.entries import EntryKind, RawEntry
from pg_browser.errors import EntryTypeError, NavigationError
from pg_browser.views.view import Listing, View


class StubEntry(RawEntry):
    """RawEntry with a fixed kind, or a kind lookup that always fails."""

    def __init__(self, name: str, kind: EntryKind | None):
        self._name = name
        self._kind = kind

    @property
    def name(self) -> str:
        return self._name

    def kind(self) -> EntryKind:
        if self._kind is None:
            raise EntryTypeError(Path(self._name), "stat failed")
        return self._kind

    @classmethod
    def file(cls, name: str) -> "StubEntry":
        return cls(name, EntryKind.FILE)

    @classmethod
    def dir(cls, name: str) -> "StubEntry":
        return cls(name, EntryKind.DIRECTORY)

    @classmethod
    def broken(cls, name: str) -> "StubEntry":
        return cls(name, None)


class CollectingView(View):
    """View that accepts any token and remembers the tokens seen so far."""

    def __init__(self, collected: tuple[str, ...] = (), reject: str | None = None):
        self.collected = collected
        self.reject = reject
        self.calls = 0

    @property
    def path(self) -> Path:
        return Path("/" + "/".join(self.collected))

    def next(self, token: str) -> View:
        self.calls += 1
        if token == self.reject:
            raise NavigationError(token, f"{token} is not supported")
        return CollectingView(self.collected + (token,), self.reject)

    def render(self) -> Listing:
        return Listing(pgdata=Path("/"), title="/".join(self.collected))


def touch(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("")


def make_broken_symlink(path: Path) -> None:
    os.symlink(path.parent / "does-not-exist", path)
