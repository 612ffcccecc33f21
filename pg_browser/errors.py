"""Exceptions raised while reading and navigating a PGDATA directory."""

from pathlib import Path


class PgBrowserError(Exception):
    """Base class for all pg-browser failures shown to the user."""


class DirectoryReadError(PgBrowserError):
    """A directory could not be listed at all.

    Fatal for the navigation step that needed the listing.
    """

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read directory {path}: {cause}")


class EntryTypeError(PgBrowserError):
    """The type of a single directory entry could not be determined."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class NavigationError(PgBrowserError):
    """A navigation token cannot be resolved from the current view."""

    def __init__(self, token: str, message: str):
        self.token = token
        super().__init__(message)
