"""Abstract view over one level of the PGDATA tree."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Listing:
    """Classified contents of one view, ready for the renderer."""

    pgdata: Path
    """PGDATA root the view belongs to."""

    title: str
    """Path of the directory relative to PGDATA ("" for the root)."""

    description: str = ""
    """One-line explanation of what the directory holds."""

    items: list = field(default_factory=list)
    """Classified items, in display order."""

    @property
    def path(self) -> Path:
        return self.pgdata / self.title if self.title else self.pgdata


class View(ABC):
    """A position in the PGDATA tree.

    Views only hold the path they are scoped to. The directory is read when
    render() is called, never at construction.
    """

    @property
    @abstractmethod
    def path(self) -> Path:
        pass

    @abstractmethod
    def next(self, token: str) -> "View":
        """Return the view reached by descending into token.

        Raises:
            NavigationError: If token does not name a reachable child
        """
        pass

    @abstractmethod
    def render(self) -> Listing:
        """Read and classify the directory this view is scoped to.

        Raises:
            DirectoryReadError: If the directory cannot be listed
        """
        pass
