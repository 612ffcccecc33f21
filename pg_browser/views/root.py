"""View of the PGDATA root directory."""

import logging
from pathlib import Path

from ..core.catalog import KNOWN_ITEMS, KnownTag, find_by_name, find_by_tag
from ..core.classify import classify_root
from ..core.entries import list_directory
from ..errors import NavigationError
from .base_dir import BaseView
from .view import Listing, View

logger = logging.getLogger(__name__)


class RootView(View):
    """The PGDATA directory itself, reconciled against the known catalog."""

    def __init__(self, pgdata: Path):
        self.pgdata = Path(pgdata)

    @property
    def path(self) -> Path:
        return self.pgdata

    def next(self, token: str) -> View:
        if token == find_by_tag(KnownTag.BASE).entry.name:
            return BaseView(self.pgdata)

        if find_by_name(token) is not None:
            raise NavigationError(token, f"Browsing '{token}' is not supported")
        raise NavigationError(token, f"'{token}' is not a PGDATA entry")

    def render(self) -> Listing:
        items = classify_root(KNOWN_ITEMS, list_directory(self.pgdata))
        logger.debug(f"{self.pgdata}: {len(items)} classified root items")
        return Listing(
            pgdata=self.pgdata,
            title="",
            description="PostgreSQL data directory",
            items=items,
        )

    def __repr__(self):
        return f"RootView({str(self.pgdata)!r})"
