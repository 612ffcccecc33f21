"""View of PGDATA/base, the per-database directories."""

from pathlib import Path

from ..core.classify import base_item_sort_key, classify_base
from ..core.entries import list_directory
from ..core.names import PgOid
from ..errors import NavigationError
from .database import DatabaseView
from .view import Listing, View

BASE_DESCRIPTION = (
    "Each directory stores data for each database in the cluster "
    "and is named after the database's OID in pg_database"
)


class BaseView(View):
    def __init__(self, pgdata: Path):
        self.pgdata = Path(pgdata)

    @property
    def path(self) -> Path:
        return self.pgdata / "base"

    def next(self, token: str) -> View:
        oid = PgOid.parse(token)
        if oid is None:
            raise NavigationError(
                token,
                f"'{token}' is not a valid database OID "
                "(expected an unsigned 32-bit integer)",
            )
        return DatabaseView(self.pgdata, oid)

    def render(self) -> Listing:
        items = classify_base(list_directory(self.path))
        items.sort(key=base_item_sort_key)
        return Listing(
            pgdata=self.pgdata,
            title="base",
            description=BASE_DESCRIPTION,
            items=items,
        )

    def __repr__(self):
        return f"BaseView({str(self.path)!r})"
