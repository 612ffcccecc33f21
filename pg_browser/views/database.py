"""View of PGDATA/base/<oid>, the files of a single database."""

from pathlib import Path

from ..core.classify import classify_db_dir, db_item_sort_key
from ..core.entries import list_directory
from ..core.names import PgOid
from ..errors import NavigationError
from .view import Listing, View

DATABASE_DESCRIPTION = (
    "Relation files of one database, named after their filenode "
    "and split into forks and 1 GB segments"
)


class DatabaseView(View):
    """Leaf view: nothing below a database directory can be browsed."""

    def __init__(self, pgdata: Path, oid: PgOid):
        self.pgdata = Path(pgdata)
        self.oid = oid

    @property
    def path(self) -> Path:
        return self.pgdata / "base" / str(self.oid)

    def next(self, token: str) -> View:
        raise NavigationError(
            token, f"Cannot browse '{token}': database {self.oid} has no subdirectories to browse"
        )

    def render(self) -> Listing:
        items = classify_db_dir(list_directory(self.path))
        items.sort(key=db_item_sort_key)
        return Listing(
            pgdata=self.pgdata,
            title=f"base/{self.oid}",
            description=DATABASE_DESCRIPTION,
            items=items,
        )

    def __repr__(self):
        return f"DatabaseView({str(self.path)!r})"
