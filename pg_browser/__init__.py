"""Browse and annotate a PostgreSQL data directory (PGDATA)."""

__version__ = "0.1.0"
