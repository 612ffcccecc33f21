"""Configuration for pg-browser.

All env-var reading is centralised here. load_dotenv() runs at import time so
the values below can also come from a .env file.

    PGDATA                 data directory to browse when --pgdata is not given
    PG_BROWSER_WIDTH       render width; default is the terminal width
    PG_BROWSER_LOG_LEVEL   log level when --debug is not given (WARNING)
"""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

# Load .env on import.  Calling this multiple times is harmless.
load_dotenv(find_dotenv(usecwd=True))


class BrowserConfig:
    DEFAULT_LOG_LEVEL = "WARNING"

    @staticmethod
    def pgdata() -> str | None:
        return os.getenv("PGDATA") or None

    @staticmethod
    def width() -> int | None:
        """Render width from PG_BROWSER_WIDTH, or None if unset."""
        value = os.getenv("PG_BROWSER_WIDTH")
        if not value:
            return None
        try:
            width = int(value)
        except ValueError:
            raise ValueError(f"PG_BROWSER_WIDTH must be an integer, got {value!r}")
        if width <= 0:
            raise ValueError(f"PG_BROWSER_WIDTH must be positive, got {width}")
        return width

    @classmethod
    def log_level(cls) -> str:
        return os.getenv("PG_BROWSER_LOG_LEVEL", cls.DEFAULT_LOG_LEVEL).upper()


def get_pgdata_info(cli_value: Path | None = None) -> tuple[Path, str]:
    """Get the PGDATA directory to browse and where it came from.

    Precedence:
        1. --pgdata option
        2. PGDATA environment variable (or .env)
        3. Current working directory

    Returns:
        Tuple of (pgdata_path, source_description)
    """
    if cli_value is not None:
        return Path(cli_value), "--pgdata option"
    elif env_dir := BrowserConfig.pgdata():
        return Path(env_dir), "PGDATA env var"
    else:
        return Path.cwd(), "current directory"
