"""Allow running as ``python -m pg_browser``."""

from .cli.main import pg_browser_cli

if __name__ == "__main__":
    pg_browser_cli(prog_name="pg-browser")
