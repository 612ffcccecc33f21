"""Command-line interface for pg-browser."""
