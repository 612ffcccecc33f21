"""Navigable views over the PGDATA tree."""

from .base_dir import BaseView
from .database import DatabaseView
from .navigation import resolve
from .root import RootView
from .view import Listing, View

__all__ = [
    "BaseView",
    "DatabaseView",
    "Listing",
    "RootView",
    "View",
    "resolve",
]
