"""Storage layer for parchi application."""

from parchi.database.base import Storage
from parchi.database.factories import create_sqlite_storage

__all__ = ["Storage", "create_sqlite_storage"]
