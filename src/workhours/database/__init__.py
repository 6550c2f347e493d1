"""Database layer for workhours application."""

from workhours.database.base import Database
from workhours.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
