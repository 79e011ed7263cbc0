"""SQLite database engine and schema via SQLAlchemy Core."""

from bookstock.infrastructure.database.engine import create_db_engine, init_database
from bookstock.infrastructure.database.schema import books, metadata

__all__ = [
    "books",
    "create_db_engine",
    "init_database",
    "metadata",
]
