"""SQLAlchemy Core table definitions for the catalog database."""

from __future__ import annotations

from sqlalchemy import Column, Index, Integer, MetaData, Table, Text

metadata = MetaData()

books = Table(
    "books",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", Text, nullable=False),
    Column("author", Text, nullable=False),
    Column("year", Integer, nullable=False, default=0, server_default="0"),  # 0 = unknown
    Column("count", Integer, nullable=False, default=0, server_default="0"),
)

Index("ix_books_year", books.c.year)
