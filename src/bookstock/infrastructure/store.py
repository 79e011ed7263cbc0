"""CatalogStore — durable keyed collection of Book rows.

The store is the single dependency injected into every service. It
persists whatever it is given: stock rules live in the service layer.
Each call runs in its own short transaction via ``engine.begin()``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from sqlalchemy import func, insert, select, update

from bookstock.domain.book import Book, BookCandidate
from bookstock.infrastructure.database.engine import init_database
from bookstock.infrastructure.database.schema import books

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine, Row

logger = logging.getLogger(__name__)


def _to_book(row: Row) -> Book:
    return Book(id=row.id, title=row.title, author=row.author, year=row.year, count=row.count)


class CatalogStore:
    """Insert, look up, list and update Book rows in SQLite."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @classmethod
    def open(cls, db_path: Path) -> CatalogStore:
        """Open (creating if needed) the catalog database at *db_path*."""
        return cls(init_database(db_path))

    @property
    def engine(self) -> Engine:
        return self._engine

    def insert(self, candidate: BookCandidate) -> int:
        """Insert one record and return the id the database assigned."""
        with self._engine.begin() as conn:
            result = conn.execute(
                insert(books).values(
                    title=candidate.title,
                    author=candidate.author,
                    year=candidate.year,
                    count=candidate.count,
                )
            )
            book_id = int(result.inserted_primary_key[0])
        logger.debug("Inserted book %s: %s", book_id, candidate.title)
        return book_id

    def insert_many(self, candidates: Iterable[BookCandidate]) -> list[int]:
        """Insert several records in one transaction; ids in input order."""
        ids: list[int] = []
        with self._engine.begin() as conn:
            for candidate in candidates:
                result = conn.execute(
                    insert(books).values(
                        title=candidate.title,
                        author=candidate.author,
                        year=candidate.year,
                        count=candidate.count,
                    )
                )
                ids.append(int(result.inserted_primary_key[0]))
        return ids

    def get(self, book_id: int) -> Book | None:
        with self._engine.connect() as conn:
            row = conn.execute(select(books).where(books.c.id == book_id)).first()
        return _to_book(row) if row is not None else None

    def list_all(self) -> list[Book]:
        """All books in natural (ascending id) order."""
        with self._engine.connect() as conn:
            rows = conn.execute(select(books).order_by(books.c.id)).fetchall()
        return [_to_book(r) for r in rows]

    def count(self) -> int:
        with self._engine.connect() as conn:
            return int(conn.execute(select(func.count()).select_from(books)).scalar_one())

    def update(self, book: Book) -> None:
        """Persist the mutable fields of an existing row, keyed by ``book.id``.

        Raises:
            LookupError: If no row has ``book.id``.
        """
        with self._engine.begin() as conn:
            result = conn.execute(
                update(books)
                .where(books.c.id == book.id)
                .values(title=book.title, author=book.author, year=book.year, count=book.count)
            )
            if result.rowcount == 0:
                msg = f"No book with id {book.id}"
                raise LookupError(msg)

    def close(self) -> None:
        self._engine.dispose()
