"""Shared pytest fixtures and test helpers for bookstock tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from bookstock.domain.book import Book, BookCandidate
from bookstock.infrastructure.store import CatalogStore


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def store(tmp_path: Path) -> Iterator[CatalogStore]:
    """Empty catalog backed by a temp SQLite file."""
    s = CatalogStore.open(tmp_path / "books.db")
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def seeded_store(store: CatalogStore) -> CatalogStore:
    """Catalog with a handful of books (ids 1-5 in insertion order)."""
    add_book(store, "Animal Farm", "George Orwell", 1945, 3)
    add_book(store, "1984", "George Orwell", 1948, 0)
    add_book(store, "Brave New World", "Aldous Huxley", 1932, 7)
    add_book(store, "Homage to Catalonia", "George Orwell", 1938, 1)
    add_book(store, "Fahrenheit 451", "Ray Bradbury", 1953, 2)
    return store


@pytest.fixture
def _isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty temp directory with no inherited config.

    Use via ``@pytest.mark.usefixtures("_isolated_dir")`` on command test
    classes; the catalog lands in ``tmp_path / "books.db"``.
    """
    monkeypatch.chdir(tmp_path)
    for var in (
        "BOOKSTOCK_CONFIG",
        "BOOKSTOCK_DB",
        "BOOKSTOCK_OFFLINE",
        "BOOKSTOCK_JSON_OUTPUT",
        "BOOKSTOCK_VERBOSE",
        "BOOKSTOCK_LOG_JSON",
    ):
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def add_book(
    store: CatalogStore, title: str, author: str, year: int = 0, count: int = 1
) -> Book:
    """Insert a book and return it as stored."""
    book_id = store.insert(BookCandidate(title=title, author=author, year=year, count=count))
    book = store.get(book_id)
    assert book is not None
    return book
