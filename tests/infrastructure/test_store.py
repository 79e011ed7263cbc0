"""Tests for CatalogStore — the SQLite-backed book collection."""

from pathlib import Path

import pytest

from bookstock.domain.book import Book, BookCandidate
from bookstock.infrastructure.store import CatalogStore
from tests.conftest import add_book


class TestInsert:
    def test_assigns_sequential_ids(self, store: CatalogStore) -> None:
        first = store.insert(BookCandidate(title="A", author="X"))
        second = store.insert(BookCandidate(title="B", author="Y"))
        assert (first, second) == (1, 2)

    def test_insert_many_preserves_order(self, store: CatalogStore) -> None:
        ids = store.insert_many(
            [BookCandidate(title="A", author="X"), BookCandidate(title="B", author="Y")]
        )
        assert ids == [1, 2]
        assert [b.title for b in store.list_all()] == ["A", "B"]

    def test_insert_many_empty(self, store: CatalogStore) -> None:
        assert store.insert_many([]) == []
        assert store.count() == 0


class TestRead:
    def test_get(self, store: CatalogStore) -> None:
        book = add_book(store, "Dune", "Frank Herbert", 1965, 4)
        assert store.get(book.id) == Book(
            id=book.id, title="Dune", author="Frank Herbert", year=1965, count=4
        )

    def test_get_missing(self, store: CatalogStore) -> None:
        assert store.get(1) is None

    def test_list_all_ascending_id(self, seeded_store: CatalogStore) -> None:
        assert [b.id for b in seeded_store.list_all()] == [1, 2, 3, 4, 5]

    def test_count(self, seeded_store: CatalogStore) -> None:
        assert seeded_store.count() == 5


class TestUpdate:
    def test_persists_count(self, store: CatalogStore) -> None:
        book = add_book(store, "Dune", "Frank Herbert", 1965, 4)
        book.count = 9
        store.update(book)
        refreshed = store.get(book.id)
        assert refreshed is not None
        assert refreshed.count == 9

    def test_does_not_validate_stock(self, store: CatalogStore) -> None:
        book = add_book(store, "Dune", "Frank Herbert", 1965, 0)
        book.count = -3
        store.update(book)
        assert store.get(book.id).count == -3  # type: ignore[union-attr]

    def test_missing_row_raises(self, store: CatalogStore) -> None:
        with pytest.raises(LookupError):
            store.update(Book(id=7, title="Ghost", author="Nobody"))


class TestDurability:
    def test_survives_reopen(self, tmp_path: Path) -> None:
        db_path = tmp_path / "catalog" / "books.db"
        first = CatalogStore.open(db_path)
        book_id = first.insert(BookCandidate(title="Dune", author="Frank Herbert", count=2))
        first.close()

        second = CatalogStore.open(db_path)
        try:
            book = second.get(book_id)
            assert book is not None
            assert book.title == "Dune"
            assert book.count == 2
        finally:
            second.close()
