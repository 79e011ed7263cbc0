"""StockService — purchase and restock with the non-negative stock rule.

INVARIANT: a book's count never drops below zero through ``buy``.
``restock`` adds the given amount as-is (zero and negative included);
whether non-positive amounts should be rejected is still an open question.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from bookstock.services.base import BaseService
from bookstock.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from bookstock.infrastructure.store import CatalogStore

logger = logging.getLogger(__name__)

DEFAULT_MIN_AMOUNT = 1
DEFAULT_MAX_AMOUNT = 9


class StockService(BaseService):
    """Applies ``buy`` and ``restock`` to single books.

    Args:
        store: Catalog store.
        rng: Random source for default amounts and random book selection.
        min_amount: Lower bound (inclusive) of the default restock amount.
        max_amount: Upper bound (inclusive) of the default restock amount.
    """

    def __init__(
        self,
        store: CatalogStore,
        *,
        rng: random.Random | None = None,
        min_amount: int = DEFAULT_MIN_AMOUNT,
        max_amount: int = DEFAULT_MAX_AMOUNT,
    ) -> None:
        super().__init__(store)
        self._rng = rng or random.Random()
        self._min_amount = min_amount
        self._max_amount = max_amount

    def buy(self, book_id: int) -> ServiceResult:
        """Take one copy of *book_id* out of stock."""
        op = "buy"
        book = self._store.get(book_id)
        if book is None:
            return ServiceResult.failure(
                op, ErrorCode.NOT_FOUND, f"Book not found: {book_id}", id=book_id
            )
        if book.count <= 0:
            return ServiceResult.failure(
                op,
                ErrorCode.OUT_OF_STOCK,
                f"{book.title} is out of stock",
                id=book.id,
                count=book.count,
            )

        book.count -= 1
        self._store.update(book)
        logger.debug("Bought book %s, %d left", book.id, book.count)
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": book.id, "title": book.title, "count": book.count},
        )

    def restock(self, book_id: int | None = None, amount: int | None = None) -> ServiceResult:
        """Add *amount* copies to *book_id*, or to a random book when omitted.

        Args:
            book_id: Target book. None picks one uniformly from the catalog.
            amount: Copies to add. None draws from ``[min_amount, max_amount]``.
        """
        op = "restock"
        if amount is None:
            amount = self._rng.randint(self._min_amount, self._max_amount)

        if book_id is not None:
            book = self._store.get(book_id)
            if book is None:
                return ServiceResult.failure(
                    op, ErrorCode.NOT_FOUND, f"Book not found: {book_id}", id=book_id
                )
        else:
            catalog = self._store.list_all()
            if not catalog:
                return ServiceResult.failure(
                    op, ErrorCode.NO_BOOKS, "No books available to restock"
                )
            book = self._rng.choice(catalog)

        book.count += amount
        self._store.update(book)
        logger.debug("Restocked book %s by %d to %d", book.id, amount, book.count)
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": book.id, "title": book.title, "amount": amount, "count": book.count},
        )
