"""BaseService — shared foundation for the catalog services.

Every service receives a :class:`CatalogStore` at construction time; there
is no module-level store handle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bookstock.infrastructure.store import CatalogStore


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class StockService(BaseService):
            def buy(self, book_id: int) -> ServiceResult:
                book = self._store.get(book_id)
                ...
    """

    def __init__(self, store: CatalogStore) -> None:
        self._store = store
