"""BootstrapService — first-run population of an empty catalog.

Order of preference:
1. Existing rows are left alone.
2. Candidates fetched by the importer are inserted with a stock of one.
3. If the catalog is still empty, the fixed seed books are inserted so the
   tool stays usable offline.

Import failures never fail the bootstrap; they become warnings.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from bookstock.domain.book import SEED_BOOKS
from bookstock.services.base import BaseService
from bookstock.services.result import ServiceResult

if TYPE_CHECKING:
    from bookstock.infrastructure.importer import OpenLibraryImporter
    from bookstock.infrastructure.store import CatalogStore

logger = logging.getLogger(__name__)


class BootstrapService(BaseService):
    """Fills an empty catalog from the importer, or from seed data.

    Args:
        store: Catalog store.
        importer: Bulk importer; None skips the fetch (offline mode).
        limit: Maximum number of candidates to request.
    """

    def __init__(
        self,
        store: CatalogStore,
        importer: OpenLibraryImporter | None = None,
        *,
        limit: int = 50,
    ) -> None:
        super().__init__(store)
        self._importer = importer
        self._limit = limit

    def ensure_catalog(self) -> ServiceResult:
        """Populate the catalog if it is empty. Blocks until the fetch completes."""
        op = "bootstrap"
        existing = self._store.count()
        if existing:
            logger.info("Catalog has %d books, skipping import", existing)
            return ServiceResult(
                ok=True, op=op, data={"source": "existing", "inserted": 0, "total": existing}
            )

        warnings: list[str] = []
        imported = 0
        if self._importer is not None:
            result = asyncio.run(self._importer.fetch_candidates(self._limit))
            if result.error:
                logger.warning("Bulk import failed: %s", result.error)
                warnings.append(result.error)
            imported = len(self._store.insert_many(result.candidates))
            logger.info("Imported %d books", imported)

        if imported:
            return ServiceResult(
                ok=True,
                op=op,
                data={"source": "import", "inserted": imported, "total": self._store.count()},
                warnings=warnings,
            )

        seeded = len(self._store.insert_many(SEED_BOOKS))
        logger.info("Catalog empty after import, inserted %d seed books", seeded)
        return ServiceResult(
            ok=True,
            op=op,
            data={"source": "seed", "inserted": seeded, "total": self._store.count()},
            warnings=warnings,
        )
