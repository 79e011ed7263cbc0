"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy store initialization, first-run
bootstrap, and centralized result emission (stdout/stderr routing + exit
codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bookstock.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    import random

    from bookstock.config.settings import BookstockSettings
    from bookstock.infrastructure.importer import OpenLibraryImporter
    from bookstock.infrastructure.store import CatalogStore
    from bookstock.services.result import ServiceResult
    from bookstock.services.stock import StockService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The store is opened on first use so ``--help`` and ``--version`` never
    touch the database.
    """

    def __init__(self, settings: BookstockSettings) -> None:
        self.settings = settings
        self._store: CatalogStore | None = None
        self._bootstrap: ServiceResult | None = None

        from bookstock.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def store(self) -> CatalogStore:
        """The catalog store (opened lazily on first access)."""
        if self._store is None:
            from bookstock.infrastructure.store import CatalogStore

            self._store = CatalogStore.open(self.settings.db_path)
        return self._store

    @property
    def output(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            verbose=self.settings.verbose,
        )

    def importer(self) -> OpenLibraryImporter | None:
        """The configured importer, or None when offline or disabled."""
        cfg = self.settings.importer
        if self.settings.offline or not cfg.enabled:
            return None
        from bookstock.infrastructure.importer import OpenLibraryImporter

        return OpenLibraryImporter(cfg.base_url, query=cfg.query, timeout=cfg.timeout)

    def ensure_catalog(self) -> ServiceResult:
        """Run the first-run bootstrap once per process and return its result."""
        if self._bootstrap is None:
            from bookstock.services.bootstrap import BootstrapService

            svc = BootstrapService(
                self.store, self.importer(), limit=self.settings.importer.limit
            )
            self._bootstrap = svc.ensure_catalog()
        return self._bootstrap

    def stock_service(self, rng: random.Random | None = None) -> StockService:
        from bookstock.services.stock import StockService

        cfg = self.settings.restock
        return StockService(
            self.store, rng=rng, min_amount=cfg.min_amount, max_amount=cfg.max_amount
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, settings=self.output)
        if result.ok:
            click.echo(output)
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def close(self) -> None:
        if self._store is not None:
            self._store.close()
            self._store = None
