"""Standalone command: populate an empty catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bookstock.commands._base import BookCommand

if TYPE_CHECKING:
    from bookstock.commands._context import AppContext


@click.command(
    cls=BookCommand,
    examples="""\
  bookstock bootstrap
  bookstock --offline bootstrap
  bookstock --db /tmp/books.db --json bootstrap""",
)
@click.pass_obj
def bootstrap(app: AppContext) -> None:
    """Import books (or insert seed data) if the catalog is empty."""
    app.emit(app.ensure_catalog())
