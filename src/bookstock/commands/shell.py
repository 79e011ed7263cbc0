"""Interactive command: the line-command prompt over stdin."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from bookstock.commands._base import BookCommand
from bookstock.shell.loop import CommandLoop

if TYPE_CHECKING:
    from bookstock.commands._context import AppContext

logger = logging.getLogger(__name__)


@click.command(
    cls=BookCommand,
    examples="""\
  bookstock
  bookstock shell
  bookstock --offline shell
  printf 'get --order-by=count\\nbuy --id=1\\n' | bookstock shell""",
)
@click.pass_obj
def shell(app: AppContext) -> None:
    """Read get/buy/restock commands until end of input."""
    loop = CommandLoop(app.store, stock=app.stock_service(), output=app.output)
    loop.report(app.ensure_catalog())
    dispatched = loop.run(click.get_text_stream("stdin"))
    logger.info("Shell closed after %d commands", dispatched)
