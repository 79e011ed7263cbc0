"""One-shot catalog commands: get, buy, restock."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bookstock.commands._base import BookCommand
from bookstock.services.query import QueryService

if TYPE_CHECKING:
    from bookstock.commands._context import AppContext


@click.command(
    cls=BookCommand,
    examples="""\
  bookstock get
  bookstock get --author Orwell --order-by date
  bookstock get --title "Animal Farm"
  bookstock get --date 1945-01-01
  bookstock --json get --order-by count""",
)
@click.option("--title", default=None, help="Case-sensitive substring of the title.")
@click.option("--author", default=None, help="Case-sensitive substring of the author.")
@click.option(
    "--date", "date_", default=None, help="Date such as 1945-01-01 or 1945/01/01; matches its year."
)
@click.option("--order-by", default=None, help="Sort by title, author, date or count.")
@click.pass_obj
def get(
    app: AppContext,
    title: str | None,
    author: str | None,
    date_: str | None,
    order_by: str | None,
) -> None:
    """List books matching every given filter."""
    app.ensure_catalog()
    result = QueryService(app.store).get_books(
        title=title, author=author, date=date_, order_by=order_by
    )
    app.emit(result)


@click.command(
    cls=BookCommand,
    examples="""\
  bookstock buy --id 1
  bookstock --json buy --id 2""",
)
@click.option("--id", "book_id", type=int, required=True, help="Book to buy one copy of.")
@click.pass_obj
def buy(app: AppContext, book_id: int) -> None:
    """Take one copy of a book out of stock."""
    app.ensure_catalog()
    app.emit(app.stock_service().buy(book_id))


@click.command(
    cls=BookCommand,
    examples="""\
  bookstock restock
  bookstock restock --id 1
  bookstock restock --id 1 --count 5
  bookstock restock --count 3""",
)
@click.option("--id", "book_id", type=int, default=None, help="Book to restock (random if omitted).")
@click.option("--count", "amount", type=int, default=None, help="Copies to add (random if omitted).")
@click.pass_obj
def restock(app: AppContext, book_id: int | None, amount: int | None) -> None:
    """Add copies to a book, or to a randomly chosen one."""
    app.ensure_catalog()
    app.emit(app.stock_service().restock(book_id, amount))
