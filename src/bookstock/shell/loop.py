"""CommandLoop — the interactive ``get`` / ``buy`` / ``restock`` prompt.

A single "awaiting command" state: prompt, read a line, dispatch, report,
repeat. Command failures are reported and the loop carries on; only the
end of input stops it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

import click

from bookstock.config.logging import command_context
from bookstock.output.formatters import OutputSettings, format_result
from bookstock.services.query import QueryService
from bookstock.services.result import ErrorCode, ServiceResult
from bookstock.services.stock import StockService
from bookstock.shell.parser import FlagValueError, ParsedCommand, parse_line

if TYPE_CHECKING:
    from bookstock.infrastructure.store import CatalogStore

logger = logging.getLogger(__name__)

PROMPT = "Enter command:"
EMPTY_LINE_MESSAGE = "You didn't enter a command."

COMMAND_HELP: dict[str, str] = {
    "get": "get [--title=] [--author=] [--date=YYYY-MM-DD] [--order-by=title|author|date|count]",
    "buy": "buy --id=N",
    "restock": "restock [--id=N] [--count=N]",
    "help": "help",
}

Handler = Callable[[ParsedCommand], ServiceResult]


def _invalid_flag(op: str, code: ErrorCode, exc: FlagValueError) -> ServiceResult:
    return ServiceResult.failure(op, code, str(exc), flag=exc.key, value=exc.value)


class CommandLoop:
    """Reads line commands and dispatches them to the catalog services.

    Args:
        store: Catalog store shared by the services the loop creates.
        stock: Stock service to use; built from *store* when omitted.
        output: Human or JSON rendering of results.
        echo: Writer with ``click.echo``'s signature (``err=True`` for failures).
    """

    def __init__(
        self,
        store: CatalogStore,
        *,
        stock: StockService | None = None,
        output: OutputSettings | None = None,
        echo: Callable[..., Any] = click.echo,
    ) -> None:
        self._query = QueryService(store)
        self._stock = stock or StockService(store)
        self._output = output or OutputSettings()
        self._echo = echo
        self._handlers: dict[str, Handler] = {
            "get": self._get,
            "buy": self._buy,
            "restock": self._restock,
            "help": self._help,
        }

    def run(self, lines: Iterable[str]) -> int:
        """Process *lines* until they run out. Returns the number of commands dispatched."""
        dispatched = 0
        source = iter(lines)
        while True:
            self._echo(PROMPT)
            line = next(source, None)
            if line is None:
                break
            parsed = parse_line(line)
            if parsed.name is None:
                self._echo(EMPTY_LINE_MESSAGE)
                continue
            self.report(self.dispatch(parsed))
            dispatched += 1
        logger.debug("End of input after %d commands", dispatched)
        return dispatched

    def dispatch(self, parsed: ParsedCommand) -> ServiceResult:
        """Run one command; log lines inside carry ``command=<name>``."""
        name = parsed.name or ""
        with command_context(name):
            handler = self._handlers.get(name)
            if handler is None:
                result = ServiceResult.failure(
                    "command",
                    ErrorCode.INVALID_COMMAND,
                    f"Invalid command: {name}",
                    command=name,
                    available=sorted(self._handlers),
                )
            else:
                logger.debug("Dispatching with options %s", sorted(parsed.options))
                result = handler(parsed)
            if result.error is not None:
                logger.info("%s failed: %s", result.op, result.error.code)
        return result

    def report(self, result: ServiceResult) -> None:
        """Print *result*; failures and warnings go to stderr."""
        self._echo(format_result(result, settings=self._output), err=not result.ok)
        if result.ok and not self._output.json_output:
            for warning in result.warnings:
                self._echo(f"WARNING: {warning}", err=True)

    # ------------------------------------------------------------------
    # handlers
    # ------------------------------------------------------------------

    def _get(self, parsed: ParsedCommand) -> ServiceResult:
        return self._query.get_books(
            title=parsed.get_str("title"),
            author=parsed.get_str("author"),
            date=parsed.get_str("date"),
            order_by=parsed.get_str("order-by"),
        )

    def _buy(self, parsed: ParsedCommand) -> ServiceResult:
        try:
            book_id = parsed.get_int("id")
        except FlagValueError as exc:
            return _invalid_flag("buy", ErrorCode.INVALID_ID, exc)
        if book_id is None:
            return ServiceResult.failure("buy", ErrorCode.INVALID_ID, "Missing --id")
        return self._stock.buy(book_id)

    def _restock(self, parsed: ParsedCommand) -> ServiceResult:
        try:
            book_id = parsed.get_int("id")
        except FlagValueError as exc:
            return _invalid_flag("restock", ErrorCode.INVALID_ID, exc)
        try:
            amount = parsed.get_int("count")
        except FlagValueError as exc:
            return _invalid_flag("restock", ErrorCode.INVALID_COUNT, exc)
        return self._stock.restock(book_id, amount)

    def _help(self, parsed: ParsedCommand) -> ServiceResult:
        return ServiceResult(ok=True, op="help", data=dict(COMMAND_HELP))
