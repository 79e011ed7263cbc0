"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers
are dispatched by ``result.op`` in :func:`render_result`; unknown ops
fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from bookstock.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from bookstock.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console"], None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def book_line(book: dict[str, Any]) -> Text:
    """One catalog row: ``Id: 1, Author: ..., Title: ..., Year: ..., Count: ...``."""
    count = book.get("count", 0)
    line = Text()
    line.append("Id: ", style="bs.key")
    line.append(str(book.get("id")), style="bs.id")
    line.append(", Author: ", style="bs.key")
    line.append(str(book.get("author", "")))
    line.append(", Title: ", style="bs.key")
    line.append(str(book.get("title", "")), style="bs.title")
    line.append(", Year: ", style="bs.key")
    line.append(str(book.get("year", 0)))
    line.append(", Count: ", style="bs.key")
    line.append(str(count), style="bs.count" if count else "bs.empty")
    return line


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="bs.ok")
    op = Text(f"  {result.op}", style="bs.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="bs.key")
    v = Text(str(value), style="bs.id" if key == "id" else "")
    console.print(k, v, sep="", end="")
    console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="bs.error")
    op = Text(f"  {result.op}", style="bs.op")
    dash = Text(" — ")
    console.print(label, op, dash, Text(msg), sep="", soft_wrap=True)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_books(result: ServiceResult, console: Console) -> None:
    items = result.data.get("items", [])
    for book in items:
        console.print(book_line(book), soft_wrap=True)
    count = result.data.get("count", len(items))
    console.print(Text(f"{count} book{'s' if count != 1 else ''}", style="dim"))


def _render_buy(result: ServiceResult, console: Console) -> None:
    d = result.data
    line = Text("Bought ")
    line.append(str(d.get("title", "")), style="bs.title")
    line.append(". Remaining count: ")
    line.append(str(d.get("count")), style="bs.count")
    console.print(line, soft_wrap=True)


def _render_restock(result: ServiceResult, console: Console) -> None:
    d = result.data
    line = Text(f"Restocked {d.get('amount')} copies of ")
    line.append(str(d.get("title", "")), style="bs.title")
    line.append(". New count: ")
    line.append(str(d.get("count")), style="bs.count")
    console.print(line, soft_wrap=True)


def _render_bootstrap(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key in ("source", "inserted", "total"):
        if key in result.data:
            _field(console, key, result.data[key])


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "get_books": _render_books,
    "buy": _render_buy,
    "restock": _render_restock,
    "bootstrap": _render_bootstrap,
}
