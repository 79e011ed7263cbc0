"""Tests for operation-specific Rich renderers and the formatter."""

import json

from bookstock.output.formatters import OutputSettings, format_result
from bookstock.output.renderers import book_line, render_result
from bookstock.services.result import ServiceResult

BOOK = {"id": 1, "author": "George Orwell", "title": "Animal Farm", "year": 1945, "count": 3}


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


class TestBookLine:
    def test_plain_text(self) -> None:
        assert book_line(BOOK).plain == (
            "Id: 1, Author: George Orwell, Title: Animal Farm, Year: 1945, Count: 3"
        )

    def test_markup_in_title_is_literal(self) -> None:
        book = dict(BOOK, title="[bold]Odd[/bold]")
        assert "[bold]Odd[/bold]" in render_result(_ok("get_books", count=1, items=[book]))


class TestRenderers:
    def test_books(self) -> None:
        other = dict(BOOK, id=2, title="1984", year=1948, count=0)
        output = render_result(_ok("get_books", count=2, items=[BOOK, other]))
        assert output.splitlines() == [
            "Id: 1, Author: George Orwell, Title: Animal Farm, Year: 1945, Count: 3",
            "Id: 2, Author: George Orwell, Title: 1984, Year: 1948, Count: 0",
            "2 books",
        ]

    def test_single_book_count_line(self) -> None:
        output = render_result(_ok("get_books", count=1, items=[BOOK]))
        assert output.splitlines()[-1] == "1 book"

    def test_long_rows_are_not_wrapped(self) -> None:
        book = dict(BOOK, title="A" * 300)
        output = render_result(_ok("get_books", count=1, items=[book]))
        assert len(output.splitlines()) == 2

    def test_buy(self) -> None:
        output = render_result(_ok("buy", id=1, title="Animal Farm", count=2))
        assert output == "Bought Animal Farm. Remaining count: 2"

    def test_restock(self) -> None:
        output = render_result(_ok("restock", id=1, title="1984", amount=4, count=9))
        assert output == "Restocked 4 copies of 1984. New count: 9"

    def test_bootstrap(self) -> None:
        output = render_result(_ok("bootstrap", source="seed", inserted=2, total=2))
        assert output.splitlines() == [
            "OK  bootstrap",
            "  source: seed",
            "  inserted: 2",
            "  total: 2",
        ]

    def test_generic(self) -> None:
        output = render_result(_ok("help", get="get [--title=]"))
        assert output.splitlines() == ["OK  help", "  get: get [--title=]"]


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        result = ServiceResult.failure("buy", "OUT_OF_STOCK", "1984 is out of stock", id=2)
        output = render_result(result)
        assert output == "ERROR  buy — 1984 is out of stock"
        assert "detail" not in output

    def test_verbose_shows_detail(self) -> None:
        result = ServiceResult.failure("buy", "OUT_OF_STOCK", "1984 is out of stock", id=2)
        output = render_result(result, verbose=True)
        assert "detail" in output
        assert "id: 2" in output

    def test_no_error_object(self) -> None:
        assert "Unknown error" in render_result(ServiceResult(ok=False, op="test"))


class TestFormatResult:
    def test_json(self) -> None:
        output = format_result(_ok("buy", id=1), settings=OutputSettings(json_output=True))
        assert json.loads(output)["data"] == {"id": 1}

    def test_human_by_default(self) -> None:
        output = format_result(_ok("buy", id=1, title="Dune", count=0))
        assert output == "Bought Dune. Remaining count: 0"
