"""Tests for query sort keys."""

import pytest

from bookstock.domain.types import SortKey


class TestSortKey:
    @pytest.mark.parametrize("raw", ["title", "TITLE", "Title", " Title ", "title\n"])
    def test_parse_is_case_insensitive(self, raw: str) -> None:
        assert SortKey.parse(raw) is SortKey.TITLE

    def test_date_sorts_on_year(self) -> None:
        assert SortKey.DATE.attribute == "year"

    @pytest.mark.parametrize("key", [SortKey.TITLE, SortKey.AUTHOR, SortKey.COUNT])
    def test_other_keys_sort_on_same_name(self, key: SortKey) -> None:
        assert key.attribute == key.value

    def test_unknown_key_raises(self) -> None:
        with pytest.raises(ValueError):
            SortKey.parse("bogus")
