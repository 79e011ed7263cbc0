"""Sort keys accepted by catalog queries."""

from __future__ import annotations

from enum import StrEnum


class SortKey(StrEnum):
    """``--order-by`` values and the Book attribute each one sorts on."""

    TITLE = "title"
    AUTHOR = "author"
    DATE = "date"
    COUNT = "count"

    @property
    def attribute(self) -> str:
        return "year" if self is SortKey.DATE else self.value

    @classmethod
    def parse(cls, raw: str) -> SortKey:
        """Case-insensitive lookup, ignoring surrounding whitespace.

        Raises ValueError for unknown keys.
        """
        return cls(raw.strip().lower())
