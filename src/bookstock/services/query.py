"""QueryService — read-only filter/sort pipeline over the catalog.

Filters compose conjunctively; a missing filter matches everything.
Sorting is ascending and stable. Flag values are validated before the
store is read, so an invalid query never yields partial output.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime

from bookstock.domain.book import Book
from bookstock.domain.types import SortKey
from bookstock.services.base import BaseService
from bookstock.services.result import ErrorCode, ServiceResult

BookPredicate = Callable[[Book], bool]


# Tried in order after ISO 8601. strptime accepts unpadded day and month.
DATE_FORMATS = ("%Y-%m-%d", "%Y/%m/%d", "%m/%d/%Y", "%d.%m.%Y")


def parse_date(raw: str) -> date:
    """Parse an ISO 8601 date or datetime, or one of :data:`DATE_FORMATS`.

    Raises:
        ValueError: If *raw* is not a calendar date in any accepted form.
    """
    text = raw.strip()
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Unrecognised date: {raw!r}")


class QueryService(BaseService):
    """Handles ``get`` queries."""

    def get_books(
        self,
        *,
        title: str | None = None,
        author: str | None = None,
        date: str | None = None,
        order_by: str | None = None,
    ) -> ServiceResult:
        """Return books matching every given filter, optionally sorted.

        Args:
            title: Case-sensitive substring of the title.
            author: Case-sensitive substring of the author.
            date: Calendar date; books published in its year match.
            order_by: ``title``, ``author``, ``date`` or ``count`` (any case).
        """
        op = "get_books"
        predicates: list[BookPredicate] = []

        if title:
            predicates.append(lambda b: title in b.title)
        if author:
            predicates.append(lambda b: author in b.author)
        if date:
            try:
                year = parse_date(date).year
            except ValueError:
                return ServiceResult.failure(
                    op, ErrorCode.INVALID_DATE, f"Wrong date format: {date}", date=date
                )
            predicates.append(lambda b: b.year == year)

        sort_key: SortKey | None = None
        if order_by:
            try:
                sort_key = SortKey.parse(order_by)
            except ValueError:
                return ServiceResult.failure(
                    op,
                    ErrorCode.INVALID_ORDER_BY,
                    f"Invalid order-by field: {order_by}",
                    order_by=order_by,
                    allowed=[k.value for k in SortKey],
                )

        items = [b for b in self._store.list_all() if all(p(b) for p in predicates)]
        if sort_key is not None:
            attr = sort_key.attribute
            items.sort(key=lambda b: getattr(b, attr))

        return ServiceResult(
            ok=True,
            op=op,
            data={"count": len(items), "items": [b.to_dict() for b in items]},
        )
