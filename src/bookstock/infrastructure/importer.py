"""Open Library bulk importer.

One-shot fetch of candidate books from the Open Library search API.
A single attempt is made; transport, HTTP and decoding failures come back
as an :class:`ImportResult` carrying an error message instead of raising,
so the caller decides what to fall back to.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, Field, ValidationError

from bookstock.domain.book import UNKNOWN_YEAR, BookCandidate

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://openlibrary.org"
DEFAULT_QUERY = "best sellers"


class ImportResult(BaseModel):
    """Outcome of a fetch: complete candidates, or an error message."""

    model_config = {"frozen": True}

    candidates: list[BookCandidate] = Field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _parse_year(value: Any) -> int:
    if isinstance(value, bool):
        return UNKNOWN_YEAR
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else UNKNOWN_YEAR
    try:
        return int(str(value))
    except (TypeError, ValueError):
        return UNKNOWN_YEAR


def candidate_from_doc(doc: Any) -> BookCandidate | None:
    """Map one search ``doc`` to a candidate.

    Returns None when the doc lacks a title or a first author.
    """
    if not isinstance(doc, dict):
        return None
    title = doc.get("title")
    authors = doc.get("author_name") or []
    author = authors[0] if isinstance(authors, list) and authors else None
    if not isinstance(title, str) or not isinstance(author, str):
        return None
    year = _parse_year(doc.get("first_publish_year", UNKNOWN_YEAR))
    try:
        return BookCandidate(title=title, author=author, year=year, count=1)
    except ValidationError:
        return None


class OpenLibraryImporter:
    """Fetches ``/search.json`` results and maps them to candidates.

    Args:
        base_url: API root, ``https://openlibrary.org`` by default.
        query: Search expression sent as ``q``.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport (tests pass ``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        query: str = DEFAULT_QUERY,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.query = query
        self.timeout = timeout
        self._transport = transport

    async def fetch_candidates(self, limit: int = 50) -> ImportResult:
        """Fetch up to *limit* candidates. Never raises for network or parse errors."""
        params = {"q": self.query, "limit": limit, "offset": 0}
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.get("/search.json", params=params)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as exc:
            logger.warning("Open Library request failed: %s", exc)
            return ImportResult(error=f"Request error: {exc}")
        except ValueError as exc:
            logger.warning("Open Library returned invalid JSON: %s", exc)
            return ImportResult(error=f"Invalid response: {exc}")

        docs = payload.get("docs") if isinstance(payload, dict) else None
        if not isinstance(docs, list):
            logger.info("Open Library search returned no results")
            return ImportResult()

        candidates = [c for c in (candidate_from_doc(d) for d in docs) if c is not None]
        logger.debug("Fetched %d candidates (%d docs)", len(candidates), len(docs))
        return ImportResult(candidates=candidates)
