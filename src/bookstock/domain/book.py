"""The Book record and the candidates the bulk importer produces.

INVARIANT: ``Book.count >= 0``. The stock service enforces it; the store
persists whatever it is given.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from pydantic import BaseModel, Field, field_validator

UNKNOWN_YEAR = 0


@dataclass
class Book:
    """A catalog row. ``id`` is assigned by the store and never changes."""

    id: int
    title: str
    author: str
    year: int = UNKNOWN_YEAR
    count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class BookCandidate(BaseModel):
    """A complete record handed over by the importer or the seed list."""

    model_config = {"frozen": True}

    title: str
    author: str
    year: int = UNKNOWN_YEAR
    count: int = Field(default=1, ge=0)

    @field_validator("title", "author")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            msg = "must not be empty"
            raise ValueError(msg)
        return value


SEED_COUNT = 999999

SEED_BOOKS: tuple[BookCandidate, ...] = (
    BookCandidate(title="Animal Farm", author="George Orwell", year=1945, count=SEED_COUNT),
    BookCandidate(title="1984", author="George Orwell", year=1948, count=SEED_COUNT),
)
