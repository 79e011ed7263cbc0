"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, bookstock.toml only contains
overrides. A fresh install needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from bookstock.infrastructure.importer import DEFAULT_BASE_URL, DEFAULT_QUERY
from bookstock.services.stock import DEFAULT_MAX_AMOUNT, DEFAULT_MIN_AMOUNT


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    path: str = "books.db"


class ImporterConfig(BaseModel):
    """[importer] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    base_url: str = DEFAULT_BASE_URL
    query: str = DEFAULT_QUERY
    limit: int = Field(default=50, ge=1)
    timeout: float = Field(default=10.0, gt=0)


class RestockConfig(BaseModel):
    """[restock] section — range of the random default amount."""

    model_config = {"frozen": True}

    min_amount: int = DEFAULT_MIN_AMOUNT
    max_amount: int = DEFAULT_MAX_AMOUNT

    @model_validator(mode="after")
    def _check_range(self) -> RestockConfig:
        if self.min_amount > self.max_amount:
            msg = f"min_amount ({self.min_amount}) exceeds max_amount ({self.max_amount})"
            raise ValueError(msg)
        return self
