"""Tests for the configuration section models."""

import pytest
from pydantic import ValidationError

from bookstock.config.models import ImporterConfig, RestockConfig, StoreConfig


class TestSectionDefaults:
    def test_store_defaults(self):
        assert StoreConfig().path == "books.db"

    def test_importer_defaults(self):
        cfg = ImporterConfig()
        assert cfg.enabled is True
        assert cfg.base_url == "https://openlibrary.org"
        assert cfg.limit == 50

    def test_restock_defaults(self):
        cfg = RestockConfig()
        assert (cfg.min_amount, cfg.max_amount) == (1, 9)


class TestValidation:
    def test_restock_range_must_be_ordered(self):
        with pytest.raises(ValidationError, match="exceeds max_amount"):
            RestockConfig(min_amount=5, max_amount=2)

    def test_restock_single_value_range(self):
        cfg = RestockConfig(min_amount=3, max_amount=3)
        assert cfg.min_amount == cfg.max_amount == 3

    @pytest.mark.parametrize("limit", [0, -1])
    def test_importer_limit_positive(self, limit):
        with pytest.raises(ValidationError):
            ImporterConfig(limit=limit)

    def test_importer_timeout_positive(self):
        with pytest.raises(ValidationError):
            ImporterConfig(timeout=0)

    def test_sections_are_frozen(self):
        cfg = StoreConfig()
        with pytest.raises(ValidationError):
            cfg.path = "other.db"  # type: ignore[misc]
