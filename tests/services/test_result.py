"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from bookstock.services.result import ErrorCode, ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="buy", data={"id": 1})
        assert result.ok is True
        assert result.op == "buy"
        assert result.data == {"id": 1}
        assert result.warnings == []
        assert result.error is None

    def test_failure_shorthand(self) -> None:
        result = ServiceResult.failure("buy", ErrorCode.NOT_FOUND, "Book not found: 9", id=9)
        assert result.ok is False
        assert result.error == ServiceError(
            code="NOT_FOUND", message="Book not found: 9", detail={"id": 9}
        )

    def test_json_serialization(self) -> None:
        result = ServiceResult.failure("get_books", ErrorCode.INVALID_DATE, "Wrong date format")
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is False
        assert parsed["error"]["code"] == "INVALID_DATE"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]
