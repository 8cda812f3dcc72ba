"""Tests for ServiceResult and ServiceError."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from lenstr.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult.success("trim", {"content": "hi", "length": 2})
        assert result.ok is True
        assert result.op == "trim"
        assert result.data == {"content": "hi", "length": 2}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_failure_construction(self) -> None:
        result = ServiceResult.failure("concat", "ALLOCATION_FAILED", "too big", requested=9)
        assert result.ok is False
        assert result.data == {}
        assert result.error is not None
        assert result.error.code == "ALLOCATION_FAILED"
        assert result.error.detail == {"requested": 9}

    def test_json_serialization(self) -> None:
        result = ServiceResult.success("count", {"value": 5}, meta={"duration_ms": 1})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["value"] == 5
        assert parsed["meta"]["duration_ms"] == 1

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_default_detail(self) -> None:
        assert ServiceError(code="E", message="bad").detail == {}
