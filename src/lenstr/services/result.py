"""ServiceResult and ServiceError — the contract between services and callers.

INVARIANT: Every public service method returns a ServiceResult; library
exceptions never escape to the CLI.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"replace_all"``).
        data: Operation payload on success. String results carry
            ``content`` and ``length``; scalar results carry ``value``.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry when verbose).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(cls, op: str, data: dict[str, Any], **kwargs: Any) -> ServiceResult:
        return cls(ok=True, op=op, data=data, **kwargs)

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
