"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: Every public service method returns ServiceResult; expected
failures (missing files, bad JSON, invalid records) never raise.
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
        op: Name of the operation (e.g. ``"validate"``).
        data: Operation-specific payload. Kept on failure when it is still
            useful, e.g. the per-field results of an invalid record.
        warnings: Non-fatal issues, such as schema keys naming no rule.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        **detail: Any,
    ) -> ServiceResult:
        """Shorthand for an ``ok=False`` result with no data."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
