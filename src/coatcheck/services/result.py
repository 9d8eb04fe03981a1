"""What services hand back to the CLI.

Domain code raises; services catch domain errors at their boundary and
report them as a failed ServiceResult, keeping whatever partial data they
had (e.g. narration up to the failure).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Machine-readable code plus a human message."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation, rendered by ``output.formatters``."""

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
        error: ServiceError,
        *,
        data: dict[str, Any] | None = None,
    ) -> ServiceResult:
        return cls(ok=False, op=op, error=error, data=data or {})
