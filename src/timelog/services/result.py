"""ServiceResult and ServiceError: what the CLI receives from a service.

INVARIANT: ``ok`` is True exactly when ``error`` is None.  A failed result
carries no data, so a partially resolved command never reaches output.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, Field, model_validator


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type of service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (the command kind, e.g. ``"start"``).
        data: The resolved command on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @model_validator(mode="after")
    def _error_matches_ok(self) -> Self:
        if self.ok == (self.error is not None):
            msg = "a result carries an error if and only if it is not ok"
            raise ValueError(msg)
        if not self.ok and self.data:
            msg = "a failed result must not carry data"
            raise ValueError(msg)
        return self
