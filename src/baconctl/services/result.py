"""ServiceResult and ServiceError — the query-handling contract.

INVARIANT: Every query handled by a service returns a ServiceResult.
The query loop threads ``result.ok`` into the process exit status instead
of keeping a global error flag.
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
    """Return type for service operations.

    Attributes:
        ok: False only for recoverable errors (e.g. an unknown actor).
            An unreachable actor is still ``ok``; its score is None.
        op: Name of the operation (e.g. ``"score"``).
        data: Operation-specific payload.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing spans in verbose mode).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
