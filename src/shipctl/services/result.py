"""What a shipctl service hands back to the CLI.

Services never raise to the command layer: expected failures (unknown
plugin, user abort, broken plugin handler) come back as a failed
:class:`ServiceResult` carrying an :class:`ErrorCode`.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Failure codes reported by ``shipctl`` operations."""

    PLUGIN_NOT_FOUND = "PLUGIN_NOT_FOUND"
    ABORTED = "ABORTED"
    HOOK_FAILED = "HOOK_FAILED"


class ServiceError(BaseModel):
    """Why an operation failed; ``detail`` names the plugin, hook or tap involved."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name, used to pick a renderer (``init``, ``plugins``...).
        data: Payload on success, e.g. the written file and configuration.
        warnings: Non-fatal issues, printed to stderr by the CLI.
        error: Set when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(
        cls, op: str, code: ErrorCode, message: str, **detail: Any
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
