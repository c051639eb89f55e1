"""FormatResult and FormatError: what every CLI command emits.

INVARIANT: a command produces exactly one FormatResult, successful or not.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from digitgroup.domain.errors import GroupingError


class FormatError(BaseModel):
    """Structured error payload within a FormatResult."""

    model_config = {"frozen": True}

    code: str
    message: str


class FormatResult(BaseModel):
    """Outcome of one CLI operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"group"``, ``"presets"``).
        data: Operation-specific payload on success.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: FormatError | None = None

    @classmethod
    def success(cls, op: str, **data: Any) -> FormatResult:
        return cls(ok=True, op=op, data=data)

    @classmethod
    def failure(cls, op: str, exc: GroupingError) -> FormatResult:
        return cls(ok=False, op=op, error=FormatError(code=exc.code, message=str(exc)))
