"""CheckResult: the contract between the check service and the CLI.

INVARIANT: ``ok`` is True iff ``errors`` is empty.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from argval.core.arg import Argument


class CheckResult(BaseModel):
    """Outcome of one check chain.

    Attributes:
        ok: Whether the value passed every check.
        op: Name of the operation (e.g. ``"check_string"``).
        value: The value after fallbacks were applied.
        errors: Messages in check order.
        message: All messages joined with the configured separator.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    value: Any = None
    errors: list[str] = Field(default_factory=list)
    message: str | None = None

    @model_validator(mode="after")
    def _ok_matches_errors(self) -> CheckResult:
        if self.ok == bool(self.errors):
            msg = "ok must be True exactly when errors is empty"
            raise ValueError(msg)
        return self

    @classmethod
    def from_arg(cls, op: str, arg: Argument, *, value: Any, separator: str) -> CheckResult:
        """Build a result from any wrapper satisfying the Argument protocol."""
        errors = list(arg.errors)
        return cls(
            ok=not errors,
            op=op,
            value=value,
            errors=errors,
            message=separator.join(errors) if errors else None,
        )
