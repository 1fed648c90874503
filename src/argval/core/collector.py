"""Fail-fast error collector: keeps only the first failure.

An alternative to the accumulate-all wrappers for code that just needs
"the" reason a request is bad::

    err = (
        errors()
        .add(country == "", "invalid country")
        .add(province == "", "invalid province")
        .add_check(lambda: check_street(street))
    )
    if err:
        return err.error()

INVARIANT: once present, the captured message never changes.
INVARIANT: ``add_check`` always runs its function; only the capture is
fail-fast, so side effects of later checks still happen.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Self

from argval.core.errors import ValidationError
from argval.core.formatting import format_message

ErrorLike = BaseException | str | None


def _message_of(error: ErrorLike) -> str | None:
    if error is None:
        return None
    if isinstance(error, BaseException):
        return str(error) or type(error).__name__
    return error or None


class ErrorCollector:
    """A possibly-empty single error. Falsy while absent."""

    def __init__(self, message: str | None = None) -> None:
        self._message = message

    @classmethod
    def create(cls, condition: bool, template: str, *args: Any) -> ErrorCollector:
        """Present with the formatted message if *condition* holds, else absent."""
        return cls().add(condition, template, *args)

    def __bool__(self) -> bool:
        return self._message is not None

    def __str__(self) -> str:
        return self.error()

    def __repr__(self) -> str:
        return f"ErrorCollector({self._message!r})"

    @property
    def present(self) -> bool:
        return self._message is not None

    @property
    def message(self) -> str | None:
        return self._message

    def add(self, condition: bool, template: str, *args: Any) -> Self:
        """Capture the formatted message if *condition* holds and nothing is captured yet."""
        if self._message is None and condition:
            self._message = format_message(template, *args)
        return self

    def add_error(self, error: ErrorLike) -> Self:
        """Capture an existing error (exception or message); None or "" is no error."""
        if self._message is None:
            self._message = _message_of(error)
        return self

    def add_check(self, check: Callable[[], ErrorLike]) -> Self:
        """Run *check* and capture its error if nothing is captured yet."""
        result = check()
        if self._message is None:
            self._message = _message_of(result)
        return self

    def error(self) -> str:
        """The captured message, or an empty string if absent."""
        return self._message or ""

    def raise_if_present(self) -> None:
        """Raise the captured message as a :class:`ValidationError`."""
        if self._message is not None:
            raise ValidationError([self._message])


def errors() -> ErrorCollector:
    """Return an empty collector to chain checks on."""
    return ErrorCollector()
