"""Comparable facade: equality and zero-value checks.

The "zero value" is the unpopulated sentinel of a type: ``None`` always,
otherwise whatever ``type(value)()`` builds (``0``, ``0.0``, ``""``,
``False``, empty containers). Types without a no-argument constructor
have no inferred zero; pass ``zero=`` explicitly for those.
"""

from __future__ import annotations

from typing import Any, Final, Self, TypeVar

from argval.core.arg import Arg, ArgFacade

T = TypeVar("T")


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


UNSET: Final[Any] = _Unset()


def zero_of(value: Any) -> Any:
    """Return the zero value for the type of *value* (``None`` if unknown)."""
    if value is None:
        return None
    try:
        return type(value)()
    except TypeError:
        return None


def is_zero(value: Any, zero: Any = UNSET) -> bool:
    """Whether *value* equals *zero* (or its inferred zero when unset)."""
    if zero is not UNSET:
        return bool(value == zero)
    if value is None:
        return True
    inferred = zero_of(value)
    if inferred is None:
        return False
    return bool(value == inferred)


class ComparableArg(ArgFacade[T]):
    """An argument whose value supports equality checks."""

    def __init__(self, value: T, *, zero: Any = UNSET) -> None:
        super().__init__(Arg(value))
        self._zero = zero

    def _is_zero(self) -> bool:
        return is_zero(self.value, self._zero)

    def default(self, fallback: T) -> Self:
        """Replace the value with *fallback* if it is the zero value."""
        return self.fallback_if(fallback, self._is_zero())

    def populated(self) -> Self:
        if self._is_zero():
            self.add_error("must be populated")
        return self

    def empty(self) -> Self:
        if not self._is_zero():
            self.add_error("must be empty")
        return self

    def is_(self, *candidates: T) -> Self:
        """Add an error unless the value equals one of *candidates*.

        With no candidates the check passes vacuously.
        """
        if not candidates or self.value in candidates:
            return self
        if len(candidates) == 1:
            self.add_error("must be %v", candidates[0])
        else:
            self.add_error("must be one of %v", list(candidates))
        return self

    def is_not(self, *candidates: T) -> Self:
        """Add an error for each of *candidates* equal to the value."""
        for candidate in candidates:
            if self.value == candidate:
                self.add_error("%v not allowed", list(candidates))
        return self


def comparable(value: T, *, zero: Any = UNSET) -> ComparableArg[T]:
    """Return a comparable argument for *value*."""
    return ComparableArg(value, zero=zero)
