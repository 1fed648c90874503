"""Generic argument wrapper: a value bound to its accumulated errors.

Every check appends human-readable messages to the wrapper; nothing is
ever raised for bad input. Callers consult ``is_valid()`` / ``errors``
once the chain is done.

INVARIANT: ``errors`` only grows, except through ``clear_errors()``.
INVARIANT: ``is_valid()`` and ``is_invalid()`` are always complementary.

Ownership: the wrapper owns ``value``. Mutating checks (``fallback_if``,
``default`` ...) replace the wrapper's value, never the caller's variable;
read the result back from ``arg.value`` after the chain.
"""

from __future__ import annotations

from typing import Any, Generic, Protocol, Self, TypeVar, runtime_checkable

from argval.core.formatting import format_message

T = TypeVar("T")


@runtime_checkable
class Argument(Protocol):
    """Anything exposing errors and validity queries."""

    @property
    def errors(self) -> tuple[str, ...]: ...

    def is_valid(self) -> bool: ...

    def is_invalid(self) -> bool: ...


class Arg(Generic[T]):
    """A generic argument: a value plus the errors found while checking it.

    Usage::

        port = Arg(settings.port).fallback_if(8080, settings.port is None)
        if port.is_invalid():
            ...
    """

    def __init__(self, value: T) -> None:
        self.value = value
        self._errors: list[str] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self.value!r}, errors={self._errors!r})"

    @property
    def errors(self) -> tuple[str, ...]:
        """Snapshot of the messages in the order the checks ran."""
        return tuple(self._errors)

    def is_valid(self) -> bool:
        return not self._errors

    def is_invalid(self) -> bool:
        return bool(self._errors)

    def clear_errors(self) -> Self:
        """Drop every accumulated error."""
        self._errors = []
        return self

    def add_error(self, template: str, *args: Any) -> Self:
        """Append a custom error formatted from *template* and *args*."""
        self._errors.append(format_message(template, *args))
        return self

    def fallback_if(self, fallback: T, condition: bool) -> Self:
        """Replace the value with *fallback* when *condition* holds."""
        if condition:
            self.value = fallback
        return self


class ArgFacade(Generic[T]):
    """Base for category facades.

    A facade adds category-specific checks on top of exactly one core
    :class:`Arg`. All shared state lives in that core instance; the facade
    only forwards to it, so stacking facades never duplicates errors.
    """

    def __init__(self, arg: Arg[T]) -> None:
        self._arg = arg

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self.value!r}, errors={list(self.errors)!r})"

    @property
    def arg(self) -> Arg[T]:
        """The underlying core wrapper."""
        return self._arg

    @property
    def value(self) -> T:
        return self._arg.value

    @value.setter
    def value(self, value: T) -> None:
        self._arg.value = value

    @property
    def errors(self) -> tuple[str, ...]:
        return self._arg.errors

    def is_valid(self) -> bool:
        return self._arg.is_valid()

    def is_invalid(self) -> bool:
        return self._arg.is_invalid()

    def clear_errors(self) -> Self:
        self._arg.clear_errors()
        return self

    def add_error(self, template: str, *args: Any) -> Self:
        self._arg.add_error(template, *args)
        return self

    def fallback_if(self, fallback: T, condition: bool) -> Self:
        self._arg.fallback_if(fallback, condition)
        return self


def new(value: T) -> Arg[T]:
    """Return a new generic argument wrapping *value*."""
    return Arg(value)
