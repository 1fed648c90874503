"""List facade: length, membership and per-element checks.

The facade owns a copy of the sequence it wraps, so ``default`` and
``each_default`` never mutate the caller's list. Read the result back
from ``arg.value``.

Per-element checks report one error per offending element; duplicates
are kept.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Self, TypeVar

from argval.core.arg import Arg, ArgFacade
from argval.core.comparable import UNSET, is_zero

T = TypeVar("T")


class ListArg(ArgFacade[list[T]]):
    """A list argument.

    Args:
        value: Items to check; ``None`` is treated as an empty list.
        zero: Explicit zero value for elements. Inferred per element
            when unset (see :func:`argval.core.comparable.is_zero`).
    """

    def __init__(self, value: Iterable[T] | None, *, zero: Any = UNSET) -> None:
        super().__init__(Arg(list(value) if value is not None else []))
        self._zero = zero

    def __len__(self) -> int:
        return len(self.value)

    def default(self, fallback: Iterable[T]) -> Self:
        """Replace the list with *fallback* if it is empty."""
        if not self.value:
            self.value = list(fallback)
        return self

    def populated(self) -> Self:
        if not self.value:
            self.add_error("must be populated")
        return self

    def empty(self) -> Self:
        if self.value:
            self.add_error("must be empty")
        return self

    # --- Length ---

    def len_eqs(self, length: int) -> Self:
        if len(self.value) != length:
            self.add_error("must contain %d values", length)
        return self

    def len_gt(self, length: int) -> Self:
        if len(self.value) <= length:
            self.add_error("must contain more than %d values", length)
        return self

    def len_gte(self, length: int) -> Self:
        if len(self.value) < length:
            self.add_error("must contain at least %d values", length)
        return self

    def len_lt(self, length: int) -> Self:
        if len(self.value) >= length:
            self.add_error("must contain less than %d values", length)
        return self

    def len_lte(self, length: int) -> Self:
        if len(self.value) > length:
            self.add_error("must contain at most %d values", length)
        return self

    # --- Membership ---

    def includes(self, *values: T) -> Self:
        """Add an error for each of *values* missing from the list."""
        for expected in values:
            if expected not in self.value:
                self.add_error("must include %v", expected)
        return self

    # --- Per element ---

    def each_default(self, fallback: T) -> Self:
        """Replace every zero-valued element with *fallback*."""
        items = self.value
        for index, item in enumerate(items):
            if is_zero(item, self._zero):
                items[index] = fallback
        return self

    def each_populated(self) -> Self:
        for item in self.value:
            if is_zero(item, self._zero):
                self.add_error("each value must be populated")
        return self

    def each_empty(self) -> Self:
        for item in self.value:
            if not is_zero(item, self._zero):
                self.add_error("each value must be empty")
        return self

    def each_is(self, *values: T) -> Self:
        for item in self.value:
            if item not in values:
                self.add_error("each value must be one of %v", list(values))
        return self

    def each_is_not(self, *values: T) -> Self:
        for item in self.value:
            if item in values:
                self.add_error("%v not allowed", item)
        return self


def list_of(value: Iterable[T] | None, *, zero: Any = UNSET) -> ListArg[T]:
    """Return a list argument for a copy of *value*."""
    return ListArg(value, zero=zero)
