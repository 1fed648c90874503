"""Number facade: ordering checks on top of the comparable facade."""

from __future__ import annotations

import numbers
from decimal import Decimal
from typing import Any, Self, TypeVar

from argval.core.comparable import UNSET, ComparableArg

NumberT = TypeVar("NumberT", int, float, Decimal)


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (numbers.Real, Decimal))


class NumberArg(ComparableArg[NumberT]):
    """A numeric argument.

    Comparisons use the natural ordering of the numeric type. Constructing
    one around a non-number raises ``TypeError``: that is a caller bug,
    not bad input.
    """

    def __init__(self, value: NumberT, *, zero: Any = UNSET) -> None:
        if not _is_number(value):
            msg = f"NumberArg requires a real number, got {type(value).__name__}"
            raise TypeError(msg)
        super().__init__(value, zero=zero)

    def lt(self, maximum: NumberT) -> Self:
        if not self.value < maximum:
            self.add_error("must be less than %v", maximum)
        return self

    def lte(self, maximum: NumberT) -> Self:
        if not self.value <= maximum:
            self.add_error("must be less than or equal to %v", maximum)
        return self

    def gt(self, minimum: NumberT) -> Self:
        if not self.value > minimum:
            self.add_error("must be greater than %v", minimum)
        return self

    def gte(self, minimum: NumberT) -> Self:
        if not self.value >= minimum:
            self.add_error("must be greater than or equal to %v", minimum)
        return self


def number(value: NumberT, *, zero: Any = UNSET) -> NumberArg[NumberT]:
    """Return a number argument for *value*."""
    return NumberArg(value, zero=zero)
