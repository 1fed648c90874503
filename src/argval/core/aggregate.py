"""Aggregation over many arguments.

All functions accept any mix of wrappers satisfying
:class:`argval.core.arg.Argument` and scan them in the order given.
"""

from __future__ import annotations

from argval.core.arg import Argument
from argval.core.errors import DEFAULT_SEPARATOR, ValidationError


def any_invalid(*args: Argument) -> bool:
    """Return True if any of the given arguments has an error."""
    return any(arg.errors for arg in args)


def all_valid(*args: Argument) -> bool:
    """Return True if none of the given arguments has an error."""
    return not any_invalid(*args)


def first_error(*args: Argument) -> str | None:
    """Return the first message found, or None if every argument is valid."""
    for arg in args:
        for message in arg.errors:
            return message
    return None


def all_errors(*args: Argument, separator: str = DEFAULT_SEPARATOR) -> ValidationError | None:
    """Combine every message of every argument into one error.

    Messages are ordered by argument, then by check order within each
    argument. Returns None if there are no messages.
    """
    messages = [message for arg in args for message in arg.errors]
    if not messages:
        return None
    return ValidationError(messages, separator=separator)
