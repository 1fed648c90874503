"""ValidationError: the combined error value handed back to callers.

Validation failures are plain strings while they accumulate. When a
caller needs one error object (to return from a handler, or to raise),
the messages are bundled into a :class:`ValidationError`.
"""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_SEPARATOR = "; "


class ValidationError(Exception):
    """One or more validation messages joined into a single error.

    Attributes:
        messages: The individual messages, in order.
        separator: Text placed between messages in ``str(error)``.
    """

    def __init__(self, messages: Iterable[str], *, separator: str = DEFAULT_SEPARATOR) -> None:
        self.messages: tuple[str, ...] = tuple(messages)
        self.separator = separator
        super().__init__(separator.join(self.messages))

    def __repr__(self) -> str:
        return f"ValidationError({list(self.messages)!r})"
