"""String facade: prefix, pattern, shape and length checks.

Length is measured in code points (``len(str)``).

Pattern checks treat an invalid regular expression as a programming
error: ``matches()`` lets ``re.error`` propagate instead of recording a
validation error.

The MX check consults an injectable resolver ``(domain) -> bool``. When
none is given the dnspython-backed default from
:mod:`argval.infrastructure.dns` is used. Resolver failures fold into a
validation error (fail closed).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import Any, Self

from argval.core.comparable import UNSET, ComparableArg

logger = logging.getLogger(__name__)

MxResolver = Callable[[str], bool]

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
DOMAIN_PATTERN = re.compile(r"^([a-zA-Z0-9]+(-[a-zA-Z0-9]+)*\.)+[a-zA-Z]{2,}$")
URL_PATTERN = re.compile(
    r"^(http://|https://|www\.)[-a-zA-Z0-9@:%._\+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b"
    r"([-a-zA-Z0-9()@:%_\+.~#?&//=]*)"
)

TITLE_MAX_LENGTH = 60
SUBTITLE_MAX_LENGTH = 120
DESCRIPTION_MAX_LENGTH = 1000


def _one_or_many(verb: str, options: tuple[str, ...]) -> tuple[str, str] | None:
    """Message template and argument naming one option or several."""
    if len(options) == 1:
        return f"must {verb} %s", options[0]
    if len(options) > 1:
        return f"must {verb} one of %s", ", ".join(options)
    return None


class StringArg(ComparableArg[str]):
    """A string argument."""

    def __init__(self, value: str, *, zero: Any = UNSET) -> None:
        if not isinstance(value, str):
            msg = f"StringArg requires a str, got {type(value).__name__}"
            raise TypeError(msg)
        super().__init__(value, zero="" if zero is UNSET else zero)

    def fallback_if_empty(self, fallback: str) -> Self:
        return self.fallback_if(fallback, self.value == "")

    def starts_with(self, *prefixes: str) -> Self:
        """Add an error unless the value starts with one of *prefixes*."""
        if any(self.value.startswith(prefix) for prefix in prefixes):
            return self
        message = _one_or_many("start with", prefixes)
        if message is not None:
            self.add_error(*message)
        return self

    def ends_with(self, *suffixes: str) -> Self:
        """Add an error unless the value ends with one of *suffixes*."""
        if any(self.value.endswith(suffix) for suffix in suffixes):
            return self
        message = _one_or_many("end with", suffixes)
        if message is not None:
            self.add_error(*message)
        return self

    def contains(self, substring: str) -> Self:
        if substring not in self.value:
            self.add_error("must contain %s", substring)
        return self

    def matches(self, pattern: str) -> Self:
        """Add an error unless *pattern* is found in the value.

        Raises:
            re.error: If *pattern* is not a valid regular expression.
        """
        if re.search(pattern, self.value) is None:
            self.add_error("must match %s", pattern)
        return self

    # --- Shape checks ---

    def is_email(self) -> Self:
        """Rather use :meth:`is_email_with_existing_mx` unless existence does not matter."""
        if not EMAIL_PATTERN.fullmatch(self.value):
            self.add_error("must be a valid email address")
        return self

    def is_email_or_empty(self) -> Self:
        if self.value != "" and not EMAIL_PATTERN.fullmatch(self.value):
            self.add_error("must be a valid email address if specified")
        return self

    def is_email_with_existing_mx(self, resolver: MxResolver | None = None) -> Self:
        """Check the email shape, then that its domain publishes an MX record.

        A shape failure short-circuits the lookup. A resolver that raises
        counts as a missing record.
        """
        if not EMAIL_PATTERN.fullmatch(self.value):
            self.add_error("must be a valid email address")
            return self

        if resolver is None:
            from argval.infrastructure.dns import has_mx_record

            resolver = has_mx_record

        domain = self.value.split("@", 1)[1]
        try:
            found = resolver(domain)
        except Exception:
            logger.debug("MX resolver failed for %s", domain, exc_info=True)
            found = False
        if not found:
            self.add_error("email dns must have valid mx record")
        return self

    def is_domain(self) -> Self:
        if not DOMAIN_PATTERN.fullmatch(self.value):
            self.add_error("must be a valid domain")
        return self

    def is_domain_or_empty(self) -> Self:
        if self.value != "" and not DOMAIN_PATTERN.fullmatch(self.value):
            self.add_error("must be a valid domain if specified")
        return self

    def is_url(self) -> Self:
        if not URL_PATTERN.match(self.value):
            self.add_error("must be a valid URL")
        return self

    def is_url_or_empty(self) -> Self:
        if self.value != "" and not URL_PATTERN.match(self.value):
            self.add_error("must be a valid URL if specified")
        return self

    # --- Length checks ---

    def is_title(self) -> Self:
        """Populated and at most 60 characters."""
        if self.value == "" or len(self.value) > TITLE_MAX_LENGTH:
            self.add_error("must be populated and no more than %d characters", TITLE_MAX_LENGTH)
        return self

    def is_subtitle(self) -> Self:
        """Empty, or at most 120 characters."""
        if len(self.value) > SUBTITLE_MAX_LENGTH:
            self.add_error("must be no more than %d characters if specified", SUBTITLE_MAX_LENGTH)
        return self

    def is_description(self) -> Self:
        """Empty, or at most 1000 characters."""
        if len(self.value) > DESCRIPTION_MAX_LENGTH:
            self.add_error(
                "must be no more than %d characters if specified", DESCRIPTION_MAX_LENGTH
            )
        return self

    def length_in_range(self, minimum: int, maximum: int) -> Self:
        length = len(self.value)
        if length < minimum or length > maximum:
            self.add_error("must be between %d and %d characters", minimum, maximum)
        return self


def string(value: str) -> StringArg:
    """Return a string argument for *value*."""
    return StringArg(value)
