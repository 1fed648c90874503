"""printf-style message formatting for validation errors.

Templates use ``%``-directives. ``%v`` is accepted as an alias of ``%s``
so "any value" placeholders read naturally in check messages.

INVARIANT: ``format_message`` never raises. A template that does not fit
its arguments degrades to positional substitution.
"""

from __future__ import annotations

import re
from typing import Any

# %[flags][width][.precision]verb, or a literal %%.
_DIRECTIVE_PATTERN = re.compile(r"%[-+ #0]*(?:\d+|\*)?(?:\.\d+)?[a-zA-Z%]")

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def render_arg(arg: Any) -> Any:
    """Render collection arguments as ``"a, b, c"``; leave scalars untouched."""
    if isinstance(arg, _SEQUENCE_TYPES):
        return ", ".join(str(item) for item in arg)
    return arg


def _normalize_verbs(template: str) -> str:
    def replace(match: re.Match[str]) -> str:
        token = match.group(0)
        if token.endswith("v"):
            return token[:-1] + "s"
        return token

    return _DIRECTIVE_PATTERN.sub(replace, template)


def _substitute(template: str, args: tuple[Any, ...]) -> str:
    """Best-effort fallback: replace directives in order with ``str(arg)``.

    Directives without a matching argument stay verbatim; surplus
    arguments are appended, space-separated.
    """
    remaining = list(args)

    def replace(match: re.Match[str]) -> str:
        token = match.group(0)
        if token == "%%":
            return "%"
        if not remaining:
            return token
        return str(remaining.pop(0))

    text = _DIRECTIVE_PATTERN.sub(replace, template)
    if remaining:
        text = " ".join([text, *(str(arg) for arg in remaining)])
    return text


def format_message(template: str, *args: Any) -> str:
    """Format *template* with positional *args*.

    Examples:
        >>> format_message("must be %v", "admin")
        'must be admin'
        >>> format_message("must be one of %v", ["a", "b"])
        'must be one of a, b'
        >>> format_message("must contain %d values", "three")
        'must contain three values'
    """
    if not args:
        return template.replace("%%", "%")
    rendered = tuple(render_arg(arg) for arg in args)
    try:
        return _normalize_verbs(template) % rendered
    except (TypeError, ValueError, KeyError):
        return _substitute(template, rendered)
