"""argval: fluent argument validation.

Wrap a value, chain checks, then ask whether it is valid::

    from argval import all_errors, number, string

    name = string(request.name).populated().length_in_range(2, 40)
    age = number(request.age).gte(0).lt(150)
    if err := all_errors(name, age):
        raise err

For "first failure only" validation use :func:`errors` instead.
"""

from __future__ import annotations

from argval.core.aggregate import all_errors, all_valid, any_invalid, first_error
from argval.core.arg import Arg, ArgFacade, Argument, new
from argval.core.collector import ErrorCollector, errors
from argval.core.comparable import ComparableArg, comparable
from argval.core.errors import ValidationError
from argval.core.formatting import format_message
from argval.core.list import ListArg, list_of
from argval.core.number import NumberArg, number
from argval.core.string import StringArg, string

__version__ = "0.4.0"

# Short constructor aliases.
C = comparable
N = number
S = string
L = list_of

__all__ = [
    "Arg",
    "ArgFacade",
    "Argument",
    "C",
    "ComparableArg",
    "ErrorCollector",
    "L",
    "ListArg",
    "N",
    "NumberArg",
    "S",
    "StringArg",
    "ValidationError",
    "all_errors",
    "all_valid",
    "any_invalid",
    "comparable",
    "errors",
    "first_error",
    "format_message",
    "list_of",
    "new",
    "number",
    "string",
    "__version__",
]
