"""Rich/JSON output helpers.

The CLI renders CheckResult for humans (Rich output, colors) or machines
(--json).
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.markup import escape

from argval.output.console import create_console, get_output

if TYPE_CHECKING:
    from argval.services.result import CheckResult


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"), default=str)
    return repr(value)


def format_result(
    result: CheckResult,
    *,
    json_output: bool = False,
    no_color: bool = False,
) -> str:
    """Format a CheckResult for display.

    Args:
        result: The check result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
        no_color: Disable ANSI colors in human output.
    """
    if json_output:
        return result.model_dump_json(indent=2)

    console = create_console(no_color=no_color)
    value = escape(_format_value(result.value))
    if result.ok:
        console.print(f"[argval.ok]OK[/]: [argval.op]{result.op}[/]")
        console.print(f"  [argval.key]value:[/] {value}")
    else:
        console.print(f"[argval.invalid]INVALID[/]: [argval.op]{result.op}[/]")
        console.print(f"  [argval.key]value:[/] {value}")
        for message in result.errors:
            console.print(f"  - [argval.error]{escape(message)}[/]")
    return get_output(console).rstrip("\n")
