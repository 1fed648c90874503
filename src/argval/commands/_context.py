"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy CheckService construction and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from argval.output.formatters import format_result

if TYPE_CHECKING:
    from argval.config.settings import ArgvalSettings
    from argval.services.check import CheckService
    from argval.services.result import CheckResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: ArgvalSettings) -> None:
        self.settings = settings
        self._service: CheckService | None = None

        from argval.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> CheckService:
        """The check service (created lazily on first access)."""
        if self._service is None:
            from argval.services.check import CheckService

            self._service = CheckService(self.settings)
        return self._service

    def emit(self, result: CheckResult) -> None:
        """Format and output a CheckResult with correct exit semantics.

        * Valid (``result.ok``): writes to stdout, returns normally.
        * Invalid: writes to stderr, exits with code 1.
        """
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
