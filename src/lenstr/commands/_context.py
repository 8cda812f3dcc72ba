"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Builds services on demand and owns result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lenstr.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from lenstr.config.settings import LenstrSettings
    from lenstr.services.demo import DemoService
    from lenstr.services.result import ServiceResult
    from lenstr.services.strings import StringService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: LenstrSettings) -> None:
        self.settings = settings
        self._strings: StringService | None = None

        from lenstr.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from lenstr.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def strings(self) -> StringService:
        """The string service (created lazily on first access)."""
        if self._strings is None:
            from lenstr.services.strings import StringService

            self._strings = StringService(self.settings)
        return self._strings

    def demo(self) -> DemoService:
        from lenstr.services.demo import DemoService

        return DemoService(self.settings)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout; warnings go to stderr in human mode.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
