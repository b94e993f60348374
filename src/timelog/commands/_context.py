"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the clock used for "now", runs raw commands
through the resolve service, and centralizes result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from timelog.config.logging import bind_command, configure_logging
from timelog.domain.timestamps import SystemClock
from timelog.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from pydantic import BaseModel

    from timelog.config.settings import TimelogSettings
    from timelog.domain.timestamps import Clock
    from timelog.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: TimelogSettings, clock: Clock | None = None) -> None:
        self.settings = settings
        self.clock: Clock = clock or SystemClock(settings.clock.tzinfo())

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def run(self, raw: BaseModel) -> None:
        """Resolve *raw* against the context clock and emit the outcome."""
        from timelog.services.resolve import ResolveService

        bind_command(str(getattr(raw, "kind", "")))
        self.emit(ResolveService(self.clock).resolve(raw))

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        stream = sys.stdout if result.ok else sys.stderr
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            color=not self.settings.json_output and stream.isatty(),
            datetime_format=self.settings.display.datetime_format,
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
