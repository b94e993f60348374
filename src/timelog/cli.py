"""Root CLI group for timelog with global flags and command registration."""

from __future__ import annotations

import click

from timelog import __version__
from timelog.commands import register_commands
from timelog.commands._base import TimelogGroup
from timelog.commands._context import AppContext
from timelog.config.settings import TimelogSettings


@click.group(
    cls=TimelogGroup,
    invoke_without_command=True,
    examples="""\
  timelog enter
  timelog start review
  timelog stop --commit
  timelog goal --period day --time "8h 48m"
  timelog --json status""",
)
@click.version_option(version=__version__, prog_name="timelog")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Track work time on tasks from the command line."""
    settings = TimelogSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
