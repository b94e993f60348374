"""Commands: start, stop, commit and resolve work on tasks."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timelog.commands._base import TimelogCommand
from timelog.commands._params import (
    datetime_argument,
    forgetable,
    forgot_option,
    mnemonic_argument,
)
from timelog.domain.commands import RawCommit, RawResolve, RawStart, RawStop

if TYPE_CHECKING:
    from timelog.commands._context import AppContext


@click.command(
    cls=TimelogCommand,
    examples="""\
  timelog start review
  timelog start review 2024-03-04T10:15
  timelog start review --forgot 2024-03-04T10:00""",
)
@mnemonic_argument(required=True)
@datetime_argument()
@forgot_option()
@click.pass_obj
def start(app: AppContext, mnemonic: str, datetime_text: str | None, forgot: bool) -> None:
    """Registers the time the user started working on a task.

    DATETIME is when the user started working (default: now).
    """
    app.run(RawStart(mnemonic=mnemonic, at=forgetable(datetime_text, forgot)))


@click.command(
    cls=TimelogCommand,
    examples="""\
  timelog stop
  timelog stop review 2024-03-04T12:00
  timelog stop review --commit""",
)
@mnemonic_argument(required=False)
@datetime_argument()
@forgot_option()
@click.option("-c", "--commit", is_flag=True, help="Execute the commit subcommand after stop.")
@click.pass_obj
def stop(
    app: AppContext,
    mnemonic: str | None,
    datetime_text: str | None,
    forgot: bool,
    commit: bool,
) -> None:
    """Registers the time the user stopped working on the current task.

    DATETIME is when the user stopped working (default: now).
    """
    app.run(RawStop(mnemonic=mnemonic, at=forgetable(datetime_text, forgot), commit=commit))


@click.command(
    cls=TimelogCommand,
    examples="""\
  timelog commit review
  timelog commit review 2024-03-04T18:00""",
)
@mnemonic_argument(required=True)
@datetime_argument()
@click.pass_obj
def commit(app: AppContext, mnemonic: str, datetime_text: str | None) -> None:
    """Marks a time period worked on a task as logged in an external tool.

    DATETIME is the moment until which all time has been logged
    (default: now).
    """
    app.run(RawCommit(mnemonic=mnemonic, until=datetime_text))


@click.command(
    cls=TimelogCommand,
    examples="""\
  timelog resolve
  timelog resolve review""",
)
@mnemonic_argument(required=False)
@click.pass_obj
def resolve(app: AppContext, mnemonic: str | None) -> None:
    """Allows the user to provide a better estimate of date/time of the entries marked as forgot."""
    app.run(RawResolve(mnemonic=mnemonic))
