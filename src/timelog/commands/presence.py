"""Commands: enter and exit (workplace presence)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timelog.commands._base import TimelogCommand
from timelog.commands._params import datetime_argument, forgetable, forgot_option
from timelog.domain.commands import RawEnter, RawExit

if TYPE_CHECKING:
    from timelog.commands._context import AppContext


@click.command(
    cls=TimelogCommand,
    examples="""\
  timelog enter
  timelog enter 2024-03-04T08:55:00
  timelog enter --forgot 2024-03-04T09:00:00+01:00""",
)
@datetime_argument()
@forgot_option()
@click.pass_obj
def enter(app: AppContext, datetime_text: str | None, forgot: bool) -> None:
    """Registers the time the user arrived at the workplace.

    DATETIME is when the user arrived (default: now).
    """
    app.run(RawEnter(at=forgetable(datetime_text, forgot)))


@click.command(
    "exit",
    cls=TimelogCommand,
    examples="""\
  timelog exit
  timelog exit 2024-03-04T17:30:00
  timelog exit -f 2024-03-04T18:00""",
)
@datetime_argument()
@forgot_option()
@click.pass_obj
def exit_cmd(app: AppContext, datetime_text: str | None, forgot: bool) -> None:
    """Registers the time the user left the workplace.

    DATETIME is when the user left (default: now).
    """
    app.run(RawExit(at=forgetable(datetime_text, forgot)))
