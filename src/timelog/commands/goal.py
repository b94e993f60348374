"""Commands: goal (set or erase time goals) and goals (display them)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timelog.commands._base import TimelogCommand
from timelog.commands._params import mnemonic_argument
from timelog.domain.commands import RawGoal, RawGoals
from timelog.domain.goals import (
    DurationArgument,
    EraseAllRequest,
    EraseArgument,
    GoalActionRequest,
    GoalArgumentRequest,
    SetPeriodRequest,
)

if TYPE_CHECKING:
    from timelog.commands._context import AppContext


def _action_request(period: str | None, erase_all: bool) -> GoalActionRequest:
    if erase_all and period is not None:
        msg = "--period and --erase_all are mutually exclusive."
        raise click.UsageError(msg)
    if erase_all:
        return EraseAllRequest()
    if period is None:
        msg = "One of --period or --erase_all is required."
        raise click.UsageError(msg)
    return SetPeriodRequest(period=period)


def _argument_request(time_text: str | None, erase: bool) -> GoalArgumentRequest | None:
    if erase and time_text is not None:
        msg = "--time and --erase are mutually exclusive."
        raise click.UsageError(msg)
    if erase:
        return EraseArgument()
    if time_text is not None:
        return DurationArgument(text=time_text)
    return None


@click.command(
    cls=TimelogCommand,
    examples="""\
  timelog goal --period day --time "8h 48m"
  timelog goal -p friday -t 6h review
  timelog goal --period week --erase
  timelog goal --erase_all review""",
)
@click.option(
    "-p",
    "--period",
    default=None,
    help="Period of the goal (month, week, day, or a day of the week).",
)
@click.option(
    "--erase_all",
    "erase_all",
    is_flag=True,
    help="Erase the goals for all periods of the given task or work in general.",
)
@click.option("-t", "--time", "time_text", default=None, help="Expected worked time (e.g. 8h 48m).")
@click.option("-e", "--erase", is_flag=True, help="Erase the time goal for the given period.")
@mnemonic_argument(required=False)
@click.pass_obj
def goal(
    app: AppContext,
    period: str | None,
    erase_all: bool,
    time_text: str | None,
    erase: bool,
    mnemonic: str | None,
) -> None:
    """Sets a time goal for a provided task or for the work in general."""
    action = _action_request(period, erase_all)
    argument = _argument_request(time_text, erase)
    app.run(RawGoal(action=action, argument=argument, mnemonic=mnemonic))


@click.command(
    cls=TimelogCommand,
    examples="""\
  timelog goals
  timelog goals review""",
)
@mnemonic_argument(required=False)
@click.pass_obj
def goals(app: AppContext, mnemonic: str | None) -> None:
    """Displays the time goals for a provided task or for the work in general."""
    app.run(RawGoals(mnemonic=mnemonic))
