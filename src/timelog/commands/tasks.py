"""Commands: create, edit and delete tasks."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timelog.commands._base import TimelogCommand
from timelog.commands._params import mnemonic_argument
from timelog.domain.commands import RawCreate, RawDelete, RawEdit

if TYPE_CHECKING:
    from timelog.commands._context import AppContext


@click.command(
    cls=TimelogCommand,
    aliases=("new",),
    examples="""\
  timelog create review
  timelog create review JIRA-1234
  timelog new standup""",
)
@mnemonic_argument(required=True)
@click.argument("code", required=False, default=None)
@click.pass_obj
def create(app: AppContext, mnemonic: str, code: str | None) -> None:
    """Creates a new task.

    MNEMONIC is the primary reference to the task; CODE references it in
    an external tool.
    """
    app.run(RawCreate(mnemonic=mnemonic, code=code))


@click.command(
    cls=TimelogCommand,
    examples="""\
  timelog edit review JIRA-4321
  timelog edit review""",
)
@mnemonic_argument(required=True)
@click.argument("code", required=False, default=None)
@click.pass_obj
def edit(app: AppContext, mnemonic: str, code: str | None) -> None:
    """Changes the code and name of a task."""
    app.run(RawEdit(mnemonic=mnemonic, code=code))


@click.command(
    cls=TimelogCommand,
    aliases=("del",),
    examples="""\
  timelog delete review
  timelog del standup""",
)
@mnemonic_argument(required=True)
@click.pass_obj
def delete(app: AppContext, mnemonic: str) -> None:
    """Removes a task."""
    app.run(RawDelete(mnemonic=mnemonic))
