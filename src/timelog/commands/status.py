"""Command: status of the user's work."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timelog.commands._base import TimelogCommand
from timelog.commands._params import mnemonic_argument
from timelog.domain.commands import RawStatus

if TYPE_CHECKING:
    from timelog.commands._context import AppContext


@click.command(
    cls=TimelogCommand,
    examples="""\
  timelog status
  timelog --json status review""",
)
@mnemonic_argument(required=False)
@click.pass_obj
def status(app: AppContext, mnemonic: str | None) -> None:
    """Displays general information about the current status of the user's work."""
    app.run(RawStatus(mnemonic=mnemonic))
