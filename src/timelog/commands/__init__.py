"""Subcommand modules for timelog.

Provides register_commands() which uses deferred imports to keep
``timelog --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the twelve subcommands on the root CLI group.

    Registration order is the order shown in ``--help``.
    """
    from timelog.commands.goal import goal, goals
    from timelog.commands.presence import enter, exit_cmd
    from timelog.commands.status import status
    from timelog.commands.tasks import create, delete, edit
    from timelog.commands.work import commit, resolve, start, stop

    for command in (
        enter,
        exit_cmd,
        create,
        edit,
        delete,
        start,
        stop,
        commit,
        resolve,
        goal,
        goals,
        status,
    ):
        cli.add_command(command)
