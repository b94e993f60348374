"""Raw → resolved command conversion.

Each raw command kind has one resolver in :data:`_RESOLVERS`.  Pass-through
fields are copied; date/time fields default to the clock's "now"; the goal
action is validated against its argument.  The first nested failure aborts
the whole resolution and is raised as one :class:`CommandParseError`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel

from timelog.domain.commands import (
    Commit,
    Create,
    Delete,
    Edit,
    Enter,
    Exit,
    Goal,
    Goals,
    RawCommit,
    RawCreate,
    RawDelete,
    RawEdit,
    RawEnter,
    RawExit,
    RawGoal,
    RawGoals,
    RawResolve,
    RawStart,
    RawStatus,
    RawStop,
    Resolve,
    Start,
    Status,
    Stop,
)
from timelog.domain.errors import (
    CommandParseError,
    DateTimeParseError,
    DurationParseError,
    GoalActionParseError,
    InvalidGoalPeriod,
)
from timelog.domain.goals import resolve_goal_action
from timelog.domain.timestamps import (
    Clock,
    resolve_datetime,
    resolve_forgetable,
    system_clock,
)

logger = logging.getLogger(__name__)


def _enter(raw: RawEnter, clock: Clock) -> Enter:
    return Enter(at=resolve_forgetable(raw.at, clock=clock))


def _exit(raw: RawExit, clock: Clock) -> Exit:
    return Exit(at=resolve_forgetable(raw.at, clock=clock))


def _create(raw: RawCreate, _clock: Clock) -> Create:
    return Create(mnemonic=raw.mnemonic, code=raw.code)


def _edit(raw: RawEdit, _clock: Clock) -> Edit:
    return Edit(mnemonic=raw.mnemonic, code=raw.code)


def _delete(raw: RawDelete, _clock: Clock) -> Delete:
    return Delete(mnemonic=raw.mnemonic)


def _start(raw: RawStart, clock: Clock) -> Start:
    return Start(mnemonic=raw.mnemonic, at=resolve_forgetable(raw.at, clock=clock))


def _stop(raw: RawStop, clock: Clock) -> Stop:
    return Stop(
        mnemonic=raw.mnemonic,
        at=resolve_forgetable(raw.at, clock=clock),
        commit=raw.commit,
    )


def _commit(raw: RawCommit, clock: Clock) -> Commit:
    return Commit(mnemonic=raw.mnemonic, until=resolve_datetime(raw.until, clock=clock))


def _resolve(raw: RawResolve, _clock: Clock) -> Resolve:
    return Resolve(mnemonic=raw.mnemonic)


def _goal(raw: RawGoal, _clock: Clock) -> Goal:
    return Goal(action=resolve_goal_action(raw.action, raw.argument), mnemonic=raw.mnemonic)


def _goals(raw: RawGoals, _clock: Clock) -> Goals:
    return Goals(mnemonic=raw.mnemonic)


def _status(raw: RawStatus, _clock: Clock) -> Status:
    return Status(mnemonic=raw.mnemonic)


_RESOLVERS: dict[type[BaseModel], Callable[[Any, Clock], BaseModel]] = {
    RawEnter: _enter,
    RawExit: _exit,
    RawCreate: _create,
    RawEdit: _edit,
    RawDelete: _delete,
    RawStart: _start,
    RawStop: _stop,
    RawCommit: _commit,
    RawResolve: _resolve,
    RawGoal: _goal,
    RawGoals: _goals,
    RawStatus: _status,
}


def resolve_command(raw: BaseModel, *, clock: Clock = system_clock) -> BaseModel:
    """Convert a raw command into its resolved counterpart.

    Args:
        raw: One of the ``Raw*`` command models.
        clock: Source of "now" for omitted date/time arguments.

    Raises:
        CommandParseError: wrapping the first resolution failure.
        TypeError: if *raw* is not a raw command model.
    """
    resolver = _RESOLVERS.get(type(raw))
    if resolver is None:
        msg = f"No resolver registered for {type(raw).__name__}"
        raise TypeError(msg)

    try:
        command = resolver(raw, clock)
    except (
        DateTimeParseError,
        DurationParseError,
        InvalidGoalPeriod,
        GoalActionParseError,
    ) as exc:
        error = CommandParseError.wrap(exc)
        logger.debug("Resolution of %s failed: %s", type(raw).__name__, error.kind)
        raise error from exc

    logger.debug("Resolved %s command", command.kind)
    return command
