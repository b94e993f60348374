"""Goal actions: what the ``goal`` command asks for, raw and resolved.

The raw side mirrors the CLI: an action (``--period <p>`` or
``--erase_all``) and an optional argument (``--time <t>`` or ``--erase``).
The resolved side is one of three actions:

================  ==========  ===========================
action            argument    result
================  ==========  ===========================
EraseAll          absent      ``EraseAllGoals``
EraseAll          present     error: unexpected argument
Set(period)       absent      error: missing argument
Set(period)       Erase       ``EraseGoal(period)``
Set(period)       Time(t)     ``SetGoal(period, duration)``
================  ==========  ===========================
"""

from __future__ import annotations

from datetime import timedelta
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from timelog.domain.durations import parse_duration
from timelog.domain.errors import (
    DurationParseError,
    GoalActionErrorKind,
    GoalActionParseError,
    InvalidGoalPeriod,
)
from timelog.domain.periods import GoalPeriod, parse_goal_period

# ---------------------------------------------------------------------------
# Raw requests
# ---------------------------------------------------------------------------


class SetPeriodRequest(BaseModel):
    """``--period <text>``: act on the goal of one period."""

    model_config = {"frozen": True}

    kind: Literal["set_period"] = "set_period"
    period: str


class EraseAllRequest(BaseModel):
    """``--erase_all``: drop the goals of every period."""

    model_config = {"frozen": True}

    kind: Literal["erase_all"] = "erase_all"


GoalActionRequest = Annotated[SetPeriodRequest | EraseAllRequest, Field(discriminator="kind")]


class DurationArgument(BaseModel):
    """``--time <text>``: the goal duration, still unparsed."""

    model_config = {"frozen": True}

    kind: Literal["duration"] = "duration"
    text: str


class EraseArgument(BaseModel):
    """``--erase``: drop the goal of the selected period."""

    model_config = {"frozen": True}

    kind: Literal["erase"] = "erase"


GoalArgumentRequest = Annotated[DurationArgument | EraseArgument, Field(discriminator="kind")]

# ---------------------------------------------------------------------------
# Resolved actions
# ---------------------------------------------------------------------------


class SetGoal(BaseModel):
    """Set the expected worked time for a period."""

    model_config = {"frozen": True}

    kind: Literal["set"] = "set"
    period: GoalPeriod
    duration: timedelta


class EraseGoal(BaseModel):
    """Remove the goal of a single period."""

    model_config = {"frozen": True}

    kind: Literal["erase"] = "erase"
    period: GoalPeriod


class EraseAllGoals(BaseModel):
    """Remove the goals of every period."""

    model_config = {"frozen": True}

    kind: Literal["erase_all"] = "erase_all"


GoalAction = Annotated[SetGoal | EraseGoal | EraseAllGoals, Field(discriminator="kind")]


def resolve_goal_action(
    action: SetPeriodRequest | EraseAllRequest,
    argument: DurationArgument | EraseArgument | None,
) -> SetGoal | EraseGoal | EraseAllGoals:
    """Validate an action/argument pair and build the resolved action.

    The period is parsed before the duration; the first failure wins.

    Raises:
        GoalActionParseError: for a bad combination, or wrapping the
            period/duration error unchanged.
    """
    if isinstance(action, EraseAllRequest):
        if argument is not None:
            raise GoalActionParseError(GoalActionErrorKind.UNEXPECTED_ARG)
        return EraseAllGoals()

    if argument is None:
        raise GoalActionParseError(GoalActionErrorKind.MISSING_ARG)

    try:
        period = parse_goal_period(action.period)
        if isinstance(argument, EraseArgument):
            return EraseGoal(period=period)
        return SetGoal(period=period, duration=parse_duration(argument.text))
    except (InvalidGoalPeriod, DurationParseError) as exc:
        raise GoalActionParseError.wrap(exc) from exc
