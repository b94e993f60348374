"""Goal periods: the recurrence units a time goal applies to.

A period is a calendar month, a week, a day, or one specific weekday.
Keywords are matched exactly: no case folding, no trimming.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Self

from pydantic import BaseModel, model_validator

from timelog.domain.errors import InvalidGoalPeriod


class PeriodKind(StrEnum):
    """Top-level period kinds."""

    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    WEEKDAY = "weekday"


class Weekday(StrEnum):
    """Days of the week, Sunday first."""

    SUNDAY = "sunday"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"


class GoalPeriod(BaseModel):
    """A goal period: month, week, day, or ``weekday`` with its day.

    INVARIANT: ``weekday`` is set if and only if ``kind`` is WEEKDAY.
    """

    model_config = {"frozen": True}

    kind: PeriodKind
    weekday: Weekday | None = None

    @model_validator(mode="after")
    def _check_weekday(self) -> Self:
        if (self.kind is PeriodKind.WEEKDAY) != (self.weekday is not None):
            msg = "weekday must be given exactly when kind is 'weekday'"
            raise ValueError(msg)
        return self

    @property
    def token(self) -> str:
        """The keyword this period was parsed from."""
        if self.weekday is not None:
            return self.weekday.value
        return self.kind.value

    def __str__(self) -> str:
        return self.token


_SIMPLE_PERIODS: dict[str, PeriodKind] = {
    "month": PeriodKind.MONTH,
    "week": PeriodKind.WEEK,
    "day": PeriodKind.DAY,
}

_WEEKDAY_TOKENS: dict[str, Weekday] = {day.value: day for day in Weekday}


def parse_goal_period(text: str) -> GoalPeriod:
    """Map a period keyword to a :class:`GoalPeriod`.

    Raises:
        InvalidGoalPeriod: for anything but the ten known keywords.
    """
    kind = _SIMPLE_PERIODS.get(text)
    if kind is not None:
        return GoalPeriod(kind=kind)
    weekday = _WEEKDAY_TOKENS.get(text)
    if weekday is not None:
        return GoalPeriod(kind=PeriodKind.WEEKDAY, weekday=weekday)
    raise InvalidGoalPeriod(text)
