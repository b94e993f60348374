"""Error taxonomy for command resolution.

Leaf errors are raised by the individual parsers.  Each layer above wraps
the error it received without changing it, so the original diagnostic is
always reachable through ``cause`` (and ``__cause__``).

Hierarchy
---------
TimelogError
├── DateTimeParseError
├── DurationParseError
├── InvalidGoalPeriod
├── GoalActionParseError
└── CommandParseError
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

VALID_PERIOD_TOKENS: tuple[str, ...] = (
    "month",
    "week",
    "day",
    "sunday",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
)


class TimelogError(Exception):
    """Base exception for every user-input error raised by timelog."""


# --- Leaf errors -----------------------------------------------------------


class DateTimeParseError(TimelogError):
    """Raised when date/time text does not match the calendar grammar.

    ``diagnostic`` is the message of the underlying parser, kept verbatim.
    """

    def __init__(self, text: str, diagnostic: str) -> None:
        super().__init__(diagnostic)
        self.text = text
        self.diagnostic = diagnostic

    def __str__(self) -> str:
        return self.diagnostic


class DurationErrorKind(StrEnum):
    """Why a duration string was rejected."""

    INVALID_FORMAT = "invalid_format"
    INVALID_HOUR_NUMBER = "invalid_hour_number"
    INVALID_MINUTE_NUMBER = "invalid_minute_number"
    EMPTY_DURATION = "empty_duration"


_DURATION_MESSAGES: dict[DurationErrorKind, str] = {
    DurationErrorKind.INVALID_FORMAT: "invalid duration format",
    DurationErrorKind.INVALID_HOUR_NUMBER: "invalid hour number",
    DurationErrorKind.INVALID_MINUTE_NUMBER: "invalid minute number",
    DurationErrorKind.EMPTY_DURATION: "empty duration",
}


class DurationParseError(TimelogError):
    """Raised when a ``<h>h <m>m`` duration cannot be parsed."""

    def __init__(self, kind: DurationErrorKind) -> None:
        super().__init__(_DURATION_MESSAGES[kind])
        self.kind = kind


class InvalidGoalPeriod(TimelogError):
    """Raised when a goal period keyword is not one of the known tokens."""

    def __init__(self, token: str) -> None:
        super().__init__(
            "invalid goal period\n"
            f"valid period values: {', '.join(VALID_PERIOD_TOKENS)}."
        )
        self.token = token


# --- Goal action -----------------------------------------------------------


class GoalActionErrorKind(StrEnum):
    """Why a goal action/argument combination was rejected."""

    UNEXPECTED_ARG = "unexpected_arg"
    MISSING_ARG = "missing_arg"
    INVALID_GOAL_PERIOD = "invalid_goal_period"
    DURATION_PARSE_ERROR = "duration_parse_error"


_GOAL_ACTION_MESSAGES: dict[GoalActionErrorKind, str] = {
    GoalActionErrorKind.UNEXPECTED_ARG: "time/erase argument is not expected",
    GoalActionErrorKind.MISSING_ARG: "time/erase argument is missing",
}


class GoalActionParseError(TimelogError):
    """Raised when a goal action cannot be built from its arguments.

    The two combination errors carry no cause.  The wrapping kinds keep
    the period or duration error they were built from.
    """

    def __init__(
        self,
        kind: GoalActionErrorKind,
        cause: InvalidGoalPeriod | DurationParseError | None = None,
    ) -> None:
        message = str(cause) if cause is not None else _GOAL_ACTION_MESSAGES[kind]
        super().__init__(message)
        self.kind = kind
        self.cause = cause

    @classmethod
    def wrap(cls, error: InvalidGoalPeriod | DurationParseError) -> GoalActionParseError:
        """Wrap a period or duration error into a goal action error."""
        if isinstance(error, InvalidGoalPeriod):
            return cls(GoalActionErrorKind.INVALID_GOAL_PERIOD, error)
        if isinstance(error, DurationParseError):
            return cls(GoalActionErrorKind.DURATION_PARSE_ERROR, error)
        msg = f"Cannot wrap {type(error).__name__} into GoalActionParseError"
        raise TypeError(msg)


# --- Top level -------------------------------------------------------------


class CommandErrorKind(StrEnum):
    """Which kind of argument failed to resolve."""

    DATETIME_PARSE_ERROR = "datetime_parse_error"
    DURATION_PARSE_ERROR = "duration_parse_error"
    INVALID_GOAL_PERIOD = "invalid_goal_period"
    GOAL_ACTION_PARSE_ERROR = "goal_action_parse_error"


_COMMAND_HEADLINES: dict[CommandErrorKind, str] = {
    CommandErrorKind.DATETIME_PARSE_ERROR: "could not parse the date/time argument.",
    CommandErrorKind.DURATION_PARSE_ERROR: "could not parse the duration argument.",
    CommandErrorKind.INVALID_GOAL_PERIOD: "could not parse the period argument.",
    CommandErrorKind.GOAL_ACTION_PARSE_ERROR: "could not parse the goal action.",
}

CommandCause = DateTimeParseError | DurationParseError | InvalidGoalPeriod | GoalActionParseError


class CommandParseError(TimelogError):
    """The single error returned when a raw command cannot be resolved.

    Rendered as::

        error: could not parse the <argument>.
        cause: <the wrapped error's own rendering>
    """

    def __init__(self, kind: CommandErrorKind, cause: CommandCause) -> None:
        self.kind = kind
        self.cause = cause
        super().__init__(self.render())

    @property
    def headline(self) -> str:
        """The line naming which kind of argument failed."""
        return _COMMAND_HEADLINES[self.kind]

    @property
    def code(self) -> str:
        """Stable upper-case error code used in service results."""
        return self.kind.value.upper()

    def render(self) -> str:
        return f"error: {self.headline}\ncause: {self.cause}"

    def __str__(self) -> str:
        return self.render()

    def to_detail(self) -> dict[str, Any]:
        """Structured description of the failure for machine output."""
        detail: dict[str, Any] = {
            "argument": self.kind.value,
            "cause": str(self.cause),
        }
        reason = getattr(self.cause, "kind", None)
        if reason is not None:
            detail["reason"] = str(reason)
        if isinstance(self.cause, DateTimeParseError):
            detail["input"] = self.cause.text
        elif isinstance(self.cause, InvalidGoalPeriod):
            detail["input"] = self.cause.token
        return detail

    @classmethod
    def wrap(cls, error: CommandCause) -> CommandParseError:
        """Wrap any resolution error into the top-level error."""
        if isinstance(error, DateTimeParseError):
            return cls(CommandErrorKind.DATETIME_PARSE_ERROR, error)
        if isinstance(error, DurationParseError):
            return cls(CommandErrorKind.DURATION_PARSE_ERROR, error)
        if isinstance(error, InvalidGoalPeriod):
            return cls(CommandErrorKind.INVALID_GOAL_PERIOD, error)
        if isinstance(error, GoalActionParseError):
            return cls(CommandErrorKind.GOAL_ACTION_PARSE_ERROR, error)
        msg = f"Cannot wrap {type(error).__name__} into CommandParseError"
        raise TypeError(msg)
