"""Date/time resolution with "default to now" semantics.

Date/time arguments are optional on the command line.  Absent text is the
deliberate "not yet resolved" state; it resolves to the clock's current
time at the moment of resolution.  The clock is injected so callers (and
tests) control what "now" means.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Protocol

from pydantic import AwareDatetime, BaseModel

from timelog.domain.errors import DateTimeParseError


class Clock(Protocol):
    """Source of the current time.

    ``now()`` must return a timezone-aware datetime.  ``localize()``
    attaches the clock's zone to a naive datetime and returns aware
    values unchanged; it never reads the time.
    """

    def now(self) -> datetime: ...  # pragma: no cover

    def localize(self, value: datetime) -> datetime: ...  # pragma: no cover


@dataclass(frozen=True)
class SystemClock:
    """Wall clock in *timezone*, or the system local zone when ``None``."""

    timezone: tzinfo | None = None

    def now(self) -> datetime:
        if self.timezone is None:
            return datetime.now().astimezone()
        return datetime.now(self.timezone)

    def localize(self, value: datetime) -> datetime:
        if value.tzinfo is not None:
            return value
        if self.timezone is None:
            return value.astimezone()
        return value.replace(tzinfo=self.timezone)


@dataclass(frozen=True)
class FixedClock:
    """Clock frozen at *instant* (an aware datetime)."""

    instant: datetime

    def __post_init__(self) -> None:
        if self.instant.tzinfo is None:
            msg = "FixedClock requires a timezone-aware datetime"
            raise ValueError(msg)

    def now(self) -> datetime:
        return self.instant

    def localize(self, value: datetime) -> datetime:
        if value.tzinfo is not None:
            return value
        return value.replace(tzinfo=self.instant.tzinfo)


system_clock = SystemClock()


class ForgetableTimestampInput(BaseModel):
    """Optional date/time text plus the "forgot" flag, as typed by the user."""

    model_config = {"frozen": True}

    text: str | None = None
    forgotten: bool = False


class ForgetableTimestamp(BaseModel):
    """A resolved timestamp, flagged when it is an after-the-fact estimate."""

    model_config = {"frozen": True}

    timestamp: AwareDatetime
    forgotten: bool = False


def parse_datetime(text: str, *, clock: Clock = system_clock) -> datetime:
    """Parse ISO-8601 calendar date/time text.

    Naive values are placed in the clock's timezone.

    Raises:
        DateTimeParseError: carrying the parser's message verbatim.
    """
    try:
        return clock.localize(datetime.fromisoformat(text))
    except (ValueError, OverflowError) as exc:
        # Localizing dates at the edge of the calendar can overflow.
        raise DateTimeParseError(text, str(exc)) from exc


def resolve_datetime(text: str | None, *, clock: Clock = system_clock) -> datetime:
    """Resolve optional date/time text, reading the clock only when absent."""
    if text is None:
        return clock.now()
    return parse_datetime(text, clock=clock)


def resolve_forgetable(
    value: ForgetableTimestampInput, *, clock: Clock = system_clock
) -> ForgetableTimestamp:
    """Resolve a :class:`ForgetableTimestampInput`, keeping its flag."""
    return ForgetableTimestamp(
        timestamp=resolve_datetime(value.text, clock=clock),
        forgotten=value.forgotten,
    )
