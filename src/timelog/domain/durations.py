"""Duration grammar for goal times.

Accepted form: an optional ``<hours>h`` group, optional whitespace, and an
optional ``<minutes>m`` group (``"8h 48m"``, ``"8h"``, ``"48m"``,
``"1h30m"``).  The pattern must match the whole text
(no trailing newline) and is compiled once at import.
"""

from __future__ import annotations

import re
from datetime import timedelta

from timelog.domain.errors import DurationErrorKind, DurationParseError

DURATION_PATTERN: re.Pattern[str] = re.compile(
    r"(?:(?P<hours>\S+?)h)?\s*(?:(?P<minutes>\S+?)m)?"
)

_NUMBER_PATTERN: re.Pattern[str] = re.compile(r"[0-9]+")

_ONE_MINUTE = timedelta(minutes=1)


def _to_delta(digits: str, unit: str, error_kind: DurationErrorKind) -> timedelta:
    """Convert a captured group to a timedelta of *unit* or raise *error_kind*."""
    if _NUMBER_PATTERN.fullmatch(digits) is None:
        raise DurationParseError(error_kind)
    try:
        return timedelta(**{unit: int(digits)})
    except (ValueError, OverflowError) as exc:
        raise DurationParseError(error_kind) from exc


def parse_duration(text: str) -> timedelta:
    """Parse ``"<h>h <m>m"`` text into a duration.

    Failures are checked in order: format, hour number, minute number,
    then empty input.  ``"0h 0m"`` is a valid zero duration; ``""`` is not.

    Raises:
        DurationParseError: with the kind of the first failing check.
    """
    match = DURATION_PATTERN.fullmatch(text)
    if match is None:
        raise DurationParseError(DurationErrorKind.INVALID_FORMAT)

    hours_text = match.group("hours")
    minutes_text = match.group("minutes")

    hours = (
        _to_delta(hours_text, "hours", DurationErrorKind.INVALID_HOUR_NUMBER)
        if hours_text is not None
        else None
    )
    minutes = (
        _to_delta(minutes_text, "minutes", DurationErrorKind.INVALID_MINUTE_NUMBER)
        if minutes_text is not None
        else None
    )

    if hours is None and minutes is None:
        raise DurationParseError(DurationErrorKind.EMPTY_DURATION)

    try:
        return (hours or timedelta()) + (minutes or timedelta())
    except OverflowError as exc:
        # Only reachable when both groups are present; the minutes tipped it over.
        raise DurationParseError(DurationErrorKind.INVALID_MINUTE_NUMBER) from exc


def format_duration(duration: timedelta) -> str:
    """Render a duration back into the ``"2h 30m"`` form."""
    total_minutes = duration // _ONE_MINUTE
    hours, minutes = divmod(total_minutes, 60)
    if hours and minutes:
        return f"{hours}h {minutes}m"
    if hours:
        return f"{hours}h"
    return f"{minutes}m"
