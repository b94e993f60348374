"""Rich renderers for resolution results.

A successful result carries a resolved command as ``result.data``; it is
shown as a status line followed by one line per resolved field.  A failed
result carries the rendered ``CommandParseError`` text, whose leading
``error:`` tag is styled.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any

from rich.text import Text

from timelog.domain.durations import format_duration
from timelog.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from timelog.services.result import ServiceResult

DEFAULT_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S %z"

_ERROR_TAG = "error:"


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    datetime_format: str = DEFAULT_DATETIME_FORMAT,
    verbose: bool = False,
    color: bool = False,
) -> str:
    """Render a ServiceResult to a (possibly styled) string."""
    console = create_console(color=color)

    if result.ok:
        _status_line(console, result)
        _render_command(console, result.data, datetime_format)
    else:
        _render_error(console, result, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        return result.error.message if result.error else "error: unknown failure"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    status = Text("OK", style="timelog.ok")
    console.print(status, Text(f"  {result.op}", style="timelog.op"), sep="")


def _field(console: Console, key: str, value: Text | str) -> None:
    if isinstance(value, str):
        value = Text(value)
    console.print(Text(f"  {key}: ", style="timelog.key"), value, sep="")


def _timestamp_text(value: datetime, datetime_format: str, *, forgotten: bool = False) -> Text:
    text = Text(value.strftime(datetime_format), style="timelog.time")
    if forgotten:
        text.append(" (forgot)", style="timelog.forgot")
    return text


def _period_token(period: dict[str, Any]) -> str:
    return str(period.get("weekday") or period.get("kind", ""))


def _render_goal_action(console: Console, action: dict[str, Any]) -> None:
    _field(console, "action", str(action.get("kind", "")))
    period = action.get("period")
    if isinstance(period, dict):
        _field(console, "period", _period_token(period))
    duration = action.get("duration")
    if isinstance(duration, timedelta):
        _field(console, "duration", format_duration(duration))


def _render_command(console: Console, data: dict[str, Any], datetime_format: str) -> None:
    for key, value in data.items():
        if key == "kind" or value is None:
            continue
        if key == "action" and isinstance(value, dict):
            _render_goal_action(console, value)
        elif isinstance(value, dict) and "timestamp" in value:
            _field(
                console,
                key,
                _timestamp_text(
                    value["timestamp"], datetime_format, forgotten=bool(value.get("forgotten"))
                ),
            )
        elif isinstance(value, datetime):
            _field(console, key, _timestamp_text(value, datetime_format))
        elif isinstance(value, bool):
            _field(console, key, "yes" if value else "no")
        elif key == "mnemonic":
            _field(console, key, Text(str(value), style="timelog.mnemonic"))
        else:
            _field(console, key, str(value))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(console: Console, result: ServiceResult, *, verbose: bool = False) -> None:
    err = result.error
    message = err.message if err else f"{_ERROR_TAG} could not resolve {result.op}"

    headline, _, rest = message.partition("\n")
    if headline.startswith(_ERROR_TAG):
        tag = Text(_ERROR_TAG.rstrip(":"), style="timelog.error")
        console.print(tag, Text(":" + headline[len(_ERROR_TAG) :]), sep="")
    else:
        console.print(Text(headline))
    if rest:
        console.print(Text(rest))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))
