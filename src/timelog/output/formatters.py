"""Output mode selection.

The CLI renders a ServiceResult for humans (Rich text), for scripts
(``--json``), or minimally (``--quiet``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from timelog.output.renderers import DEFAULT_DATETIME_FORMAT, render_quiet, render_result

if TYPE_CHECKING:
    from timelog.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """How a result should be presented."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    color: bool = False
    datetime_format: str = DEFAULT_DATETIME_FORMAT


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult according to *settings*.

    JSON wins over quiet; quiet wins over the default human rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(
        result,
        datetime_format=settings.datetime_format,
        verbose=settings.verbose,
        color=settings.color,
    )
