"""Shared Click parameters for timelog subcommands."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

from timelog.domain.timestamps import ForgetableTimestampInput

MNEMONIC_HELP = "Primary reference to the task"
TASK_CODE_HELP = "Reference to the task used in an external tool"
FORGOT_HELP = "Marks date/time as uncertain"

Decorator = Callable[[Callable[..., Any]], Callable[..., Any]]


def _non_empty(_ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    if value is not None and not value.strip():
        msg = "must not be empty"
        raise click.BadParameter(msg, param=param)
    return value


def mnemonic_argument(*, required: bool) -> Decorator:
    """Positional MNEMONIC; required ones reject blank text."""
    return click.argument(
        "mnemonic",
        required=required,
        default=None,
        callback=_non_empty if required else None,
    )


def datetime_argument() -> Decorator:
    """Optional positional DATETIME; omitted means "now"."""
    return click.argument("datetime_text", metavar="[DATETIME]", required=False, default=None)


def forgot_option() -> Decorator:
    return click.option("-f", "--forgot", is_flag=True, help=FORGOT_HELP)


def forgetable(datetime_text: str | None, forgot: bool) -> ForgetableTimestampInput:
    """Bundle a DATETIME argument and its ``--forgot`` flag."""
    return ForgetableTimestampInput(text=datetime_text, forgotten=forgot)
