"""Locate the ``timelog.toml`` to load.

Lookup order: the nearest ``timelog.toml`` in the start directory or any
ancestor, then the per-user file ``$XDG_CONFIG_HOME/timelog/timelog.toml``
(``~/.config`` when the variable is unset).  An explicit path from
``--config`` or ``TIMELOG_CONFIG`` bypasses the search entirely; see
:func:`explicit_config`.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "timelog.toml"
CONFIG_ENV_VAR = "TIMELOG_CONFIG"


def user_config_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / "timelog" / CONFIG_FILENAME


def _candidates(start: Path) -> Iterator[Path]:
    for directory in (start, *start.parents):
        yield directory / CONFIG_FILENAME
    yield user_config_path()


def explicit_config(cli_value: str | None = None) -> Path | None:
    """The path named by ``--config``, else by ``TIMELOG_CONFIG``, if any."""
    value = cli_value or os.environ.get(CONFIG_ENV_VAR)
    return Path(value) if value else None


def find_config(start: Path | None = None) -> Path | None:
    """First existing config file searching up from *start* (default: cwd)."""
    root = (start or Path.cwd()).resolve()
    return next((path for path in _candidates(root) if path.is_file()), None)
