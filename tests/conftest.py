"""Shared pytest fixtures for timelog tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import UTC, datetime
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from timelog.domain.timestamps import FixedClock


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fixed_now() -> datetime:
    """The instant every ``fixed_clock`` reports as "now"."""
    return datetime(2024, 3, 4, 9, 30, tzinfo=UTC)


@pytest.fixture
def fixed_clock(fixed_now: datetime) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty directory with no timelog environment overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_env")`` on CLI and
    settings test classes so a stray ``timelog.toml`` (local or per-user) or
    ``TIMELOG_*`` variable never leaks in.  The clock zone is pinned to UTC.
    """
    for name in ("TIMELOG_CONFIG", "TIMELOG_DISPLAY__DATETIME_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TIMELOG_CLOCK__TIMEZONE", "UTC")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / ".xdg"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handler changes made by ``configure_logging`` during a test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    timelog_logger = logging.getLogger("timelog")
    timelog_level = timelog_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    timelog_logger.setLevel(timelog_level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
