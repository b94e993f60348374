"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, timelog.toml only contains
overrides.  An empty (or missing) file is a valid configuration.
"""

from __future__ import annotations

from datetime import tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, field_validator


class ClockConfig(BaseModel):
    """[clock] section."""

    model_config = {"frozen": True}

    timezone: str | None = None
    """IANA zone for "now" and for date/times typed without an offset.

    ``None`` uses the system local zone.
    """

    @field_validator("timezone")
    @classmethod
    def _known_zone(cls, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            msg = f"unknown timezone: {value!r}"
            raise ValueError(msg) from exc
        return value

    def tzinfo(self) -> tzinfo | None:
        """The configured zone, or ``None`` for the system local zone."""
        if self.timezone is None:
            return None
        return ZoneInfo(self.timezone)


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    datetime_format: str = "%Y-%m-%d %H:%M:%S %z"
