"""Tests for TimelogSettings: unified settings with TOML source."""

from pathlib import Path
from zoneinfo import ZoneInfo

import click
import pytest

from timelog.config.settings import TimelogSettings


@pytest.mark.usefixtures("_isolated_env")
class TestDefaults:
    def test_all_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        monkeypatch.delenv("TIMELOG_CLOCK__TIMEZONE")
        settings = TimelogSettings.from_cli()
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.clock.timezone is None
        assert settings.clock.tzinfo() is None
        assert settings.display.datetime_format == "%Y-%m-%d %H:%M:%S %z"

    def test_frozen(self) -> None:
        settings = TimelogSettings.from_cli()
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


@pytest.mark.usefixtures("_isolated_env")
class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TIMELOG_CLOCK__TIMEZONE")
        (tmp_path / "timelog.toml").write_text(
            '[clock]\ntimezone = "Europe/Lisbon"\n[display]\ndatetime_format = "%H:%M"\n'
        )
        settings = TimelogSettings.from_cli()
        assert settings.clock.timezone == "Europe/Lisbon"
        assert settings.clock.tzinfo() == ZoneInfo("Europe/Lisbon")
        assert settings.display.datetime_format == "%H:%M"
        assert settings.config_path == tmp_path / "timelog.toml"

    def test_sparse_override(self, tmp_path: Path) -> None:
        """Only overridden fields change; the rest keeps defaults."""
        (tmp_path / "timelog.toml").write_text('[display]\ndatetime_format = "%c"\n')
        settings = TimelogSettings.from_cli()
        assert settings.display.datetime_format == "%c"
        assert settings.clock.timezone == "UTC"  # from env

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "timelog.toml").write_text("")
        settings = TimelogSettings.from_cli()
        assert settings.display.datetime_format == "%Y-%m-%d %H:%M:%S %z"

    def test_discovered_from_parent(self, tmp_path: Path) -> None:
        (tmp_path / "timelog.toml").write_text('[display]\ndatetime_format = "%F"\n')
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        settings = TimelogSettings.from_cli(start=nested)
        assert settings.display.datetime_format == "%F"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[display]\ndatetime_format = "%R"\n')
        settings = TimelogSettings.from_cli(config_path=str(custom))
        assert settings.display.datetime_format == "%R"
        assert settings.config_path == custom

    def test_missing_explicit_config(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="Config file not found"):
            TimelogSettings.from_cli(config_path=str(tmp_path / "nope.toml"))

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "timelog.toml").write_text("[clock\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            TimelogSettings.from_cli()

    def test_unknown_timezone(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TIMELOG_CLOCK__TIMEZONE")
        (tmp_path / "timelog.toml").write_text('[clock]\ntimezone = "Mars/Olympus"\n')
        with pytest.raises(click.ClickException, match="Invalid configuration"):
            TimelogSettings.from_cli()


@pytest.mark.usefixtures("_isolated_env")
class TestPrecedence:
    def test_env_overrides_toml(self, tmp_path: Path) -> None:
        (tmp_path / "timelog.toml").write_text('[clock]\ntimezone = "Europe/Lisbon"\n')
        settings = TimelogSettings.from_cli()
        assert settings.clock.timezone == "UTC"

    def test_cli_flags_override_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TIMELOG_QUIET", "false")
        settings = TimelogSettings.from_cli(json_output=True, quiet=True, verbose=True)
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_env_flag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TIMELOG_JSON_OUTPUT", "true")
        assert TimelogSettings.from_cli().json_output is True

    def test_config_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "elsewhere.toml"
        custom.write_text('[display]\ndatetime_format = "%D"\n')
        monkeypatch.setenv("TIMELOG_CONFIG", str(custom))
        assert TimelogSettings.from_cli().display.datetime_format == "%D"

    def test_config_env_var_missing_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TIMELOG_CONFIG", str(tmp_path / "gone.toml"))
        with pytest.raises(click.ClickException, match="Config file not found"):
            TimelogSettings.from_cli()

    def test_user_config_used_without_local_file(self, tmp_path: Path) -> None:
        user_file = tmp_path / ".xdg" / "timelog" / "timelog.toml"
        user_file.parent.mkdir(parents=True)
        user_file.write_text('[display]\ndatetime_format = "%T"\n')
        work = tmp_path / "work"
        work.mkdir()
        settings = TimelogSettings.from_cli(start=work)
        assert settings.display.datetime_format == "%T"
        assert settings.config_path == user_file
