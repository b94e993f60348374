"""Tests for start, stop, commit and resolve."""

from __future__ import annotations

import json
from datetime import UTC, datetime

import pytest
from click.testing import CliRunner

from timelog.cli import cli


@pytest.mark.usefixtures("_isolated_env")
class TestStartCommand:
    def test_start_with_time(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "start", "review", "2024-03-04T10:15"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["mnemonic"] == "review"
        assert data["at"] == {"timestamp": "2024-03-04T10:15:00Z", "forgotten": False}

    def test_start_requires_mnemonic(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["start"])
        assert result.exit_code == 2


@pytest.mark.usefixtures("_isolated_env")
class TestStopCommand:
    def test_stop_bare(self, cli_runner: CliRunner) -> None:
        before = datetime.now(UTC)
        result = cli_runner.invoke(cli, ["--json", "stop", "--commit"])
        after = datetime.now(UTC)
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["mnemonic"] is None
        assert data["commit"] is True
        assert data["at"]["forgotten"] is False
        assert before <= datetime.fromisoformat(data["at"]["timestamp"]) <= after

    def test_stop_named_task(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "stop", "review", "2024-03-04T12:00", "-f"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["mnemonic"] == "review"
        assert data["at"] == {"timestamp": "2024-03-04T12:00:00Z", "forgotten": True}
        assert data["commit"] is False

    def test_stop_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["stop", "review", "2024-03-04T12:00", "-c"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "OK  stop",
            "  mnemonic: review",
            "  at: 2024-03-04 12:00:00 +0000",
            "  commit: yes",
        ]


@pytest.mark.usefixtures("_isolated_env")
class TestCommitCommand:
    def test_commit_until(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "commit", "review", "2024-03-04T18:00+02:00"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["until"] == "2024-03-04T18:00:00+02:00"

    def test_commit_has_no_forgot_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["commit", "review", "--forgot"])
        assert result.exit_code == 2

    def test_commit_bad_time(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["commit", "review", "2024-02-30"])
        assert result.exit_code == 1
        assert "could not parse the date/time argument" in result.stderr


@pytest.mark.usefixtures("_isolated_env")
class TestResolveCommand:
    def test_resolve_all(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "resolve"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"] == {"kind": "resolve", "mnemonic": None}

    def test_resolve_task(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["resolve", "review"])
        assert result.exit_code == 0
        assert "mnemonic: review" in result.stdout
