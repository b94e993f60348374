"""Tests for the Rich result renderers."""

from datetime import UTC, datetime, timedelta

from timelog.output.renderers import render_quiet, render_result
from timelog.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────

NOW = datetime(2024, 3, 4, 9, 30, tzinfo=UTC)


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data={"kind": op, **data})


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


# ── Command renderer ─────────────────────────────────────────────────


class TestCommandRenderer:
    def test_status_line(self) -> None:
        output = render_result(_ok("status"))
        assert output.splitlines() == ["OK  status"]

    def test_kind_and_none_fields_skipped(self) -> None:
        output = render_result(_ok("create", mnemonic="review", code=None))
        assert "kind" not in output
        assert "code" not in output
        assert "  mnemonic: review" in output.splitlines()

    def test_timestamp_uses_format(self) -> None:
        result = _ok("enter", at={"timestamp": NOW, "forgotten": False})
        output = render_result(result, datetime_format="%Y-%m-%d %H:%M")
        assert "  at: 2024-03-04 09:30" in output.splitlines()
        assert "forgot" not in output

    def test_forgotten_timestamp_marked(self) -> None:
        result = _ok("exit", at={"timestamp": NOW, "forgotten": True})
        output = render_result(result)
        assert "  at: 2024-03-04 09:30:00 +0000 (forgot)" in output.splitlines()

    def test_commit_until(self) -> None:
        output = render_result(_ok("commit", mnemonic="review", until=NOW), datetime_format="%H:%M")
        assert "  until: 09:30" in output.splitlines()

    def test_stop_commit_flag(self) -> None:
        result = _ok("stop", at={"timestamp": NOW, "forgotten": False}, commit=True)
        assert "  commit: yes" in render_result(result).splitlines()

    def test_goal_set(self) -> None:
        action = {
            "kind": "set",
            "period": {"kind": "weekday", "weekday": "friday"},
            "duration": timedelta(hours=8, minutes=48),
        }
        lines = render_result(_ok("goal", action=action)).splitlines()
        assert "  action: set" in lines
        assert "  period: friday" in lines
        assert "  duration: 8h 48m" in lines

    def test_goal_erase_all(self) -> None:
        lines = render_result(_ok("goal", action={"kind": "erase_all"})).splitlines()
        assert "  action: erase_all" in lines
        assert not any("period" in line for line in lines)

    def test_color_emits_ansi(self) -> None:
        output = render_result(_ok("status"), color=True)
        assert "\x1b[" in output

    def test_plain_has_no_ansi(self) -> None:
        assert "\x1b[" not in render_result(_ok("status"))


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_message_lines_preserved(self) -> None:
        message = "error: could not parse the duration argument.\ncause: empty duration"
        output = render_result(_err("goal", "DURATION_PARSE_ERROR", message))
        assert output.splitlines() == [
            "error: could not parse the duration argument.",
            "cause: empty duration",
        ]

    def test_verbose_shows_detail(self) -> None:
        result = _err("start", "DATETIME_PARSE_ERROR", "error: x\ncause: y", input="soon")
        output = render_result(result, verbose=True)
        assert "detail" in output
        assert "input: soon" in output

    def test_detail_hidden_by_default(self) -> None:
        result = _err("start", "DATETIME_PARSE_ERROR", "error: x\ncause: y", input="soon")
        assert "detail" not in render_result(result)

    def test_error_tag_colored(self) -> None:
        result = _err("goal", "INVALID_GOAL_PERIOD", "error: bad\ncause: worse")
        output = render_result(result, color=True)
        assert "\x1b[" in output
        assert "bad" in output


# ── Quiet renderer ───────────────────────────────────────────────────


class TestQuietRenderer:
    def test_success(self) -> None:
        assert render_quiet(_ok("start", mnemonic="x")) == "OK: start"

    def test_error(self) -> None:
        assert render_quiet(_err("start", "C", "error: nope")) == "error: nope"
