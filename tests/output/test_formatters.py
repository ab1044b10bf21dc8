"""Tests for the format_result dispatcher and OutputSettings."""

import json

from dasshboard.output.formatters import OutputSettings, format_result
from dasshboard.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="ERR", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResult:
    def test_json_mode(self) -> None:
        output = format_result(_ok("sync", added=["web"]), json_output=True)
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["added"] == ["web"]

    def test_json_takes_precedence_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_ok(), settings=settings))["op"] == "test"

    def test_quiet_mode(self) -> None:
        output = format_result(_ok("update_layout", layout="list"), settings=OutputSettings(quiet=True))
        assert output == "OK: update_layout"

    def test_human_mode(self) -> None:
        output = format_result(_err("open_folder", "no editor"))
        assert "ERROR" in output
        assert "no editor" in output
