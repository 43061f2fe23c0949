"""Tests for the format_result dispatcher and OutputSettings."""

import json

from tickago.output.formatters import OutputSettings, format_result
from tickago.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="INVALID_DATE", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        settings = OutputSettings(json_output=True)
        output = format_result(_ok("parse", iso="2024-01-31T00:00:00"), settings=settings)
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "parse"
        assert data["data"]["iso"] == "2024-01-31T00:00:00"

    def test_json_mode_error(self) -> None:
        output = format_result(_err("parse", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["code"] == "INVALID_DATE"
        assert data["error"]["message"] == "Bad"

    def test_json_beats_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        output = format_result(_ok("moment", text="just now", is_future=False), settings=settings)
        assert json.loads(output)["data"]["text"] == "just now"


class TestFormatResultHuman:
    def test_default_settings(self) -> None:
        output = format_result(_ok("moment", text="3 days ago", is_future=False))
        assert output == "3 days ago"

    def test_quiet(self) -> None:
        settings = OutputSettings(quiet=True)
        result = _ok("parse", iso="2024-01-31T00:00:00", epoch_ms=0.0)
        assert format_result(result, settings=settings) == "2024-01-31T00:00:00"

    def test_error(self) -> None:
        output = format_result(_err("compare", "Invalid date: 'x'"))
        assert "ERROR" in output
        assert "compare" in output
        assert "Invalid date: 'x'" in output
