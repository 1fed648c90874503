"""Tests for CheckResult formatting."""

from __future__ import annotations

import json

from argval.output.formatters import format_result
from argval.services.result import CheckResult


def _invalid() -> CheckResult:
    return CheckResult(
        ok=False,
        op="check_string",
        value="ftp://x",
        errors=["must start with https://", "must be a valid URL"],
        message="must start with https://; must be a valid URL",
    )


class TestHumanOutput:
    def test_ok(self) -> None:
        result = CheckResult(ok=True, op="check_number", value=42)
        output = format_result(result, no_color=True)
        assert output == "OK: check_number\n  value: 42"

    def test_invalid_lists_errors(self) -> None:
        output = format_result(_invalid(), no_color=True)
        assert output.splitlines() == [
            "INVALID: check_string",
            "  value: 'ftp://x'",
            "  - must start with https://",
            "  - must be a valid URL",
        ]

    def test_list_value_compact(self) -> None:
        result = CheckResult(ok=True, op="check_list", value=["a", "b"])
        assert "  value: [\"a\",\"b\"]" in format_result(result, no_color=True)

    def test_markup_in_values_escaped(self) -> None:
        result = CheckResult(
            ok=False, op="check_string", value="[bold]x", errors=["must match [a-z]+"],
            message="must match [a-z]+",
        )
        output = format_result(result, no_color=True)
        assert "'[bold]x'" in output
        assert "must match [a-z]+" in output


class TestJsonOutput:
    def test_json_has_all_fields(self) -> None:
        data = json.loads(format_result(_invalid(), json_output=True))
        assert data == {
            "ok": False,
            "op": "check_string",
            "value": "ftp://x",
            "errors": ["must start with https://", "must be a valid URL"],
            "message": "must start with https://; must be a valid URL",
        }

    def test_json_ok(self) -> None:
        data = json.loads(
            format_result(CheckResult(ok=True, op="check_list", value=[]), json_output=True)
        )
        assert data["ok"] is True
        assert data["errors"] == []
        assert data["message"] is None
