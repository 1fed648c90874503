"""Tests for the check CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from argval.cli import cli


class TestCheckString:
    def test_valid_email(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "string", "jan@example.com", "--email"])
        assert result.exit_code == 0
        assert "OK: check_string" in result.stdout
        assert result.stderr == ""

    def test_invalid_goes_to_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["check", "string", "ftp://x", "--starts-with", "https://", "--url"]
        )
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "INVALID: check_string" in result.stderr
        assert "- must start with https://" in result.stderr
        assert "- must be a valid URL" in result.stderr

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "string", "", "--populated"])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["ok"] is False
        assert data["op"] == "check_string"
        assert data["errors"] == ["must be populated"]

    def test_default_and_one_of(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["--json", "check", "string", "", "--default", "guest", "--one-of", "guest",
             "--one-of", "admin"],
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["value"] == "guest"

    def test_length(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "string", "abcdef", "--length", "2", "4"])
        assert result.exit_code == 1
        assert "must be between 2 and 4 characters" in result.stderr

    def test_invalid_regex_is_usage_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "string", "abc", "--matches", "("])
        assert result.exit_code == 2
        assert "invalid regular expression" in result.stderr

    def test_email_mx(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        class _Resolver:
            def __init__(self, config: object) -> None:
                pass

            def __call__(self, domain: str) -> bool:
                return domain == "example.com"

        monkeypatch.setattr("argval.infrastructure.dns.DnsMxResolver", _Resolver)
        ok = cli_runner.invoke(cli, ["check", "string", "jan@example.com", "--email-mx"])
        assert ok.exit_code == 0
        missing = cli_runner.invoke(cli, ["check", "string", "jan@nowhere.test", "--email-mx"])
        assert missing.exit_code == 1
        assert "email dns must have valid mx record" in missing.stderr


class TestCheckNumber:
    def test_in_range(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "number", "42", "--gte", "1", "--lt", "100"])
        assert result.exit_code == 0
        assert "value: 42" in result.stdout

    def test_out_of_range(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "number", "150", "--lt", "100"])
        assert result.exit_code == 1
        assert "must be less than 100" in result.stderr

    def test_float(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "number", "1.5", "--gt", "2"])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["value"] == 1.5
        assert data["errors"] == ["must be greater than 2"]

    def test_default(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "check", "number", "0", "--default", "10", "--gt", "5"]
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["value"] == 10

    def test_not_a_number(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "number", "abc"])
        assert result.exit_code == 2
        assert "'abc' is not a number" in result.stderr

    def test_negative_value(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "number", "-5", "--gte", "-10"])
        assert result.exit_code == 0
        assert "value: -5" in result.stdout

    def test_negative_value_out_of_range(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "number", "-1.5", "--gt", "0"])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["value"] == -1.5
        assert data["errors"] == ["must be greater than 0"]


class TestCheckList:
    def test_each_one_of(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["check", "list", "admin", "root", "--each-one-of", "admin", "--each-one-of", "editor"],
        )
        assert result.exit_code == 1
        assert "each value must be one of admin, editor" in result.stderr

    def test_empty_populated(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "list", "--populated"])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["value"] == []
        assert data["errors"] == ["must be populated"]

    def test_valid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "list", "a", "b", "c", "--len-gte", "3"])
        assert result.exit_code == 0
        assert "OK: check_list" in result.stdout

    def test_dash_values_after_separator(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "check", "list", "--len-gte", "2", "--", "-a", "b"]
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["value"] == ["-a", "b"]


class TestConfiguredSeparator:
    def test_separator_from_toml(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "argval.toml").write_text('[messages]\nseparator = " | "\n')
        result = cli_runner.invoke(
            cli, ["--json", "check", "number", "0", "--populated", "--gt", "1"]
        )
        assert result.exit_code == 1
        assert json.loads(result.stderr)["message"] == "must be populated | must be greater than 1"


EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["check", "--examples"], ["argval check string", "argval check number"]),
    (["check", "string", "--examples"], ["--email-mx", "--length 2 4"]),
    (["check", "number", "--examples"], ["--gte 1 --lt 100", "number -5 --gte -10"]),
    (["check", "list", "--examples"], ["--each-populated", "-- -a b"]),
]


@pytest.mark.parametrize(("args", "keywords"), EXAMPLES_COMMANDS)
def test_examples_flag(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for keyword in keywords:
        assert keyword in result.output
