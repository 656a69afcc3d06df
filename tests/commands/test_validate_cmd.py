"""Tests for the validate CLI command."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from aspack.cli import cli

WriteJson = Callable[[str, Any], Path]


@pytest.fixture
def schema_file(write_json: WriteJson, signup_schema: dict[str, Any]) -> Path:
    return write_json("schema.json", signup_schema)


@pytest.mark.usefixtures("_isolated_cwd")
class TestValidateCommand:
    def test_valid_record(
        self, cli_runner: CliRunner, write_json: WriteJson, schema_file: Path
    ) -> None:
        record = write_json("rec.json", {"name": "Ada", "email": "ada@example.com"})
        result = cli_runner.invoke(cli, ["validate", str(record), "--schema", str(schema_file)])
        assert result.exit_code == 0
        assert result.stdout.startswith("OK")
        assert "email" in result.stdout

    def test_invalid_record_exits_1(
        self, cli_runner: CliRunner, write_json: WriteJson, schema_file: Path
    ) -> None:
        record = write_json("rec.json", {"name": "", "email": "ada@example.com", "age": 15})
        result = cli_runner.invoke(cli, ["validate", str(record), "-s", str(schema_file)])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "This field is required" in result.stderr
        assert "Minimum value is 18" in result.stderr

    def test_json_output(
        self, cli_runner: CliRunner, write_json: WriteJson, schema_file: Path
    ) -> None:
        record = write_json("rec.json", {"name": "", "age": 15})
        result = cli_runner.invoke(
            cli, ["--json", "validate", str(record), "-s", str(schema_file)]
        )
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["ok"] is False
        assert payload["op"] == "validate"
        assert payload["error"]["code"] == "VALIDATION_FAILED"
        assert payload["data"]["errorMap"] == {
            "name": ["This field is required", "Minimum length is 2"],
            "email": ["This field is required"],
            "age": ["Minimum value is 18"],
        }

    def test_json_output_valid(
        self, cli_runner: CliRunner, write_json: WriteJson, schema_file: Path
    ) -> None:
        record = write_json("rec.json", {"name": "Ada", "email": "ada@example.com"})
        result = cli_runner.invoke(
            cli, ["--json", "validate", str(record), "-s", str(schema_file)]
        )
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["data"]["isValid"] is True

    def test_single_field(
        self, cli_runner: CliRunner, write_json: WriteJson, schema_file: Path
    ) -> None:
        record = write_json("rec.json", {"name": "", "email": "ada@example.com"})
        result = cli_runner.invoke(
            cli,
            ["--json", "validate", str(record), "-s", str(schema_file), "--field", "email"],
        )
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["op"] == "validate_field"
        assert payload["data"]["field"] == "email"

    def test_schema_required(self, cli_runner: CliRunner, write_json: WriteJson) -> None:
        record = write_json("rec.json", {})
        result = cli_runner.invoke(cli, ["validate", str(record)])
        assert result.exit_code == 2
        assert "--schema" in result.stderr

    def test_missing_record_file(
        self, cli_runner: CliRunner, tmp_path: Path, schema_file: Path
    ) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "validate", str(tmp_path / "nope.json"), "-s", str(schema_file)]
        )
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "FILE_NOT_FOUND"


@pytest.mark.usefixtures("_isolated_cwd")
class TestUnknownRules:
    @pytest.fixture
    def files(self, write_json: WriteJson) -> tuple[Path, Path]:
        return (
            write_json("rec.json", {"name": "Al"}),
            write_json("schema.json", {"name": {"minLenght": 3}}),
        )

    def test_warning_on_stderr(self, cli_runner: CliRunner, files: tuple[Path, Path]) -> None:
        record, schema = files
        result = cli_runner.invoke(cli, ["validate", str(record), "-s", str(schema)])
        assert result.exit_code == 0
        assert "WARNING: Unknown rule 'minLenght' on field 'name' was ignored" in result.stderr

    def test_strict_flag(self, cli_runner: CliRunner, files: tuple[Path, Path]) -> None:
        record, schema = files
        result = cli_runner.invoke(
            cli, ["--json", "validate", str(record), "-s", str(schema), "--strict"]
        )
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "INVALID_SCHEMA"

    def test_strict_from_config(
        self, cli_runner: CliRunner, files: tuple[Path, Path], tmp_path: Path
    ) -> None:
        (tmp_path / "aspack.toml").write_text("[validation]\nstrict = true\n")
        record, schema = files
        result = cli_runner.invoke(cli, ["validate", str(record), "-s", str(schema)])
        assert result.exit_code == 1
        assert "minLenght" in result.stderr

    def test_no_strict_overrides_config(
        self, cli_runner: CliRunner, files: tuple[Path, Path], tmp_path: Path
    ) -> None:
        (tmp_path / "aspack.toml").write_text("[validation]\nstrict = true\n")
        record, schema = files
        result = cli_runner.invoke(
            cli, ["validate", str(record), "-s", str(schema), "--no-strict"]
        )
        assert result.exit_code == 0
