"""Tests for the json command group."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from aspack.cli import cli

WriteJson = Callable[[str, Any], Path]

DOC = {"user": {"name": "Ada", "roles": ["admin", "dev"]}, "active": True}


@pytest.fixture
def doc(write_json: WriteJson) -> Path:
    return write_json("doc.json", DOC)


@pytest.mark.usefixtures("_isolated_cwd")
class TestJsonGet:
    def test_string_value(self, cli_runner: CliRunner, doc: Path) -> None:
        result = cli_runner.invoke(cli, ["json", "get", str(doc), "user.name"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == "Ada"

    def test_list_value(self, cli_runner: CliRunner, doc: Path) -> None:
        result = cli_runner.invoke(cli, ["json", "get", str(doc), "user.roles"])
        assert json.loads(result.stdout) == ["admin", "dev"]

    def test_index(self, cli_runner: CliRunner, doc: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "json", "get", str(doc), "user.roles.0"])
        assert result.stdout.strip() == '"admin"'

    def test_missing_path(self, cli_runner: CliRunner, doc: Path) -> None:
        result = cli_runner.invoke(cli, ["json", "get", str(doc), "user.email"])
        assert result.exit_code == 1
        assert "Path 'user.email' not found" in result.stderr

    def test_default_parsed_as_json(self, cli_runner: CliRunner, doc: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "json", "get", str(doc), "user.age", "--default", "0"]
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["value"] == 0

    def test_default_plain_text(self, cli_runner: CliRunner, doc: Path) -> None:
        result = cli_runner.invoke(
            cli, ["json", "get", str(doc), "user.email", "--default", "unknown"]
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout) == "unknown"


@pytest.mark.usefixtures("_isolated_cwd")
class TestJsonFormat:
    def test_default_indent(self, cli_runner: CliRunner, doc: Path) -> None:
        result = cli_runner.invoke(cli, ["json", "format", str(doc)])
        assert result.exit_code == 0
        assert '\n  "user": {' in result.stdout
        assert json.loads(result.stdout) == DOC

    def test_compact(self, cli_runner: CliRunner, doc: Path) -> None:
        result = cli_runner.invoke(cli, ["json", "format", str(doc), "--indent", "0"])
        assert result.stdout.strip() == (
            '{"user":{"name":"Ada","roles":["admin","dev"]},"active":true}'
        )

    def test_indent_from_config(self, cli_runner: CliRunner, doc: Path, tmp_path: Path) -> None:
        (tmp_path / "aspack.toml").write_text("[format]\nindent = 4\n")
        result = cli_runner.invoke(cli, ["json", "format", str(doc)])
        assert '\n    "user": {' in result.stdout

    def test_negative_indent_rejected(self, cli_runner: CliRunner, doc: Path) -> None:
        result = cli_runner.invoke(cli, ["json", "format", str(doc), "--indent", "-1"])
        assert result.exit_code == 2

    def test_invalid_json_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text("{nope")
        result = cli_runner.invoke(cli, ["--json", "json", "format", str(bad)])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "INVALID_JSON"
