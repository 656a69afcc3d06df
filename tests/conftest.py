"""Shared pytest fixtures and test helpers for aspack tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from aspack.config.settings import AspackSettings

_SIGNUP_SCHEMA: dict[str, dict[str, Any]] = {
    "name": {"required": True, "minLength": 2, "maxLength": 40},
    "email": {"required": True, "type": "email"},
    "age": {"type": "number", "min": 18, "max": 130},
    "website": {"type": "url"},
}


@pytest.fixture
def signup_schema() -> dict[str, dict[str, Any]]:
    """A record schema exercising most rules."""
    return {field: dict(rules) for field, rules in _SIGNUP_SCHEMA.items()}


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> AspackSettings:
    """Default settings, unaffected by the caller's environment."""
    for key in ("ASPACK_CONFIG", "ASPACK_VALIDATION__STRICT", "ASPACK_FORMAT__INDENT"):
        monkeypatch.delenv(key, raising=False)
    return AspackSettings()


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Write a JSON document under tmp_path and return its path."""

    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from a temp directory with no aspack.toml and no ASPACK_* env vars.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test classes.
    """
    for key in ("ASPACK_CONFIG", "ASPACK_VALIDATION__STRICT", "ASPACK_FORMAT__INDENT"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handlers and levels installed by CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    root_level = root.level
    aspack_level = logging.getLogger("aspack").level
    yield
    root.handlers = handlers
    root.setLevel(root_level)
    logging.getLogger("aspack").setLevel(aspack_level)
