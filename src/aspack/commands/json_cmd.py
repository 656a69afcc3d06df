"""Command group: JSON file helpers (get, format)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from aspack.commands._base import AspackGroup
from aspack.domain.coercion import MISSING
from aspack.domain.json_utils import parse

if TYPE_CHECKING:
    from aspack.commands._context import AppContext


@click.group(
    "json",
    cls=AspackGroup,
    examples="""\
  aspack json get config.json server.port
  aspack json get users.json 0.email --default '"unknown"'
  aspack json format payload.json --indent 4
  aspack json format payload.json --indent 0""",
)
def json_group() -> None:
    """Read and re-serialize JSON files."""


@json_group.command()
@click.argument("file", type=click.Path(path_type=Path))
@click.argument("path")
@click.option(
    "--default",
    "default",
    default=None,
    help="Value to print when PATH does not resolve (parsed as JSON, else used as text).",
)
@click.pass_obj
def get(app: AppContext, file: Path, path: str, default: str | None) -> None:
    """Print the value at dot-separated PATH inside FILE."""
    from aspack.services.json_tools import JsonService

    fallback = MISSING if default is None else parse(default, default=default)
    app.emit(JsonService(app.settings).get(file, path, default=fallback))


@json_group.command("format")
@click.argument("file", type=click.Path(path_type=Path))
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=None,
    help="Spaces per level; 0 for compact. Defaults to [format] indent.",
)
@click.pass_obj
def format_cmd(app: AppContext, file: Path, indent: int | None) -> None:
    """Re-serialize the JSON in FILE."""
    from aspack.services.json_tools import JsonService

    app.emit(JsonService(app.settings).format(file, indent=indent))
