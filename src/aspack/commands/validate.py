"""Command: validate a JSON record against a JSON schema."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from aspack.commands._base import AspackCommand

if TYPE_CHECKING:
    from aspack.commands._context import AppContext


@click.command(
    cls=AspackCommand,
    examples="""\
  aspack validate signup.json --schema signup.schema.json
  aspack validate signup.json -s signup.schema.json --field email
  aspack --json validate signup.json -s signup.schema.json
  aspack validate signup.json -s signup.schema.json --strict""",
)
@click.argument("record", type=click.Path(path_type=Path))
@click.option(
    "-s",
    "--schema",
    "schema",
    type=click.Path(path_type=Path),
    required=True,
    help="JSON file mapping field names to rule schemas.",
)
@click.option("--field", default=None, help="Validate only this declared field.")
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Reject unknown rule names instead of ignoring them.",
)
@click.pass_obj
def validate(
    app: AppContext,
    record: Path,
    schema: Path,
    field: str | None,
    strict: bool | None,
) -> None:
    """Validate the JSON object in RECORD. Exits 1 if any field fails."""
    from aspack.services.validate import ValidateService

    svc = ValidateService(app.settings)
    app.emit(svc.validate_file(record, schema, field=field, strict=strict))
