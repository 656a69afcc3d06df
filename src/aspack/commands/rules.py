"""Command: list the registered validation rules and type tags."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from aspack.commands._base import AspackCommand

if TYPE_CHECKING:
    from aspack.commands._context import AppContext


@click.command(cls=AspackCommand)
@click.pass_obj
def rules(app: AppContext) -> None:
    """List validation rules and the tags accepted by the ``type`` rule."""
    from aspack.services.validate import ValidateService

    app.emit(ValidateService(app.settings).list_rules())
