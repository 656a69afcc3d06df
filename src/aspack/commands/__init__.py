"""Subcommand modules for aspack.

Provides register_commands() which uses deferred imports to keep
``aspack --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``json`` group and the standalone commands on the root group."""
    from aspack.commands.json_cmd import json_group
    from aspack.commands.rules import rules
    from aspack.commands.validate import validate

    cli.add_command(json_group)
    cli.add_command(validate)
    cli.add_command(rules)
