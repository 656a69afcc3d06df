"""Click base classes carrying an ``--examples`` flag.

Commands declare ``examples=`` next to their help text; ``--examples``
prints them and exits so ``--help`` stays short.
"""

from __future__ import annotations

import inspect
from typing import Any

import click


class ExamplesMixin:
    """Adds an eager ``--examples`` option when ``examples`` is given."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = inspect.cleandoc(examples) if examples else None
        if self.examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        for line in (self.examples or "").splitlines():
            click.echo(f"  {line}")
        ctx.exit(0)


class AspackCommand(ExamplesMixin, click.Command):
    """Command accepting ``examples=``."""


class AspackGroup(ExamplesMixin, click.Group):
    """Group accepting ``examples=``; its subcommands default to :class:`AspackCommand`."""

    command_class = AspackCommand
