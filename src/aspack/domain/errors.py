"""Schema-authoring faults.

Validation failures are data (see :mod:`aspack.domain.results`), never
exceptions. The classes here signal a broken schema, not bad user input.
"""

from __future__ import annotations


class SchemaError(ValueError):
    """A schema cannot be applied as written."""


class UnknownRuleError(SchemaError):
    """A field schema names rules that are not in the registry."""

    def __init__(self, rules: list[str]) -> None:
        self.rules = rules
        names = ", ".join(repr(r) for r in rules)
        super().__init__(f"Unknown validation rule(s): {names}")
