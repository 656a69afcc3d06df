"""Schema-driven field and record validation.

A field schema maps rule names to rule arguments::

    {"required": True, "type": "email", "maxLength": 120}

A record schema maps field names to field schemas. Each field is checked
independently against the :data:`~aspack.domain.rules.RULES` registry.

Rule names missing from the registry are skipped by default. Pass
``strict=True`` to reject them with :class:`UnknownRuleError` instead, so
a typo like ``minLenght`` cannot silently disable a check.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from aspack.domain.coercion import MISSING, as_text, kind_of
from aspack.domain.errors import UnknownRuleError
from aspack.domain.results import FieldError, FieldResult, RecordResult
from aspack.domain.rules import RULES
from aspack.domain.types import RuleName

logger = logging.getLogger(__name__)

_STATIC_MESSAGES: dict[str, str] = {
    RuleName.REQUIRED: "This field is required",
    RuleName.PATTERN: "Invalid format",
}

_ARGUMENT_MESSAGES: dict[str, str] = {
    RuleName.MIN_LENGTH: "Minimum length is {argument}",
    RuleName.MAX_LENGTH: "Maximum length is {argument}",
    RuleName.MIN: "Minimum value is {argument}",
    RuleName.MAX: "Maximum value is {argument}",
}


def error_message(rule: str, argument: Any, value: Any) -> str:
    """Build the message for *rule* failing on *value*."""
    if rule in _STATIC_MESSAGES:
        return _STATIC_MESSAGES[rule]
    if rule == RuleName.TYPE:
        return f"Expected {as_text(argument)}, got {kind_of(value)}"
    if rule in _ARGUMENT_MESSAGES:
        return _ARGUMENT_MESSAGES[rule].format(argument=as_text(argument))
    return f"Failed {rule} validation"


def unknown_rules(schema: Mapping[str, Any]) -> list[str]:
    """Return the keys of *schema* that name no registered rule."""
    return [name for name in schema if name not in RULES]


def validate_field(
    value: Any,
    schema: Mapping[str, Any],
    *,
    strict: bool = False,
) -> FieldResult:
    """Validate one value against a field schema.

    Rules run in the schema's insertion order. Failures become
    :class:`FieldError` entries; they are never raised.

    Raises:
        UnknownRuleError: *strict* is set and the schema names unknown rules.
        re.error: A ``pattern`` argument is not a valid regular expression.
    """
    unknown = unknown_rules(schema)
    if unknown:
        if strict:
            raise UnknownRuleError(unknown)
        logger.debug("Skipping unknown rules: %s", ", ".join(unknown))

    errors: list[FieldError] = []
    for rule, argument in schema.items():
        check = RULES.get(rule)
        if check is None:
            continue
        if not check(value, argument):
            errors.append(FieldError(rule=rule, message=error_message(rule, argument, value)))
    return FieldResult(errors=errors)


def validate(
    record: Mapping[str, Any] | Any,
    schema: Mapping[str, Mapping[str, Any]],
    *,
    strict: bool = False,
) -> RecordResult:
    """Validate a record against a record schema.

    Fields declared in *schema* but absent from *record* are validated as
    missing values; record keys not in the schema are ignored. *record*
    may also be a pydantic model, which is dumped first.
    """
    if not isinstance(record, Mapping) and hasattr(record, "model_dump"):
        record = record.model_dump()

    results: dict[str, FieldResult] = {}
    for field, field_schema in schema.items():
        value = record.get(field, MISSING)
        results[field] = validate_field(value, field_schema, strict=strict)

    outcome = RecordResult(results=results)
    logger.debug(
        "Validated %d field(s), %d failed",
        len(results),
        len(outcome.error_map),
    )
    return outcome
