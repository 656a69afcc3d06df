"""ValidateService — validate JSON record files against JSON schemas."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from aspack.domain.coercion import MISSING
from aspack.domain.errors import SchemaError
from aspack.domain.rules import RULES, TYPES
from aspack.domain.validation import unknown_rules, validate, validate_field
from aspack.services.base import BaseService
from aspack.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def _schema_problem(schema: Any) -> str | None:
    """Describe why *schema* is not a record schema, or None if it is."""
    if not isinstance(schema, Mapping):
        return "Schema must be a JSON object mapping field names to rules"
    for field, field_schema in schema.items():
        if not isinstance(field_schema, Mapping):
            return f"Schema for field '{field}' must be a JSON object"
    return None


def _unknown_rule_warnings(schema: Mapping[str, Mapping[str, Any]]) -> list[str]:
    return [
        f"Unknown rule '{rule}' on field '{field}' was ignored"
        for field, field_schema in schema.items()
        for rule in unknown_rules(field_schema)
    ]


class ValidateService(BaseService):
    """Run the validation engine over files on disk."""

    def validate_file(
        self,
        record_path: Path,
        schema_path: Path,
        *,
        field: str | None = None,
        strict: bool | None = None,
    ) -> ServiceResult:
        """Validate the record in *record_path* against *schema_path*.

        With *field*, only that declared field is checked. *strict*
        defaults to ``[validation] strict`` from settings.
        """
        op = "validate" if field is None else "validate_field"
        strict = self._settings.validation.strict if strict is None else strict

        record = self._load_json(record_path, op=op)
        if isinstance(record, ServiceResult):
            return record
        schema = self._load_json(schema_path, op=op)
        if isinstance(schema, ServiceResult):
            return schema

        if not isinstance(record, Mapping):
            return ServiceResult.failure(op, "INVALID_JSON", "Record must be a JSON object")
        problem = _schema_problem(schema)
        if problem:
            return ServiceResult.failure(op, "INVALID_SCHEMA", problem)
        if field is not None:
            if field not in schema:
                return ServiceResult.failure(
                    op, "INVALID_SCHEMA", f"Field '{field}' is not declared in the schema"
                )
            schema = {field: schema[field]}

        warnings = [] if strict else _unknown_rule_warnings(schema)
        try:
            if field is None:
                outcome = validate(record, schema, strict=strict)
            else:
                outcome = validate_field(record.get(field, MISSING), schema[field], strict=strict)
        except (SchemaError, re.error, TypeError) as exc:
            return ServiceResult.failure(op, "INVALID_SCHEMA", str(exc))

        data: dict[str, Any] = outcome.model_dump(by_alias=True)
        if field is not None:
            data = {"field": field, **data}
        if outcome.is_valid:
            return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

        error_map = outcome.error_map if field is None else {field: outcome.messages}
        logger.info("Validation failed for %s: %s", record_path, sorted(error_map))
        return ServiceResult(
            ok=False,
            op=op,
            data=data,
            warnings=warnings,
            error=ServiceError(
                code="VALIDATION_FAILED",
                message=f"{len(error_map)} of {len(schema)} field(s) failed validation",
                detail={"errorMap": error_map},
            ),
        )

    def list_rules(self) -> ServiceResult:
        """Describe the registered rules and type tags."""
        return ServiceResult(
            ok=True,
            op="rules",
            data={
                "rules": [str(name) for name in RULES],
                "types": [str(tag) for tag in TYPES],
            },
        )
