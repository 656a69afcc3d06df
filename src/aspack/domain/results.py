"""Validation result models.

Results are frozen value objects built once per call. Validity and the
error map are computed from the stored errors, never passed in, so they
cannot disagree with them.

JSON dumps use camelCase aliases (``isValid``, ``errorMap``) to keep
the shape form front-ends already consume.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field


class FieldError(BaseModel):
    """One failed rule on one field."""

    model_config = {"frozen": True}

    rule: str
    message: str


class FieldResult(BaseModel):
    """Outcome of validating a single value against a field schema."""

    model_config = {"frozen": True}

    errors: list[FieldError] = Field(default_factory=list)

    @computed_field(alias="isValid")  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> list[str]:
        return [error.message for error in self.errors]


class RecordResult(BaseModel):
    """Outcome of validating a record against a record schema.

    Attributes:
        results: Per-field results, in schema order.
        is_valid: True when every field passed.
        error_map: Field name to messages, only for fields that failed.
    """

    model_config = {"frozen": True}

    results: dict[str, FieldResult] = Field(default_factory=dict)

    @computed_field(alias="isValid")  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return all(result.is_valid for result in self.results.values())

    @computed_field(alias="errorMap")  # type: ignore[prop-decorator]
    @property
    def error_map(self) -> dict[str, list[str]]:
        return {
            field: result.messages for field, result in self.results.items() if result.errors
        }
