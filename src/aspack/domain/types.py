"""Rule names and type tags.

Both vocabularies are closed enums. Because they are ``StrEnum``, schemas
written with plain strings (``{"minLength": 3}``) look up the same members.
"""

from __future__ import annotations

from enum import StrEnum


class RuleName(StrEnum):
    """Names of the rules in the registry."""

    REQUIRED = "required"
    TYPE = "type"
    MIN_LENGTH = "minLength"
    MAX_LENGTH = "maxLength"
    PATTERN = "pattern"
    MIN = "min"
    MAX = "max"


class TypeTag(StrEnum):
    """Arguments accepted by the ``type`` rule."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    EMAIL = "email"
    URL = "url"
