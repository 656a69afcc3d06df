"""Safe JSON parsing/serialization and dot-path lookups.

Pure functions that never raise for bad input: each takes a *default*
returned when the text does not parse, the value does not serialize, or
the path does not resolve.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping, Sequence
from typing import Any

_COMPACT = (",", ":")


def _reject_constant(name: str) -> Any:
    msg = f"{name} is not a JSON value"
    raise ValueError(msg)


def _null_non_finite(value: Any) -> Any:
    """Replace NaN and infinities with None, the only JSON they can map to."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _null_non_finite(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [_null_non_finite(item) for item in value]
    return value


def parse(text: str | bytes | None, default: Any = None) -> Any:
    """Parse *text* as JSON, or return *default* if it is not valid JSON.

    The non-standard constants ``NaN`` and ``Infinity`` are rejected.

    Examples:
        >>> parse('{"a": 1}')
        {'a': 1}
        >>> parse("{oops", default={})
        {}
    """
    if text is None:
        return default
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, TypeError):
        return default


def stringify(value: Any, indent: int = 0, default: str = "") -> str:
    """Serialize *value* to JSON, or return *default* if it cannot be.

    ``indent=0`` produces compact output with no whitespace.
    NaN and infinities serialize as ``null``.
    """
    try:
        value = _null_non_finite(value)
        if indent:
            return json.dumps(value, indent=indent, ensure_ascii=False)
        return json.dumps(value, separators=_COMPACT, ensure_ascii=False)
    except (TypeError, ValueError, RecursionError):
        return default


def _is_container(obj: Any) -> bool:
    return isinstance(obj, Mapping) or (
        isinstance(obj, Sequence) and not isinstance(obj, str | bytes)
    )


def _step(current: Any, part: str) -> tuple[bool, Any]:
    if isinstance(current, Mapping):
        if part in current:
            return True, current[part]
        return False, None
    if not (part.isascii() and part.isdecimal()):
        return False, None
    index = int(part)
    if index >= len(current):
        return False, None
    return True, current[index]


def get_path(obj: Any, path: str, default: Any = None) -> Any:
    """Read a nested value from *obj* using a dot-separated *path*.

    Mapping keys are matched as strings; numeric segments index into lists.

    Examples:
        >>> get_path({"user": {"tags": ["a", "b"]}}, "user.tags.1")
        'b'
        >>> get_path({"user": None}, "user.name", "anon")
        'anon'
    """
    if not path or not _is_container(obj):
        return default

    current = obj
    for part in path.split("."):
        if not _is_container(current):
            return default
        found, current = _step(current, part)
        if not found:
            return default
    return current
