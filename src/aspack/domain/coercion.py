"""Value coercions shared by the rules and their error messages.

Schemas and records usually come from JSON written for browser forms, so
text length, numeric comparison and type names follow the loose
conventions of that world rather than Python's ``str()``/``float()``:

- ``as_text(True)`` is ``"true"``, ``as_text(3.0)`` is ``"3"``
- ``as_number("")`` is ``0.0``, ``as_number("abc")`` is NaN
- ``kind_of(None)`` and ``kind_of([])`` are both ``"object"``
"""

from __future__ import annotations

import math
import numbers
import re
from collections.abc import Mapping
from typing import Any, Final


class _Missing:
    """Marker for a record key that is not present at all."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()

# Decimal literal with optional exponent, as accepted for numeric strings.
_DECIMAL = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)
_RADIX = re.compile(r"^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")
_INFINITY = re.compile(r"^[+-]?Infinity$")


def is_absent(value: Any) -> bool:
    """True for ``None`` and :data:`MISSING`."""
    return value is None or value is MISSING


def is_number(value: Any) -> bool:
    """True for real numbers, excluding ``bool``."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(float(value))


def as_text(value: Any) -> str:
    """Render *value* the way a form would display it.

    Examples:
        >>> as_text(False)
        'false'
        >>> as_text(2.0)
        '2'
        >>> as_text(["a", None, 3])
        'a,,3'
    """
    if isinstance(value, str):
        return value
    if is_absent(value):
        return "undefined" if value is MISSING else "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if is_number(value):
        return _format_number(float(value))
    if isinstance(value, list | tuple):
        return ",".join("" if is_absent(item) else as_text(item) for item in value)
    if isinstance(value, Mapping):
        return "[object Object]"
    return str(value)


def as_number(value: Any) -> float:
    """Coerce *value* to a float; non-numeric input yields NaN.

    NaN compares false against everything, so a rule like ``min`` fails
    for values that cannot be read as a number.
    """
    if isinstance(value, bool):
        return float(value)
    if is_number(value):
        return float(value)
    if value is None:
        return 0.0
    if value is MISSING:
        return math.nan
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if _DECIMAL.match(text):
            return float(text)
        if _RADIX.match(text):
            return float(int(text, 0))
        if _INFINITY.match(text):
            return -math.inf if text.startswith("-") else math.inf
        return math.nan
    if isinstance(value, list | tuple):
        return as_number(as_text(value))
    return math.nan


def kind_of(value: Any) -> str:
    """Name the runtime kind of *value* for ``type`` error messages."""
    if value is MISSING:
        return "undefined"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if callable(value):
        return "function"
    return "object"
