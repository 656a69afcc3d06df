"""Rule registry — the canonical validation predicates.

Every rule is a pure function ``(value, argument) -> bool``. Except for
``required``, each rule passes when the value is absent (``None`` or
:data:`~aspack.domain.coercion.MISSING`), so ``type``/``min``/``pattern``
compose with ``required`` instead of implying it.

INVARIANT: :data:`RULES` is read-only and never changes after import.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any
from urllib.parse import urlsplit

from aspack.domain.coercion import as_number, as_text, is_absent, is_number
from aspack.domain.types import RuleName, TypeTag

Rule = Callable[[Any, Any], bool]

EMAIL_PATTERN: re.Pattern[str] = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Schemes that must carry a host (``file`` is special but may be host-less).
_HOST_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})
_SCHEME = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")
_C0_OR_SPACE = "".join(chr(code) for code in range(0x21))
_TAB_OR_NEWLINE = str.maketrans("", "", "\t\n\r")


def is_url(value: Any) -> bool:
    """Check that *value* reads as an absolute URL.

    Input is cleaned like a browser URL bar would: leading and trailing
    control characters and spaces are stripped, tabs and newlines removed.
    A scheme is mandatory. Web schemes need a host free of whitespace
    and, if present, a valid port; their ``//`` after the scheme is
    optional. Spaces in the path or query are allowed.
    """
    text = as_text(value).strip(_C0_OR_SPACE).translate(_TAB_OR_NEWLINE)
    match = _SCHEME.match(text)
    if not match:
        return False
    scheme = match.group(1).lower()
    if scheme in _HOST_SCHEMES:
        rest = text[match.end() :].lstrip("/\\")
        text = f"{scheme}://{rest}"
    try:
        parts = urlsplit(text)
        parts.port  # noqa: B018  # raises ValueError on a bad port
    except ValueError:
        return False
    if any(ch.isspace() for ch in parts.netloc):
        return False
    if scheme in _HOST_SCHEMES:
        return bool(parts.hostname)
    return True


def required(value: Any, _argument: Any = None) -> bool:
    """Fail for absent values and the empty string. The argument is ignored."""
    if is_absent(value):
        return False
    return not (isinstance(value, str) and value == "")


def type_(value: Any, tag: Any) -> bool:
    """Check *value* against a :class:`TypeTag`; unknown tags always fail."""
    if is_absent(value):
        return True

    match tag:
        case TypeTag.STRING:
            return isinstance(value, str)
        case TypeTag.NUMBER:
            return is_number(value) and not math.isnan(value)
        case TypeTag.BOOLEAN:
            return isinstance(value, bool)
        case TypeTag.OBJECT:
            return isinstance(value, Mapping)
        case TypeTag.ARRAY:
            return isinstance(value, list | tuple)
        case TypeTag.EMAIL:
            return isinstance(value, str) and EMAIL_PATTERN.match(value) is not None
        case TypeTag.URL:
            return is_url(value)
        case _:
            return False


def min_length(value: Any, minimum: Any) -> bool:
    if is_absent(value):
        return True
    return len(as_text(value)) >= minimum


def max_length(value: Any, maximum: Any) -> bool:
    if is_absent(value):
        return True
    return len(as_text(value)) <= maximum


def pattern(value: Any, regex: str | re.Pattern[str]) -> bool:
    """Search *regex* in the text form of *value*.

    Passes for absent values and ``""``. A malformed *regex* raises
    :class:`re.error`; that is a schema bug, not a validation failure.
    """
    if is_absent(value) or value == "":
        return True
    return re.search(regex, as_text(value)) is not None


def min_(value: Any, minimum: Any) -> bool:
    if is_absent(value):
        return True
    return as_number(value) >= minimum


def max_(value: Any, maximum: Any) -> bool:
    if is_absent(value):
        return True
    return as_number(value) <= maximum


RULES: Mapping[str, Rule] = MappingProxyType(
    {
        RuleName.REQUIRED: required,
        RuleName.TYPE: type_,
        RuleName.MIN_LENGTH: min_length,
        RuleName.MAX_LENGTH: max_length,
        RuleName.PATTERN: pattern,
        RuleName.MIN: min_,
        RuleName.MAX: max_,
    }
)

TYPES = TypeTag
