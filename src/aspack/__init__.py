"""aspack — safe JSON helpers and declarative form validation."""

from aspack.domain.json_utils import get_path, parse, stringify
from aspack.domain.rules import RULES, TYPES
from aspack.domain.validation import validate, validate_field

__version__ = "0.3.0"

__all__ = [
    "RULES",
    "TYPES",
    "__version__",
    "get_path",
    "parse",
    "stringify",
    "validate",
    "validate_field",
]
