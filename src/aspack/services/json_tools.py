"""JsonService — dot-path lookups and re-serialization of JSON files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from aspack.domain.coercion import MISSING
from aspack.domain.json_utils import get_path, stringify
from aspack.services.base import BaseService
from aspack.services.result import ServiceResult


class JsonService(BaseService):
    """File-level wrappers around :mod:`aspack.domain.json_utils`."""

    def get(self, path: Path, dotted: str, *, default: Any = MISSING) -> ServiceResult:
        """Read the value at *dotted* inside the JSON file *path*.

        Without a *default*, an unresolvable path is a PATH_NOT_FOUND failure.
        """
        data = self._load_json(path, op="get")
        if isinstance(data, ServiceResult):
            return data

        value = get_path(data, dotted, default)
        if value is MISSING:
            return ServiceResult.failure(
                "get", "PATH_NOT_FOUND", f"Path '{dotted}' not found in {path}", path=dotted
            )
        return ServiceResult(ok=True, op="get", data={"path": dotted, "value": value})

    def format(self, path: Path, *, indent: int | None = None) -> ServiceResult:
        """Re-serialize the JSON file *path*; ``indent=0`` gives compact output."""
        data = self._load_json(path, op="format")
        if isinstance(data, ServiceResult):
            return data

        if indent is None:
            indent = self._settings.format.indent
        return ServiceResult(
            ok=True,
            op="format",
            data={"indent": indent, "text": stringify(data, indent)},
        )
