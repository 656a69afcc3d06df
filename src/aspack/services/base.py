"""BaseService — shared foundation for aspack services.

Services receive frozen :class:`AspackSettings` at construction and turn
file-level problems into failed ServiceResults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from aspack.services.result import ServiceResult

if TYPE_CHECKING:
    from aspack.config.settings import AspackSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ValidateService(BaseService):
            def validate_file(self, record_path: Path, ...) -> ServiceResult:
                record = self._load_json(record_path, op="validate")
                if isinstance(record, ServiceResult):
                    return record
                ...
    """

    def __init__(self, settings: AspackSettings) -> None:
        self._settings = settings

    def _load_json(self, path: Path, *, op: str) -> Any | ServiceResult:
        """Read and decode a JSON file, or return a failed result.

        Unlike :func:`aspack.domain.json_utils.parse`, a broken input file
        is reported rather than replaced by a default.
        """
        try:
            raw = Path(path).read_text(encoding="utf-8")
        except FileNotFoundError:
            return ServiceResult.failure(op, "FILE_NOT_FOUND", f"No such file: {path}")
        except OSError as exc:
            return ServiceResult.failure(op, "FILE_NOT_FOUND", f"Cannot read {path}: {exc}")

        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.debug("JSON decode failed for %s", path, exc_info=True)
            return ServiceResult.failure(
                op,
                "INVALID_JSON",
                f"Invalid JSON in {path}: {exc.msg}",
                line=exc.lineno,
                column=exc.colno,
            )
