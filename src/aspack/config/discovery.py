"""Locate ``aspack.toml``.

``ASPACK_CONFIG`` names the file directly; otherwise the nearest
``aspack.toml`` in the start directory or one of its ancestors wins.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "aspack.toml"
CONFIG_ENV_VAR = "ASPACK_CONFIG"


def candidate_paths(start: Path | None = None) -> Iterator[Path]:
    """Yield every ``aspack.toml`` location from *start* up to the filesystem root."""
    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        yield directory / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    An ``ASPACK_CONFIG`` value is final: when it points nowhere, no file is
    used and the walk-up is skipped. ``~`` in that value is expanded.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override).expanduser()
        return path if path.is_file() else None
    return next((path for path in candidate_paths(start) if path.is_file()), None)
