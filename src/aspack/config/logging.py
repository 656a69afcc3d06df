"""structlog setup for the aspack CLI.

Library modules only call ``logging.getLogger(__name__)``; nothing is
emitted until the CLI calls :func:`configure_logging`, which routes the
``aspack`` namespace through a structlog formatter on stderr, rendered
either for a console or as JSON lines (``--log-json``).
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

LOGGER_NAME = "aspack"
_HANDLER_NAME = "aspack-stderr"


def log_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags onto a level for the ``aspack`` logger.

    ``--verbose`` wins over ``--quiet``; by default only warnings show.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _build_handler(stream: TextIO, *, log_json: bool) -> logging.Handler:
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())

    handler = logging.StreamHandler(stream)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Install the aspack stderr handler on the root logger.

    Safe to call repeatedly: a previously installed aspack handler is
    replaced, other handlers on the root logger are left alone.

    Args:
        verbose: Show DEBUG records from ``aspack.*``.
        quiet: Show only ERROR records from ``aspack.*``.
        log_json: Render JSON lines instead of console text.
        stream: Destination; defaults to the current ``sys.stderr``.
    """
    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(_build_handler(stream or sys.stderr, log_json=log_json))
    root.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(log_level(verbose=verbose, quiet=quiet))
