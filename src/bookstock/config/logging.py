"""structlog setup for bookstock.

Records from structlog and from stdlib ``logging`` share one
:class:`structlog.stdlib.ProcessorFormatter` on stderr: console lines by
default, JSON lines with ``--log-json``. Fields bound with
:func:`command_context` (the CLI subcommand, the shell command being
dispatched) are merged into every line logged inside the block.
"""

from __future__ import annotations

import logging
import sys
from contextlib import AbstractContextManager
from typing import Any, TextIO

import structlog

PACKAGE_LOGGER = "bookstock"

# Third-party loggers held at WARNING even with --verbose.
QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine")


def command_context(command: str, **fields: Any) -> AbstractContextManager[None]:
    """Bind ``command`` (and any *fields*) to log lines inside a ``with`` block."""
    return structlog.contextvars.bound_contextvars(command=command, **fields)


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route all logging through structlog to *stream* (stderr by default).

    Args:
        verbose: Let ``bookstock.*`` loggers emit DEBUG and INFO lines.
            Otherwise only warnings and errors are shown.
        log_json: One JSON object per line instead of console output.
        stream: Destination; tests pass a ``StringIO``.
    """
    out = stream or sys.stderr

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    rendering: list[structlog.types.Processor]
    if log_json:
        rendering = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        rendering = [structlog.dev.ConsoleRenderer(colors=out.isatty())]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *rendering],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
