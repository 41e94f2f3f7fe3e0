"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def setup_logging(level: str = "INFO", json_output: bool = False) -> None:
    """
    Configure structlog on top of the standard library logging module.

    Output goes to stderr so stdout stays clean for command output.

    Args:
        level: Minimum log level name
        json_output: Render JSON lines instead of the console format
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level.upper(),
        force=True,
    )

    renderer: Any
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    """
    Get a structlog logger bound to ``name``.

    Events always end up in the standard library logger ``name``, so output
    is decided by the host application's logging handlers, never printed.
    """
    return structlog.wrap_logger(logging.getLogger(name))
