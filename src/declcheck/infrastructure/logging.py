"""Structured logging for declcheck.

declcheck is a library: loggers are structlog front-ends over stdlib
loggers under the ``declcheck`` namespace, so nothing is emitted until the
host application configures logging. configure_logging() is a convenience
for scripts and tests that want readable output.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import Processor

ROOT_LOGGER_NAME = "declcheck"


def get_shared_processors() -> list[Processor]:
    """Processors used for both console and JSON output."""
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def get_logger(name: str = ROOT_LOGGER_NAME) -> structlog.stdlib.BoundLogger:
    """Get a structured logger bound to a stdlib logger.

    Disabled levels are dropped before any processing, so debug events
    cost nothing when the host has not enabled them.

    Args:
        name: Logger name (typically __name__ from the calling module)

    Returns:
        structlog logger proxying to logging.getLogger(name)
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            *get_shared_processors(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


def configure_logging(level: str = "INFO", json_logs: bool = False) -> logging.Handler:
    """Attach a rendering handler to the declcheck logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, output JSON. If False, human-readable console output.

    Returns:
        The installed handler (replaces any handler installed earlier)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if json_logs:
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=False,
            exception_formatter=structlog.dev.plain_traceback,
        )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers = [handler]
    package_logger.setLevel(log_level)
    package_logger.propagate = False

    return handler
