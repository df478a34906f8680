"""Structured logging configuration using structlog.

Log output always goes to stderr; the CLI writes results to stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from unisearch.config.settings import ObservabilitySettings

# httpx logs every request at INFO
_CHATTY_LOGGERS = ("httpx", "httpcore")


def setup_logging(settings: ObservabilitySettings | None = None) -> None:
    """Configure structured logging for unisearch.

    Args:
        settings: Observability settings. Uses defaults if None.
    """
    level_name = settings.log_level.upper() if settings else "INFO"
    level = getattr(logging, level_name, logging.INFO)
    log_format = settings.log_format if settings else "console"

    processors: list = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_format == "json":
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    logging.getLogger("unisearch").setLevel(level)

    transport_level = level if level <= logging.DEBUG else logging.WARNING
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)
