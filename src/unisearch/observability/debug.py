"""Debug sink — conditional diagnostics driven by per-request ``DebugOptions``.

Three log points are available:

  - ``log``: general messages, emitted when ``enabled`` is set
  - ``log_request``: request details, also requires ``log_requests``
  - ``log_response``: response details, also requires ``log_responses``

Messages go to ``DebugOptions.logger`` when supplied, otherwise to the
``unisearch.debug`` structlog logger.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field

_default_logger = structlog.get_logger("unisearch.debug")


class DebugOptions(BaseModel):
    """Diagnostics configuration forwarded with every search request."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = Field(default=False, description="Enable verbose logging")
    log_requests: bool = Field(default=False, description="Log request details (URLs, bodies)")
    log_responses: bool = Field(default=False, description="Log response summaries")
    logger: Callable[[str, Any], None] | None = Field(
        default=None,
        description="Custom handler receiving (message, data)",
        exclude=True,
    )


def _emit(options: DebugOptions, message: str, data: Any) -> None:
    if options.logger is not None:
        options.logger(message, data)
    elif data is not None:
        _default_logger.info(message, data=data)
    else:
        _default_logger.info(message)


def log(options: DebugOptions | None, message: str, data: Any = None) -> None:
    """Log a general message if debugging is enabled."""
    if options is not None and options.enabled:
        _emit(options, message, data)


def log_request(options: DebugOptions | None, message: str, data: Any = None) -> None:
    """Log request details if debugging and request logging are enabled."""
    if options is not None and options.enabled and options.log_requests:
        _emit(options, f"REQUEST: {message}", data)


def log_response(options: DebugOptions | None, message: str, data: Any = None) -> None:
    """Log response details if debugging and response logging are enabled."""
    if options is not None and options.enabled and options.log_responses:
        _emit(options, f"RESPONSE: {message}", data)
