"""Exception hierarchy shared by the transport, adapters and engine."""

from __future__ import annotations

import json
from functools import cached_property
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from unisearch.models.outcome import ProviderFailure


class AdapterError(Exception):
    """Base exception for adapter errors."""


class ConfigurationError(AdapterError):
    """Raised when a precondition is missing before any network activity."""


class TransportError(AdapterError):
    """Raised on a non-2xx HTTP response or a network failure.

    Args:
        message: Human-readable description.
        status_code: HTTP status code, if a response was received.
        response_text: Raw response body, parsed lazily via ``body``.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_text: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text

    @cached_property
    def body(self) -> Any:
        """The error body parsed as JSON, falling back to plain text."""
        if not self.response_text:
            return None
        try:
            return json.loads(self.response_text)
        except ValueError:
            return self.response_text


class TimeoutError(AdapterError):  # noqa: A001
    """Raised when a request exceeds its configured timeout."""

    def __init__(self, message: str, timeout: float | None = None) -> None:
        super().__init__(message)
        self.timeout = timeout


class ParseError(AdapterError):
    """Raised when a provider response cannot be interpreted."""


class AggregateError(AdapterError):
    """Raised when every provider in a fan-out failed.

    The message enumerates each provider's failure, one paragraph each,
    in invocation order.
    """

    def __init__(self, failures: list[ProviderFailure]) -> None:
        self.failures = failures
        details = "\n\n".join(f.describe() for f in failures)
        super().__init__(f"All {len(failures)} provider(s) failed:\n\n{details}")
