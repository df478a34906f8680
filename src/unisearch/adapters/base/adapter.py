"""Base search adapter — Abstract interface for all web search providers.

Every provider must implement this interface to take part in an aggregated
search. The adapter is responsible for:
  1. Translating a ``SearchRequest`` into provider-specific HTTP calls
  2. Mapping the raw response into ``SearchResult`` records
  3. Raising (never returning) on any failure

Adapters validate their credentials in the constructor and raise
``ConfigurationError`` before any network activity when they are missing,
so an adapter instance is always ready to search. Instances hold no mutable
state and may be shared by concurrent searches.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar
from urllib.parse import urlparse

from unisearch.exceptions import (
    AdapterError,
    ConfigurationError,
    ParseError,
    TimeoutError,
    TransportError,
)
from unisearch.models.request import SearchRequest
from unisearch.models.result import SearchResult
from unisearch.observability import debug
from unisearch.transport.http import HttpTransport


def hostname(url: str | None) -> str | None:
    """Return the host part of *url*, or None if it cannot be parsed."""
    if not url:
        return None
    try:
        return urlparse(url).hostname
    except ValueError:
        return None


class SearchAdapter(ABC):
    """Abstract base class for web search adapters.

    Subclasses implement ``_search()``; the public ``search()`` wraps it so
    that failure messages carry the provider label while keeping their
    type and HTTP status code.

    Attributes:
        label: Human-readable provider name used in error messages.
        accepts_id_list: Whether ``SearchRequest.id_list`` can replace a query.
        troubleshooting_hint: Static guidance attached to this provider's
            failures. When set, it takes precedence over status-code hints.
    """

    label: ClassVar[str] = ""
    accepts_id_list: ClassVar[bool] = False
    troubleshooting_hint: ClassVar[str | None] = None

    def __init__(self, transport: HttpTransport | None = None) -> None:
        self._transport = transport or HttpTransport()

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique provider name (e.g., 'google', 'brave')."""

    @abstractmethod
    async def _search(self, request: SearchRequest) -> list[SearchResult]:
        """Execute one logical query and return normalized results."""

    async def search(self, request: SearchRequest) -> list[SearchResult]:
        """Search the provider.

        Args:
            request: The normalized search request.

        Returns:
            Normalized results in provider order.

        Raises:
            AdapterError: On any failure, prefixed with the provider label.
        """
        try:
            return await self._search(request)
        except AdapterError as e:
            debug.log(request.debug, f"{self.label} search error", {"error": str(e)})
            raise self._wrap(e) from e
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            debug.log(request.debug, f"{self.label} search error", {"error": str(e)})
            raise ParseError(f"{self.label} search failed: malformed response ({e})") from e

    def _wrap(self, error: AdapterError) -> AdapterError:
        message = f"{self.label} search failed: {error}"
        if isinstance(error, TransportError):
            return TransportError(message, status_code=error.status_code, response_text=error.response_text)
        if isinstance(error, TimeoutError):
            return TimeoutError(message, timeout=error.timeout)
        if isinstance(error, ConfigurationError):
            return ConfigurationError(message)
        if isinstance(error, ParseError):
            return ParseError(message)
        return AdapterError(message)

    def _require_query(self, request: SearchRequest) -> str:
        if not request.query:
            raise ConfigurationError(f"{self.label} search requires a query.")
        return request.query

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
