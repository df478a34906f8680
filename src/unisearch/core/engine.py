"""Aggregation engine — Concurrent fan-out of one search across many providers.

The engine:
  1. Validates the request (providers present, query or id list usable)
  2. Invokes every adapter concurrently with the same request
  3. Isolates each adapter: any failure becomes a ``ProviderFailure``
  4. Merges successful result lists in adapter order
  5. Raises ``AggregateError`` only when every provider failed

A partial failure is a success from the caller's point of view; failed
providers are reported through logging and the request's debug sink only.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from unisearch.adapters import default_registry
from unisearch.adapters.base.adapter import SearchAdapter
from unisearch.adapters.base.registry import AdapterRegistry
from unisearch.exceptions import AggregateError, ConfigurationError, TransportError
from unisearch.models.outcome import ProviderFailure, ProviderOutcome
from unisearch.models.request import SearchRequest
from unisearch.models.result import SearchResult
from unisearch.observability import debug

if TYPE_CHECKING:
    from unisearch.config.settings import Settings

logger = logging.getLogger(__name__)

AUTH_HINT = "This is likely an authentication issue. Check your API key and ensure it has the correct permissions."
BAD_REQUEST_HINT = "This is likely due to invalid request parameters. Check your query and other search options."
RATE_LIMIT_HINT = "You've exceeded the rate limit for this API. Try again later or reduce your request frequency."
OUTAGE_HINT = "The search provider is experiencing server issues. Try again later."


def status_hint(status_code: int | None) -> str | None:
    """Map an HTTP status code to generic troubleshooting guidance."""
    if status_code is None:
        return None
    if status_code in (401, 403):
        return AUTH_HINT
    if status_code == 400:
        return BAD_REQUEST_HINT
    if status_code == 429:
        return RATE_LIMIT_HINT
    if status_code >= 500:
        return OUTAGE_HINT
    return None


def troubleshooting_hint(adapter: SearchAdapter, status_code: int | None) -> str | None:
    """Choose the hint for a failure: the provider's own hint wins over the status hint."""
    return adapter.troubleshooting_hint or status_hint(status_code)


def _validate(request: SearchRequest, adapters: Sequence[SearchAdapter]) -> None:
    if not adapters:
        raise ConfigurationError("At least one search provider is required.")
    if request.query:
        return
    if request.id_list and any(a.accepts_id_list for a in adapters):
        return
    if request.id_list:
        raise ConfigurationError(
            "An ID list was given but none of the selected providers supports lookup by ID; a search query is required."
        )
    raise ConfigurationError("A search query or ID list (for Arxiv) is required.")


async def _invoke(adapter: SearchAdapter, request: SearchRequest) -> ProviderOutcome:
    """Run one adapter, converting any failure into a tagged outcome."""
    try:
        results = await adapter.search(request)
    except Exception as e:
        status_code = e.status_code if isinstance(e, TransportError) else None
        failure = ProviderFailure(
            provider=adapter.name,
            message=str(e),
            status_code=status_code,
            troubleshooting=troubleshooting_hint(adapter, status_code),
        )
        logger.warning("Search failed on provider '%s': %s", adapter.name, e)
        debug.log(
            request.debug,
            f"Search error with provider {adapter.name}",
            {"error": failure.message, "statusCode": status_code, "troubleshooting": failure.troubleshooting},
        )
        return ProviderOutcome(provider=adapter.name, failure=failure)

    debug.log_response(request.debug, f"Received {len(results)} results from {adapter.name}")
    return ProviderOutcome(provider=adapter.name, results=results)


async def aggregate_search(request: SearchRequest, adapters: Sequence[SearchAdapter]) -> list[SearchResult]:
    """Search every adapter concurrently and merge the results.

    Args:
        request: The search request, forwarded unchanged to every adapter.
        adapters: Configured adapters to query.

    Returns:
        The concatenation of every successful provider's results, in adapter
        order. Providers that failed contribute nothing.

    Raises:
        ConfigurationError: If no adapters are given, or the request has no
            usable query. Raised before any network activity.
        AggregateError: If every adapter failed.
    """
    _validate(request, adapters)

    names = [a.name for a in adapters]
    debug.log(request.debug, f"Performing search with {len(adapters)} provider(s): {', '.join(names)}")

    outcomes: list[ProviderOutcome] = await asyncio.gather(*(_invoke(a, request) for a in adapters))

    results: list[SearchResult] = []
    failures: list[ProviderFailure] = []
    for outcome in outcomes:
        if outcome.ok:
            results.extend(outcome.results)
        elif outcome.failure is not None:
            failures.append(outcome.failure)

    succeeded = len(outcomes) - len(failures)
    debug.log(
        request.debug,
        f"Search complete: {len(results)} total results from {succeeded}/{len(outcomes)} providers.",
    )
    logger.debug("Aggregated %d results from %d/%d providers", len(results), succeeded, len(outcomes))

    if succeeded == 0:
        raise AggregateError(failures)

    return results


class SearchEngine:
    """Settings-driven front end to ``aggregate_search``.

    Builds adapters for every enabled provider in ``settings.providers`` and
    resolves provider names per search.

    Attributes:
        settings: Application configuration.
        registry: Registry holding the configured adapters.
    """

    def __init__(self, settings: Settings, registry: AdapterRegistry | None = None) -> None:
        self.settings = settings
        self.registry = registry or default_registry()
        self.registry.build_from_settings(settings)

    def adapters_for(self, providers: Sequence[str] | None = None) -> list[SearchAdapter]:
        """Resolve provider names to configured adapters.

        Falls back to ``search.default_providers``, then to every configured
        provider. A registered provider that has no settings entry is created
        with default options, so keyless providers (arxiv, duckduckgo) work
        without configuration.

        Raises:
            AdapterNotFoundError: If a name is not registered.
            ConfigurationError: If an unconfigured provider needs credentials.
        """
        names = list(providers or self.settings.search.default_providers)
        if not names:
            return self.registry.get_many()
        return [self._resolve(name) for name in names]

    def _resolve(self, name: str) -> SearchAdapter:
        if name in self.registry.registered_adapters and name not in self.registry.active_adapters:
            logger.debug("Provider '%s' has no settings entry, creating with defaults", name)
            return self.registry.create(name)
        return self.registry.get(name)

    def build_request(self, query: str | None = None, **options: Any) -> SearchRequest:
        """Build a request with defaults taken from settings."""
        options.setdefault("max_results", self.settings.search.max_results)
        options.setdefault("timeout", self.settings.search.timeout)
        options.setdefault("debug", self.settings.observability.debug_options())
        return SearchRequest(query=query, **options)

    async def search(
        self,
        request: SearchRequest,
        providers: Sequence[str] | None = None,
    ) -> list[SearchResult]:
        """Run *request* against the named (or default) providers."""
        return await aggregate_search(request, self.adapters_for(providers))


async def web_search(
    query: str | None = None,
    *,
    providers: Sequence[SearchAdapter],
    **options: Any,
) -> list[SearchResult]:
    """Search one or more configured adapters in a single call.

    Example:
        >>> brave = BraveAdapter(api_key="...")
        >>> results = await web_search("python asyncio", providers=[brave], max_results=5)
    """
    return await aggregate_search(SearchRequest(query=query, **options), providers)
