"""Brave adapter — Web search via the Brave Search API.

Authentication uses the ``X-Subscription-Token`` header. Only the ``web``
section of the response is mapped; ``news`` and ``mixed`` are ignored.
"""

from __future__ import annotations

from typing import Any

from unisearch.adapters.base.adapter import SearchAdapter, hostname
from unisearch.exceptions import ConfigurationError
from unisearch.models.request import SearchRequest
from unisearch.models.result import SearchResult
from unisearch.observability import debug
from unisearch.transport.http import HttpTransport

DEFAULT_BASE_URL = "https://api.search.brave.com/res/v1/web/search"


class BraveAdapter(SearchAdapter):
    """Search adapter for the Brave Search API.

    Args:
        api_key: Brave Search subscription token.
        base_url: API endpoint.
        transport: HTTP transport.
    """

    label = "Brave"
    troubleshooting_hint = "Ensure your Brave Search API token is valid and your subscription is active."

    def __init__(
        self,
        api_key: str = "",
        base_url: str = DEFAULT_BASE_URL,
        transport: HttpTransport | None = None,
        **kwargs: Any,
    ) -> None:
        if not api_key:
            raise ConfigurationError("Brave Search requires an API key.")
        super().__init__(transport)
        self._api_key = api_key
        self._base_url = base_url

    @property
    def name(self) -> str:
        return "brave"

    async def _search(self, request: SearchRequest) -> list[SearchResult]:
        query = self._require_query(request)
        offset = (request.page - 1) * request.max_results

        params: dict[str, Any] = {"q": query, "count": request.max_results}
        if offset > 0:
            params["offset"] = offset
        if request.language:
            params["language"] = request.language
        if request.region:
            params["country"] = request.region
        if request.safe_search:
            params["safesearch"] = request.safe_search

        debug.log_request(request.debug, "Brave Search request", {"url": self._base_url, "params": params})

        data = await self._transport.get(
            self._base_url,
            params=params,
            headers={"Accept": "application/json", "X-Subscription-Token": self._api_key},
            timeout=request.timeout,
        )

        items = (data.get("web") or {}).get("results") or []
        debug.log_response(request.debug, "Brave Search raw response", {"itemCount": len(items)})

        if not items:
            debug.log(request.debug, "Brave Search returned no results")
            return []

        return [
            SearchResult(
                url=item["url"],
                title=item["title"],
                snippet=item.get("description"),
                domain=hostname(item["url"]),
                published_date=item.get("age"),
                provider=self.name,
                raw=item,
            )
            for item in items
        ]
