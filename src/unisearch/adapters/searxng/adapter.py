"""SearXNG adapter — Self-hosted metasearch via a SearXNG instance.

The instance must have the JSON output format enabled
(``search.formats: [html, json]`` in ``settings.yml``).
"""

from __future__ import annotations

from typing import Any

from unisearch.adapters.base.adapter import SearchAdapter
from unisearch.exceptions import ConfigurationError
from unisearch.models.request import SearchRequest
from unisearch.models.result import SearchResult
from unisearch.observability import debug
from unisearch.transport.http import HttpTransport

_SAFESEARCH_LEVELS = {"off": "0", "moderate": "1", "strict": "2"}


class SearxNGAdapter(SearchAdapter):
    """Search adapter for a SearXNG instance.

    Args:
        base_url: Search endpoint of the instance, e.g. ``https://searx.example.org/search``.
        api_key: Optional key, for instances behind an authenticating proxy.
        additional_params: Extra query parameters (e.g. ``{"engines": "google,bing"}``).
        transport: HTTP transport.
    """

    label = "SearxNG"
    troubleshooting_hint = "Check if your SearXNG instance URL is correct and the server is running."

    def __init__(
        self,
        base_url: str = "",
        api_key: str = "",
        additional_params: dict[str, str] | None = None,
        transport: HttpTransport | None = None,
        **kwargs: Any,
    ) -> None:
        if not base_url:
            raise ConfigurationError("SearXNG requires a base URL.")
        super().__init__(transport)
        self._base_url = base_url
        self._api_key = api_key
        self._additional_params = dict(additional_params or {})

    @property
    def name(self) -> str:
        return "searxng"

    async def _search(self, request: SearchRequest) -> list[SearchResult]:
        params: dict[str, Any] = {
            "q": request.query or "",
            "format": "json",
            "count": request.max_results,
        }
        if request.language:
            params["language"] = request.language
        if request.safe_search:
            params["safesearch"] = _SAFESEARCH_LEVELS[request.safe_search]
        params.update(self._additional_params)
        if self._api_key:
            params["api_key"] = self._api_key

        debug.log_request(request.debug, "SearxNG Search request", {"url": self._base_url, "params": params})

        data = await self._transport.get(self._base_url, params=params, timeout=request.timeout)

        items = data.get("results") or []
        debug.log_response(request.debug, "SearxNG Search raw response", {"itemCount": len(items)})

        results: list[SearchResult] = []
        for item in items:
            parsed_url = item.get("parsed_url") or []
            results.append(
                SearchResult(
                    url=item["url"],
                    title=item["title"],
                    snippet=item.get("content"),
                    domain=parsed_url[1] if len(parsed_url) > 1 else None,
                    published_date=item.get("publishedDate") or None,
                    provider=self.name,
                    raw=item,
                )
            )
        return results
