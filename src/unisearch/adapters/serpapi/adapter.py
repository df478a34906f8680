"""SerpAPI adapter — Scraped search engine results via serpapi.com.

SerpAPI proxies several engines (Google by default) and returns their
organic results as JSON. Errors such as exhausted credits are reported in
an ``error`` field of an otherwise successful response.
"""

from __future__ import annotations

from typing import Any

from unisearch.adapters.base.adapter import SearchAdapter
from unisearch.exceptions import ConfigurationError, TransportError
from unisearch.models.request import SearchRequest
from unisearch.models.result import SearchResult
from unisearch.observability import debug
from unisearch.transport.http import HttpTransport

DEFAULT_BASE_URL = "https://serpapi.com/search.json"


class SerpApiAdapter(SearchAdapter):
    """Search adapter for SerpAPI.

    Args:
        api_key: SerpAPI key.
        engine: Engine to query through SerpAPI (default: ``"google"``).
        base_url: API endpoint.
        transport: HTTP transport.
    """

    label = "SerpAPI"
    troubleshooting_hint = "Check that your SerpAPI key is valid and that you have enough credits in your account."

    def __init__(
        self,
        api_key: str = "",
        engine: str = "google",
        base_url: str = DEFAULT_BASE_URL,
        transport: HttpTransport | None = None,
        **kwargs: Any,
    ) -> None:
        if not api_key:
            raise ConfigurationError("SerpAPI requires an API key.")
        super().__init__(transport)
        self._api_key = api_key
        self._engine = engine
        self._base_url = base_url

    @property
    def name(self) -> str:
        return "serpapi"

    async def _search(self, request: SearchRequest) -> list[SearchResult]:
        max_results = request.max_results
        params: dict[str, Any] = {
            "engine": self._engine,
            "api_key": self._api_key,
            "q": request.query,
            "num": max_results,
            "start": (request.page - 1) * max_results if request.page > 1 else 0,
        }
        if request.language:
            params["hl"] = request.language
        if request.region:
            params["gl"] = request.region
        if request.safe_search:
            params["safe"] = request.safe_search

        debug.log_request(
            request.debug,
            "SerpAPI request",
            {"url": self._base_url, "params": {**params, "api_key": "***"}},
        )

        data = await self._transport.get(self._base_url, params=params, timeout=request.timeout)

        organic = data.get("organic_results") or []
        debug.log_response(request.debug, "SerpAPI raw response", {"itemCount": len(organic)})

        if data.get("error"):
            raise TransportError(str(data["error"]))

        return [
            SearchResult(
                url=item["link"],
                title=item["title"],
                snippet=item.get("snippet"),
                domain=item.get("displayed_link"),
                published_date=item.get("date"),
                provider=self.name,
                raw=item,
            )
            for item in organic
        ]
