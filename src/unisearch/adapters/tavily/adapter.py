"""Tavily adapter — LLM-oriented web search via the Tavily API.

Tavily takes the API key in the JSON body rather than a header.
"""

from __future__ import annotations

from typing import Any, Literal

from unisearch.adapters.base.adapter import SearchAdapter
from unisearch.exceptions import ConfigurationError
from unisearch.models.request import SearchRequest
from unisearch.models.result import SearchResult
from unisearch.observability import debug
from unisearch.transport.http import HttpTransport

DEFAULT_BASE_URL = "https://api.tavily.com/search"


class TavilyAdapter(SearchAdapter):
    """Search adapter for Tavily.

    Args:
        api_key: Tavily API key.
        include_answer: Ask Tavily to generate an answer alongside results.
        search_depth: ``"basic"`` or ``"comprehensive"``.
        sort_by: Default ordering; ``SearchRequest.sort_by`` takes precedence.
        base_url: API endpoint.
        transport: HTTP transport.
    """

    label = "Tavily"

    def __init__(
        self,
        api_key: str = "",
        include_answer: bool = False,
        search_depth: Literal["basic", "comprehensive"] = "basic",
        sort_by: Literal["relevance", "date"] = "relevance",
        base_url: str = DEFAULT_BASE_URL,
        transport: HttpTransport | None = None,
        **kwargs: Any,
    ) -> None:
        if not api_key:
            raise ConfigurationError("Tavily requires an API key.")
        super().__init__(transport)
        self._api_key = api_key
        self._include_answer = include_answer
        self._search_depth = search_depth
        self._sort_by = sort_by
        self._base_url = base_url

    @property
    def name(self) -> str:
        return "tavily"

    def build_body(self, request: SearchRequest) -> dict[str, Any]:
        """Build the JSON request body for *request*."""
        body: dict[str, Any] = {
            "api_key": self._api_key,
            "query": request.query or "",
            "limit": request.max_results,
            "include_answer": self._include_answer,
            "search_depth": self._search_depth,
            "sort_by": request.sort_by or self._sort_by,
        }
        if request.language or request.region:
            body["locale"] = (
                f"{request.language or 'en'}-{request.region.upper()}" if request.region else request.language
            )
        if request.safe_search and request.safe_search != "moderate":
            body["safe_search"] = request.safe_search == "strict"
        if request.page > 1:
            body["page"] = request.page
        return body

    async def _search(self, request: SearchRequest) -> list[SearchResult]:
        body = self.build_body(request)
        debug.log_request(
            request.debug,
            "Tavily Search request",
            {"url": self._base_url, "body": {**body, "api_key": "***"}},
        )

        data = await self._transport.post(self._base_url, body, timeout=request.timeout)

        items = data.get("results") or []
        debug.log_response(request.debug, "Tavily Search raw response", {"itemCount": len(items)})

        return [
            SearchResult(
                url=item["url"],
                title=item["title"],
                snippet=item.get("content"),
                domain=item.get("source"),
                published_date=item.get("published_date"),
                provider=self.name,
                raw=item,
            )
            for item in items
        ]
