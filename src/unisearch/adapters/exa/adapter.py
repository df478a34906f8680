"""Exa adapter — Neural web search via the Exa API."""

from __future__ import annotations

from typing import Any, Literal

from unisearch.adapters.base.adapter import SearchAdapter, hostname
from unisearch.exceptions import ConfigurationError
from unisearch.models.request import SearchRequest
from unisearch.models.result import SearchResult
from unisearch.observability import debug
from unisearch.transport.http import HttpTransport

DEFAULT_BASE_URL = "https://api.exa.ai/search"


class ExaAdapter(SearchAdapter):
    """Search adapter for Exa.

    Args:
        api_key: Exa API key, sent in the ``x-api-key`` header.
        model: Optional retrieval model (``"keyword"`` or ``"embeddings"``).
        include_contents: Ask Exa to return page contents.
        base_url: API endpoint.
        transport: HTTP transport.
    """

    label = "Exa"

    def __init__(
        self,
        api_key: str = "",
        model: Literal["keyword", "embeddings"] | None = None,
        include_contents: bool = False,
        base_url: str = DEFAULT_BASE_URL,
        transport: HttpTransport | None = None,
        **kwargs: Any,
    ) -> None:
        if not api_key:
            raise ConfigurationError("Exa requires an API key.")
        super().__init__(transport)
        self._api_key = api_key
        self._model = model
        self._include_contents = include_contents
        self._base_url = base_url

    @property
    def name(self) -> str:
        return "exa"

    async def _search(self, request: SearchRequest) -> list[SearchResult]:
        body: dict[str, Any] = {
            "query": request.query,
            "numResults": request.max_results,
            "useAutoprompt": True,
        }
        if self._model:
            body["type"] = self._model
        if self._include_contents:
            body["contents"] = {"text": True}

        debug.log_request(
            request.debug,
            "Exa Search request",
            {"url": self._base_url, "headers": {"x-api-key": "***"}, "body": body},
        )

        data = await self._transport.post(
            self._base_url,
            body,
            headers={"Content-Type": "application/json", "x-api-key": self._api_key},
            timeout=request.timeout,
        )

        items = data.get("results") or []
        debug.log_response(request.debug, "Exa Search raw response", {"itemCount": len(items)})

        if not items:
            debug.log(request.debug, "Exa Search returned no results")
            return []

        return [
            SearchResult(
                url=item["url"],
                title=item.get("title") or "",
                snippet=item.get("text"),
                domain=hostname(item["url"]),
                published_date=item.get("publishedDate") or item.get("publish_date"),
                provider=self.name,
                raw=item,
            )
            for item in items
        ]
