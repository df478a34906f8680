"""Google adapter — Web search via the Google Custom Search JSON API.

API reference:
  GET https://www.googleapis.com/customsearch/v1
    ?key=<api_key>&cx=<engine_id>&q=<query>&num=<1-10>&start=<1-based index>
"""

from __future__ import annotations

from typing import Any

from unisearch.adapters.base.adapter import SearchAdapter
from unisearch.exceptions import ConfigurationError
from unisearch.models.request import SearchRequest
from unisearch.models.result import SearchResult
from unisearch.observability import debug
from unisearch.transport.http import HttpTransport

DEFAULT_BASE_URL = "https://www.googleapis.com/customsearch/v1"

# The Custom Search API rejects num > 10
_MAX_PAGE_SIZE = 10


class GoogleAdapter(SearchAdapter):
    """Search adapter for the Google Custom Search API.

    Args:
        api_key: Google API key with the Custom Search API enabled.
        cx: Programmable Search Engine ID.
        base_url: API endpoint.
        transport: HTTP transport (default: a new ``HttpTransport``).
    """

    label = "Google"
    troubleshooting_hint = (
        "Make sure your Google API key is valid and the Custom Search API is enabled. "
        "Also, check if your Search Engine ID (cx) is correct."
    )

    def __init__(
        self,
        api_key: str = "",
        cx: str = "",
        base_url: str = DEFAULT_BASE_URL,
        transport: HttpTransport | None = None,
        **kwargs: Any,
    ) -> None:
        if not api_key:
            raise ConfigurationError("Google Custom Search requires an API key.")
        if not cx:
            raise ConfigurationError("Google Custom Search requires a Search Engine ID (cx).")
        super().__init__(transport)
        self._api_key = api_key
        self._cx = cx
        self._base_url = base_url

    @property
    def name(self) -> str:
        return "google"

    async def _search(self, request: SearchRequest) -> list[SearchResult]:
        max_results = request.max_results
        params: dict[str, Any] = {
            "key": self._api_key,
            "cx": self._cx,
            "q": request.query,
            "num": min(max_results, _MAX_PAGE_SIZE),
            "start": (request.page - 1) * max_results + 1,
        }
        if request.language:
            params["lr"] = f"lang_{request.language}"
        if request.region:
            params["gl"] = request.region
        if request.safe_search:
            params["safe"] = request.safe_search

        debug.log_request(
            request.debug,
            "Google Search request",
            {"url": self._base_url, "params": {**params, "key": "***"}},
        )

        data = await self._transport.get(self._base_url, params=params, timeout=request.timeout)

        items = data.get("items") or []
        debug.log_response(
            request.debug,
            "Google Search raw response",
            {
                "itemCount": len(items),
                "totalResults": data.get("searchInformation", {}).get("totalResults"),
            },
        )
        return [self.map_result(item) for item in items]

    def map_result(self, item: dict[str, Any]) -> SearchResult:
        """Map a Custom Search item to ``SearchResult``."""
        metatags = (item.get("pagemap") or {}).get("metatags") or [{}]
        tags = metatags[0]
        return SearchResult(
            url=item["link"],
            title=item["title"],
            snippet=item.get("snippet"),
            domain=item.get("displayLink"),
            published_date=tags.get("article:published_time") or tags.get("date"),
            provider=self.name,
            raw=item,
        )
