"""DuckDuckGo adapter — Keyless search by scraping DuckDuckGo endpoints.

Three search kinds are supported:
  - text: parses the HTML (or lite) results page with BeautifulSoup
  - images / news: fetches a ``vqd`` token from the homepage, then queries
    the JSON endpoints behind the DuckDuckGo web UI

Result links on the HTML pages are ``/l/?uddg=<target>`` redirects; they are
unwrapped to the target URL. Parsing depends on DuckDuckGo's CSS class names
and will break if the markup changes.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime
from typing import Any, Literal
from urllib.parse import parse_qs, urlparse

from bs4 import BeautifulSoup

from unisearch.adapters.base.adapter import SearchAdapter, hostname
from unisearch.exceptions import ParseError
from unisearch.models.request import SearchRequest
from unisearch.models.result import SearchResult
from unisearch.observability import debug
from unisearch.transport.http import HttpTransport

HOME_URL = "https://duckduckgo.com/"
DEFAULT_BASE_URLS = {
    "text": "https://html.duckduckgo.com/html",
    "lite": "https://lite.duckduckgo.com/lite/",
    "images": "https://duckduckgo.com/i.js",
    "news": "https://duckduckgo.com/news.js",
}
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

_VQD_RE = re.compile(r"vqd=['\"]([^'\"]+)['\"]")
_SAFESEARCH = {"off": "-2", "moderate": "-1", "strict": "1"}

SearchKind = Literal["text", "images", "news"]


def normalize_text(text: str) -> str:
    """Collapse runs of whitespace."""
    return " ".join(text.split())


def normalize_url(url: str) -> str:
    """Turn protocol-relative or bare URLs into absolute https URLs."""
    if not url:
        return ""
    if url.startswith("//"):
        return f"https:{url}"
    if not url.startswith(("http://", "https://")):
        return f"https://{url}"
    return url


def unwrap_redirect(url: str) -> str:
    """Return the target of a DuckDuckGo ``/l/?uddg=`` redirect, or *url* unchanged."""
    parsed = urlparse(url)
    if parsed.path.startswith("/l/"):
        target = parse_qs(parsed.query).get("uddg")
        if target:
            return target[0]
    return url


def parse_html_results(page: str, limit: int) -> list[tuple[str, str, str]]:
    """Extract ``(url, title, snippet)`` triples from an HTML or lite results page."""
    soup = BeautifulSoup(page, "html.parser")
    parsed: list[tuple[str, str, str]] = []

    bodies = soup.select(".result__body")
    if bodies:
        pairs = [(body.select_one(".result__a"), body.select_one(".result__snippet")) for body in bodies]
    else:
        # Lite page: links and snippets sit in sibling table rows
        links = soup.select("a.result-link")
        snippets = soup.select(".result-snippet")
        pairs = [(link, snippets[i] if i < len(snippets) else None) for i, link in enumerate(links)]

    for link, snippet in pairs:
        if len(parsed) >= limit:
            break
        if link is None:
            continue
        href = link.get("href")
        title = normalize_text(link.get_text(" ", strip=True))
        if not isinstance(href, str) or not href or not title:
            continue
        url = unwrap_redirect(normalize_url(href))
        text = normalize_text(snippet.get_text(" ", strip=True)) if snippet is not None else ""
        parsed.append((url, title, text))
    return parsed


def extract_vqd(page: str) -> str | None:
    """Extract the ``vqd`` token DuckDuckGo requires for its JSON endpoints."""
    match = _VQD_RE.search(page)
    return match.group(1) if match else None


class DuckDuckGoAdapter(SearchAdapter):
    """Search adapter for DuckDuckGo (no API key required).

    Args:
        search_type: Default search kind; ``SearchRequest.search_type`` overrides it.
        use_lite: Use the lite HTML endpoint for text search.
        base_url: Override the endpoint for every search kind.
        user_agent: User-Agent header sent with every request.
        transport: HTTP transport.
    """

    label = "DuckDuckGo"
    troubleshooting_hint = "DuckDuckGo scraping can be unreliable. This may be a temporary issue. Try again later."

    def __init__(
        self,
        search_type: SearchKind = "text",
        use_lite: bool = False,
        base_url: str | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: HttpTransport | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(transport)
        self._search_type = search_type
        self._urls = {
            "text": base_url or DEFAULT_BASE_URLS["lite" if use_lite else "text"],
            "images": base_url or DEFAULT_BASE_URLS["images"],
            "news": base_url or DEFAULT_BASE_URLS["news"],
        }
        self._headers = {"User-Agent": user_agent}

    @property
    def name(self) -> str:
        return "duckduckgo"

    async def _search(self, request: SearchRequest) -> list[SearchResult]:
        query = self._require_query(request)
        kind = request.search_type or self._search_type
        if kind == "images":
            return await self._search_images(query, request)
        if kind == "news":
            return await self._search_news(query, request)
        return await self._search_text(query, request)

    async def _search_text(self, query: str, request: SearchRequest) -> list[SearchResult]:
        url = self._urls["text"]
        debug.log_request(request.debug, "DuckDuckGo Text Search", {"url": url, "query": query})

        page = await self._transport.get(
            url, params={"q": query}, headers=self._headers, timeout=request.timeout, parse="text"
        )
        debug.log(request.debug, "DuckDuckGo Text Search response received")

        return [
            SearchResult(
                url=link,
                title=title,
                snippet=snippet or None,
                domain=hostname(link),
                provider=self.name,
            )
            for link, title, snippet in parse_html_results(page, request.max_results)
        ]

    async def _fetch_vqd(self, query: str, request: SearchRequest) -> str:
        page = await self._transport.get(
            HOME_URL, params={"q": query}, headers=self._headers, timeout=request.timeout, parse="text"
        )
        vqd = extract_vqd(page)
        if not vqd:
            raise ParseError("Failed to extract VQD token.")
        return vqd

    def _json_params(self, query: str, vqd: str, request: SearchRequest) -> dict[str, Any]:
        return {
            "l": request.region or "wt-wt",
            "o": "json",
            "q": query,
            "vqd": vqd,
            "p": _SAFESEARCH[request.safe_search or "moderate"],
        }

    async def _search_images(self, query: str, request: SearchRequest) -> list[SearchResult]:
        vqd = await self._fetch_vqd(query, request)
        params = {**self._json_params(query, vqd, request), "f": ",,,"}

        debug.log_request(request.debug, "DuckDuckGo Image Search", {"url": self._urls["images"], "params": params})
        data = await self._transport.get(
            self._urls["images"], params=params, headers=self._headers, timeout=request.timeout
        )

        return [
            SearchResult(
                url=item["url"],
                title=item["title"],
                snippet=f"{item.get('width')}x{item.get('height')} image from {item.get('source')}",
                domain=hostname(item["url"]),
                provider=self.name,
                raw=item,
            )
            for item in data["results"][: request.max_results]
        ]

    async def _search_news(self, query: str, request: SearchRequest) -> list[SearchResult]:
        vqd = await self._fetch_vqd(query, request)
        params = {**self._json_params(query, vqd, request), "noamp": "1"}

        debug.log_request(request.debug, "DuckDuckGo News Search", {"url": self._urls["news"], "params": params})
        data = await self._transport.get(
            self._urls["news"], params=params, headers=self._headers, timeout=request.timeout
        )

        results: list[SearchResult] = []
        for item in data["results"][: request.max_results]:
            published = None
            if item.get("date") is not None:
                published = datetime.fromtimestamp(int(item["date"]), UTC).isoformat()
            results.append(
                SearchResult(
                    url=item["url"],
                    title=item["title"],
                    snippet=item.get("body"),
                    domain=hostname(item["url"]),
                    published_date=published,
                    provider=self.name,
                    raw=item,
                )
            )
        return results
