"""Tests for the DuckDuckGo adapter."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from unisearch.adapters.duckduckgo.adapter import (
    DEFAULT_BASE_URLS,
    HOME_URL,
    DuckDuckGoAdapter,
    extract_vqd,
    normalize_text,
    normalize_url,
    parse_html_results,
    unwrap_redirect,
)
from unisearch.exceptions import ConfigurationError, ParseError
from unisearch.models.request import SearchRequest

HTML_PAGE = """
<div class="result results_links results_links_deep web-result">
  <div class="links_main links_deep result__body">
    <h2 class="result__title">
      <a rel="nofollow" class="result__a"
         href="//duckduckgo.com/l/?uddg=https%3A%2F%2Fdocs.python.org%2F3%2Flibrary%2Fasyncio.html&amp;rut=abc123">
        asyncio &amp; <b>Python</b></a>
    </h2>
    <a class="result__snippet" href="//duckduckgo.com/l/?uddg=https%3A%2F%2Fdocs.python.org%2F3%2F">The <b>asyncio</b>
       library reference</a>
  </div>
</div>
<div class="result results_links results_links_deep web-result">
  <div class="links_main links_deep result__body">
    <h2 class="result__title">
      <a href="https://realpython.com/async-io-python/" rel="nofollow" class="result__a">Async IO in Python</a>
    </h2>
    <a href="https://realpython.com/async-io-python/" class="result__snippet">A complete walkthrough</a>
  </div>
</div>
<div class="result results_links results_links_deep web-result">
  <div class="links_main links_deep result__body">
    <h2 class="result__title"><a class="result__a" href="example.net/three">Third</a></h2>
  </div>
</div>
<div class="result results_links results_links_deep web-result">
  <div class="links_main links_deep result__body">
    <h2 class="result__title"><a class="result__a">No link</a></h2>
  </div>
</div>
"""

LITE_PAGE = """
<table>
  <tr><td><a rel="nofollow" href="https://peps.python.org/pep-0492/" class="result-link">PEP 492</a></td></tr>
  <tr><td class="result-snippet">Coroutines with async and await syntax</td></tr>
  <tr><td><a href="//duckduckgo.com/l/?uddg=https%3A%2F%2Ftrio.readthedocs.io%2F" class="result-link">Trio</a></td></tr>
  <tr><td class="result-snippet">A friendly async library</td></tr>
</table>
"""

HOME_PAGE = "<script>DDG.deep.initialize('/d.js?q=python', vqd='4-123456789');</script>"
HOME_PAGE_QUOTED = '<html><script>var x = {vqd="4-987654321"};</script></html>'


@pytest.fixture
def transport() -> MagicMock:
    mock = MagicMock()
    mock.get = AsyncMock(return_value=HTML_PAGE)
    return mock


@pytest.fixture
def adapter(transport: MagicMock) -> DuckDuckGoAdapter:
    return DuckDuckGoAdapter(transport=transport)


class TestHelpers:
    def test_normalize_text(self) -> None:
        assert normalize_text("  Hello\n   &   world ") == "Hello & world"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("//example.com/a", "https://example.com/a"),
            ("example.com/a", "https://example.com/a"),
            ("http://example.com", "http://example.com"),
            ("", ""),
        ],
    )
    def test_normalize_url(self, raw: str, expected: str) -> None:
        assert normalize_url(raw) == expected

    def test_unwrap_redirect(self) -> None:
        redirect = "https://duckduckgo.com/l/?uddg=https%3A%2F%2Fdocs.python.org%2F3%2F&rut=abc"
        assert unwrap_redirect(redirect) == "https://docs.python.org/3/"

    def test_unwrap_leaves_direct_links(self) -> None:
        assert unwrap_redirect("https://example.org/l/page") == "https://example.org/l/page"
        assert unwrap_redirect("https://duckduckgo.com/l/?rut=abc") == "https://duckduckgo.com/l/?rut=abc"

    def test_extract_vqd(self) -> None:
        assert extract_vqd(HOME_PAGE_QUOTED) == "4-987654321"
        assert extract_vqd("<html></html>") is None


class TestHtmlParsing:
    def test_skips_results_without_link(self) -> None:
        urls = [url for url, _, _ in parse_html_results(HTML_PAGE, limit=10)]
        assert urls == [
            "https://docs.python.org/3/library/asyncio.html",
            "https://realpython.com/async-io-python/",
            "https://example.net/three",
        ]

    def test_attribute_order_does_not_matter(self) -> None:
        page = (
            '<div class="result__body">'
            '<a href="https://docs.python.org/3/" class="result__a">Python docs</a>'
            '<a href="https://docs.python.org/3/" class="result__snippet">Official documentation</a>'
            "</div>"
        )
        assert parse_html_results(page, limit=10) == [
            ("https://docs.python.org/3/", "Python docs", "Official documentation"),
        ]

    def test_lite_page(self) -> None:
        assert parse_html_results(LITE_PAGE, limit=10) == [
            ("https://peps.python.org/pep-0492/", "PEP 492", "Coroutines with async and await syntax"),
            ("https://trio.readthedocs.io/", "Trio", "A friendly async library"),
        ]


class TestTextSearch:
    def test_no_credentials_needed(self) -> None:
        assert DuckDuckGoAdapter().name == "duckduckgo"

    @pytest.mark.asyncio
    async def test_requires_query(self, adapter: DuckDuckGoAdapter) -> None:
        with pytest.raises(ConfigurationError):
            await adapter.search(SearchRequest(id_list="1234.5678"))

    @pytest.mark.asyncio
    async def test_parses_html(self, adapter: DuckDuckGoAdapter, transport: MagicMock) -> None:
        results = await adapter.search(SearchRequest(query="python"))

        assert transport.get.call_args.args[0] == DEFAULT_BASE_URLS["text"]
        assert transport.get.call_args.kwargs["parse"] == "text"
        assert len(results) == 3

        first = results[0]
        assert first.url == "https://docs.python.org/3/library/asyncio.html"
        assert first.domain == "docs.python.org"
        assert first.title == "asyncio & Python"
        assert first.snippet == "The asyncio library reference"
        assert first.provider == "duckduckgo"

        assert results[1].domain == "realpython.com"
        assert results[2].snippet is None

    @pytest.mark.asyncio
    async def test_caps_at_max_results(self, adapter: DuckDuckGoAdapter) -> None:
        results = await adapter.search(SearchRequest(query="python", max_results=2))
        assert len(results) == 2

    @pytest.mark.asyncio
    async def test_lite_endpoint(self, transport: MagicMock) -> None:
        transport.get.return_value = LITE_PAGE
        adapter = DuckDuckGoAdapter(use_lite=True, transport=transport)

        results = await adapter.search(SearchRequest(query="python"))

        assert transport.get.call_args.args[0] == DEFAULT_BASE_URLS["lite"]
        assert [r.domain for r in results] == ["peps.python.org", "trio.readthedocs.io"]

    @pytest.mark.asyncio
    async def test_unrecognized_markup_yields_nothing(self, adapter: DuckDuckGoAdapter, transport: MagicMock) -> None:
        transport.get.return_value = "<html><body>captcha</body></html>"
        assert await adapter.search(SearchRequest(query="python")) == []


class TestJsonSearch:
    @pytest.mark.asyncio
    async def test_image_search(self, adapter: DuckDuckGoAdapter, transport: MagicMock) -> None:
        transport.get.side_effect = [
            HOME_PAGE,
            {
                "results": [
                    {"url": "https://img.example.com/a.png", "title": "A", "width": 640, "height": 480, "source": "X"},
                    {"url": "https://img.example.com/b.png", "title": "B", "width": 10, "height": 10, "source": "X"},
                ]
            },
        ]

        results = await adapter.search(SearchRequest(query="cats", search_type="images", max_results=1))

        home_call, api_call = transport.get.call_args_list
        assert home_call.args[0] == HOME_URL
        assert api_call.args[0] == DEFAULT_BASE_URLS["images"]
        assert api_call.kwargs["params"] == {
            "l": "wt-wt",
            "o": "json",
            "q": "cats",
            "vqd": "4-123456789",
            "p": "-1",
            "f": ",,,",
        }
        assert len(results) == 1
        assert results[0].snippet == "640x480 image from X"

    @pytest.mark.asyncio
    async def test_news_search(self, transport: MagicMock) -> None:
        adapter = DuckDuckGoAdapter(search_type="news", transport=transport)
        transport.get.side_effect = [
            HOME_PAGE,
            {
                "results": [
                    {
                        "url": "https://news.example.com/story",
                        "title": "Story",
                        "body": "Body text",
                        "date": 1700000000,
                    }
                ]
            },
        ]

        (result,) = await adapter.search(SearchRequest(query="python", region="us-en", safe_search="strict"))

        params = transport.get.call_args_list[1].kwargs["params"]
        assert params["l"] == "us-en"
        assert params["p"] == "1"
        assert params["noamp"] == "1"
        assert result.published_date == "2023-11-14T22:13:20+00:00"
        assert result.snippet == "Body text"

    @pytest.mark.asyncio
    async def test_missing_vqd(self, adapter: DuckDuckGoAdapter, transport: MagicMock) -> None:
        transport.get.return_value = "<html>no token</html>"

        with pytest.raises(ParseError, match="VQD"):
            await adapter.search(SearchRequest(query="cats", search_type="news"))

        transport.get.assert_awaited_once()
