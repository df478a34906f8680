"""Tests for the Tavily adapter."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from unisearch.adapters.tavily.adapter import TavilyAdapter
from unisearch.exceptions import ConfigurationError, TransportError
from unisearch.models.request import SearchRequest


@pytest.fixture
def transport() -> MagicMock:
    mock = MagicMock()
    mock.post = AsyncMock(return_value={"results": []})
    return mock


@pytest.fixture
def adapter(transport: MagicMock) -> TavilyAdapter:
    return TavilyAdapter(api_key="tvly-key", transport=transport)


class TestTavilyBody:
    def test_requires_api_key(self) -> None:
        with pytest.raises(ConfigurationError):
            TavilyAdapter()

    def test_minimal_body(self, adapter: TavilyAdapter) -> None:
        body = adapter.build_body(SearchRequest(query="llm agents", max_results=6))
        assert body == {
            "api_key": "tvly-key",
            "query": "llm agents",
            "limit": 6,
            "include_answer": False,
            "search_depth": "basic",
            "sort_by": "relevance",
        }

    def test_locale_from_language_and_region(self, adapter: TavilyAdapter) -> None:
        assert adapter.build_body(SearchRequest(query="q", language="de", region="at"))["locale"] == "de-AT"
        assert adapter.build_body(SearchRequest(query="q", region="us"))["locale"] == "en-US"
        assert adapter.build_body(SearchRequest(query="q", language="fr"))["locale"] == "fr"

    @pytest.mark.parametrize(
        ("level", "expected"),
        [("strict", True), ("off", False)],
    )
    def test_safe_search(self, adapter: TavilyAdapter, level: str, expected: bool) -> None:
        body = adapter.build_body(SearchRequest(query="q", safe_search=level))  # type: ignore[arg-type]
        assert body["safe_search"] is expected

    def test_moderate_safe_search_omitted(self, adapter: TavilyAdapter) -> None:
        assert "safe_search" not in adapter.build_body(SearchRequest(query="q", safe_search="moderate"))

    def test_page_and_sort(self, transport: MagicMock) -> None:
        adapter = TavilyAdapter(api_key="k", sort_by="date", transport=transport)

        body = adapter.build_body(SearchRequest(query="q", page=2))
        assert body["page"] == 2
        assert body["sort_by"] == "date"

        assert adapter.build_body(SearchRequest(query="q", sort_by="relevance"))["sort_by"] == "relevance"


class TestTavilySearch:
    @pytest.mark.asyncio
    async def test_maps_results(self, adapter: TavilyAdapter, transport: MagicMock) -> None:
        transport.post.return_value = {
            "results": [
                {
                    "url": "https://langchain.com/blog/agents",
                    "title": "Agents",
                    "content": "Agents overview",
                    "source": "langchain.com",
                    "published_date": "2024-06-01",
                }
            ]
        }

        (result,) = await adapter.search(SearchRequest(query="agents"))

        assert result.snippet == "Agents overview"
        assert result.domain == "langchain.com"
        assert result.published_date == "2024-06-01"
        assert result.provider == "tavily"

    @pytest.mark.asyncio
    async def test_status_error(self, adapter: TavilyAdapter, transport: MagicMock) -> None:
        transport.post.side_effect = TransportError("Request failed with status: 401 Unauthorized", status_code=401)

        with pytest.raises(TransportError) as exc_info:
            await adapter.search(SearchRequest(query="q"))

        assert exc_info.value.status_code == 401
        assert str(exc_info.value) == "Tavily search failed: Request failed with status: 401 Unauthorized"
