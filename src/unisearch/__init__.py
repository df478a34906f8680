"""unisearch — One query, many web search providers.

Quick start::

    from unisearch import BraveAdapter, ArxivAdapter, web_search

    brave = BraveAdapter(api_key="...")
    arxiv = ArxivAdapter()

    results = await web_search("retrieval augmented generation", providers=[brave, arxiv])
"""

__version__ = "0.1.0"

from unisearch.adapters.arxiv import ArxivAdapter
from unisearch.adapters.base import AdapterRegistry, SearchAdapter
from unisearch.adapters.brave import BraveAdapter
from unisearch.adapters.duckduckgo import DuckDuckGoAdapter
from unisearch.adapters.exa import ExaAdapter
from unisearch.adapters.google import GoogleAdapter
from unisearch.adapters.searxng import SearxNGAdapter
from unisearch.adapters.serpapi import SerpApiAdapter
from unisearch.adapters.tavily import TavilyAdapter
from unisearch.core.engine import SearchEngine, aggregate_search, web_search
from unisearch.exceptions import (
    AdapterError,
    AggregateError,
    ConfigurationError,
    ParseError,
    TimeoutError,
    TransportError,
)
from unisearch.models.request import SearchRequest
from unisearch.models.result import SearchResult
from unisearch.observability.debug import DebugOptions

__all__ = [
    "AdapterError",
    "AdapterRegistry",
    "AggregateError",
    "ArxivAdapter",
    "BraveAdapter",
    "ConfigurationError",
    "DebugOptions",
    "DuckDuckGoAdapter",
    "ExaAdapter",
    "GoogleAdapter",
    "ParseError",
    "SearchAdapter",
    "SearchEngine",
    "SearchRequest",
    "SearchResult",
    "SearxNGAdapter",
    "SerpApiAdapter",
    "TavilyAdapter",
    "TimeoutError",
    "TransportError",
    "__version__",
    "aggregate_search",
    "web_search",
]
