"""Search adapter layer — Pluggable connectors for web search providers.

Built-in adapters:
  - google: Google Custom Search JSON API
  - serpapi: SerpAPI (Google and other engines)
  - brave: Brave Search API
  - exa: Exa neural search
  - tavily: Tavily search
  - searxng: self-hosted SearXNG metasearch
  - arxiv: arXiv paper search (Atom XML, supports id lists)
  - duckduckgo: DuckDuckGo scraping (text, images, news)

Implement ``SearchAdapter`` to connect your own provider.
"""

from __future__ import annotations

import importlib

from unisearch.adapters.base.registry import AdapterRegistry

# Maps provider names to (module_path, class_name) for lazy import
BUILTIN_ADAPTERS: dict[str, tuple[str, str]] = {
    "google": ("unisearch.adapters.google.adapter", "GoogleAdapter"),
    "serpapi": ("unisearch.adapters.serpapi.adapter", "SerpApiAdapter"),
    "brave": ("unisearch.adapters.brave.adapter", "BraveAdapter"),
    "exa": ("unisearch.adapters.exa.adapter", "ExaAdapter"),
    "tavily": ("unisearch.adapters.tavily.adapter", "TavilyAdapter"),
    "searxng": ("unisearch.adapters.searxng.adapter", "SearxNGAdapter"),
    "arxiv": ("unisearch.adapters.arxiv.adapter", "ArxivAdapter"),
    "duckduckgo": ("unisearch.adapters.duckduckgo.adapter", "DuckDuckGoAdapter"),
}


def default_registry() -> AdapterRegistry:
    """Create a registry with every built-in adapter registered."""
    registry = AdapterRegistry()
    for name, (module_path, class_name) in BUILTIN_ADAPTERS.items():
        module = importlib.import_module(module_path)
        registry.register(name, getattr(module, class_name))
    return registry
