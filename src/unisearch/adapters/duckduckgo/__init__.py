from unisearch.adapters.duckduckgo.adapter import DuckDuckGoAdapter

__all__ = ["DuckDuckGoAdapter"]
