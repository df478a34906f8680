from unisearch.adapters.serpapi.adapter import SerpApiAdapter

__all__ = ["SerpApiAdapter"]
