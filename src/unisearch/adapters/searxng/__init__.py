from unisearch.adapters.searxng.adapter import SearxNGAdapter

__all__ = ["SearxNGAdapter"]
