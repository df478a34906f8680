"""Base adapter interface — Abstract classes for web search providers."""

from unisearch.adapters.base.adapter import SearchAdapter
from unisearch.adapters.base.registry import AdapterRegistry

__all__ = ["AdapterRegistry", "SearchAdapter"]
