from unisearch.adapters.brave.adapter import BraveAdapter

__all__ = ["BraveAdapter"]
