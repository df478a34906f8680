from unisearch.adapters.google.adapter import GoogleAdapter

__all__ = ["GoogleAdapter"]
