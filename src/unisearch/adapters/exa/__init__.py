from unisearch.adapters.exa.adapter import ExaAdapter

__all__ = ["ExaAdapter"]
