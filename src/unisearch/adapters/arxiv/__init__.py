from unisearch.adapters.arxiv.adapter import ArxivAdapter

__all__ = ["ArxivAdapter"]
