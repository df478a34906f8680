from unisearch.adapters.tavily.adapter import TavilyAdapter

__all__ = ["TavilyAdapter"]
