"""
Tools for GlobeAssist.

- serper_search: Web search via Serper API
- openrouter: Chat completions via OpenRouter API
"""

from globeassist.tools.openrouter import OpenRouterClient
from globeassist.tools.serper_search import WebSearchClient, build_search_queries

__all__ = ["WebSearchClient", "build_search_queries", "OpenRouterClient"]
