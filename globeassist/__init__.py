"""
GlobeAssist Backend.

Core components:
- agents: Apply-link resolver, link ranker/validator, chat assistant
- tools: Serper search and OpenRouter clients
- models: Data models for jobs, search results and resolver config
"""
