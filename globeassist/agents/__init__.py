"""
Agents for GlobeAssist.

- apply_link: Resolves the application page for a job
- link_ranker: Picks the best search result with an LLM
- link_validator: Plausibility check for ranked links
- chat_assistant: Streaming GlobeAssist chat
"""

from globeassist.agents.apply_link import ApplyLinkResolver, create_apply_link_resolver
from globeassist.agents.chat_assistant import ChatAssistant, create_chat_assistant

__all__ = [
    "ApplyLinkResolver",
    "create_apply_link_resolver",
    "ChatAssistant",
    "create_chat_assistant",
]
