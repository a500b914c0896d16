from functools import lru_cache

from globeassist.agents.apply_link import ApplyLinkResolver, create_apply_link_resolver
from globeassist.agents.chat_assistant import ChatAssistant, create_chat_assistant


@lru_cache
def get_apply_link_resolver() -> ApplyLinkResolver:
    return create_apply_link_resolver()


@lru_cache
def get_chat_assistant() -> ChatAssistant:
    return create_chat_assistant()
