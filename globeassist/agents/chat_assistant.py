"""
Chat Assistant.

General advice about studying and working abroad, streamed piece by piece.
Falls back to a canned answer when the model is unavailable.
"""

import logging
from collections.abc import AsyncIterator, Mapping, Sequence
from typing import Any

from globeassist.config import Settings, settings
from globeassist.tools.openrouter import OpenRouterClient

logger = logging.getLogger(__name__)

CHAT_SYSTEM_PROMPT = """You are GlobeAssist AI, a helpful assistant for a platform that helps people find global opportunities.
You provide general advice about studying abroad, working internationally, scholarships, visas, and accommodations.
Be friendly, informative, and supportive. Keep your responses concise but helpful.

IMPORTANT RULES:
1. NEVER claim to have user profile data or specific personal information
2. Provide general advice based on common knowledge
3. If asked about specific user data, politely explain you can only provide general information
4. Focus on factual information about countries, education systems, visa processes, etc.
5. Keep responses under 300 words
6. Format responses with clear paragraphs and bullet points when appropriate"""

FALLBACK_REPLY = """I'm here to help you with GlobeAssist! You can ask me about:
- Study abroad opportunities in various countries
- Visa requirements for different destinations
- General information about universities and programs
- Tips for preparing your applications
- Budget planning for international education/work

What would you like to know about today?"""


def message_text(message: Mapping[str, Any]) -> str:
    """Text of a UI message: `content`, or the first part's `text`."""
    content = message.get("content")
    if content:
        return str(content)
    parts = message.get("parts") or []
    if parts and isinstance(parts[0], Mapping):
        return str(parts[0].get("text") or "")
    return ""


def build_chat_messages(messages: Sequence[Mapping[str, Any]]) -> list[dict]:
    """System prompt followed by the conversation, roles folded to user/assistant."""
    converted = [{"role": "system", "content": CHAT_SYSTEM_PROMPT}]
    for msg in messages:
        role = "assistant" if msg.get("role") == "assistant" else "user"
        converted.append({"role": role, "content": message_text(msg)})
    return converted


class ChatAssistant:
    def __init__(self, client: OpenRouterClient | None, model: str):
        self.client = client
        self.model = model

    async def stream_reply(self, messages: Sequence[Mapping[str, Any]]) -> AsyncIterator[str]:
        """Yield reply text pieces for the conversation."""
        if self.client is None:
            logger.info("Chat API key not set, sending fallback reply")
            yield FALLBACK_REPLY
            return

        sent_any = False
        try:
            async for piece in self.client.stream(build_chat_messages(messages), model=self.model):
                sent_any = True
                yield piece
        except Exception as e:
            logger.error(f"Chat error: {e}")
            if not sent_any:
                yield FALLBACK_REPLY


def create_chat_assistant(app_settings: Settings | None = None) -> ChatAssistant:
    """Create the chat assistant from application settings."""
    app_settings = app_settings or settings
    client = None
    if app_settings.chat_api_key:
        client = OpenRouterClient(app_settings.chat_api_key, timeout=app_settings.search_timeout)
    return ChatAssistant(client, model=app_settings.chat_model)
