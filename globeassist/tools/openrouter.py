"""
OpenRouter chat-completions tool.

Thin client used by the link ranker (blocking call) and the chat assistant
(streaming call). Errors propagate; callers decide how to degrade.
"""

import json
from collections.abc import AsyncIterator

import httpx

OPENROUTER_API_URL = "https://openrouter.ai/api/v1/chat/completions"


class OpenRouterClient:
    """Chat-completions client for OpenRouter."""

    def __init__(
        self,
        api_key: str,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
        async_transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport
        self._async_transport = async_transport

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def complete(
        self,
        messages: list[dict],
        model: str,
        temperature: float = 0.0,
        max_tokens: int = 250,
    ) -> str:
        """
        Run a single chat completion.

        Returns:
            `choices[0].message.content` stripped, or "" when the model sent nothing

        Raises:
            httpx.HTTPError: transport failure or non-2xx status
            ValueError / KeyError / IndexError / TypeError: malformed response body
        """
        payload = {
            "model": model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }

        with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
            response = client.post(OPENROUTER_API_URL, headers=self._headers(), json=payload)
            response.raise_for_status()
            data = response.json()

        content = data["choices"][0]["message"].get("content") or ""
        return content.strip()

    async def stream(self, messages: list[dict], model: str) -> AsyncIterator[str]:
        """Yield content deltas from a streaming chat completion."""
        payload = {
            "model": model,
            "messages": messages,
            "stream": True,
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._async_transport) as client:
            async with client.stream(
                "POST", OPENROUTER_API_URL, headers=self._headers(), json=payload
            ) as response:
                response.raise_for_status()
                async for line in response.aiter_lines():
                    if not line.startswith("data:"):
                        continue  # blank separators and ": OPENROUTER PROCESSING" comments
                    data = line[len("data:"):].strip()
                    if data == "[DONE]":
                        break
                    try:
                        chunk = json.loads(data)
                    except json.JSONDecodeError:
                        continue
                    choices = chunk.get("choices") or []
                    if not choices:
                        continue  # usage-only chunk
                    content = (choices[0].get("delta") or {}).get("content")
                    if content:
                        yield content
