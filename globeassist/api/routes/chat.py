"""Chat endpoint for the GlobeAssist assistant (SSE streaming)."""

import json
import logging
from typing import AsyncGenerator

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, StreamingResponse

from globeassist.agents.chat_assistant import ChatAssistant
from globeassist.api.dependencies import get_chat_assistant
from globeassist.api.limiter import limiter
from globeassist.api.schemas import ChatErrorResponse, ChatRequest
from globeassist.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _sse_data(payload: dict | str) -> str:
    """Format an unnamed SSE event."""
    data = payload if isinstance(payload, str) else json.dumps(payload)
    return f"data: {data}\n\n"


@router.post("", responses={500: {"model": ChatErrorResponse}})
@limiter.limit(settings.rate_limit)
async def chat(
    request: Request,
    assistant: ChatAssistant = Depends(get_chat_assistant),
):
    """Stream an assistant reply as `data: {"text": ...}` events, ending with `data: [DONE]`."""
    try:
        data = ChatRequest.model_validate(await request.json())
    except Exception:
        logger.exception("Chat API error")
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Failed to process chat request"},
        )

    messages = [m.model_dump() for m in data.messages]

    async def event_generator() -> AsyncGenerator[str, None]:
        async for piece in assistant.stream_reply(messages):
            yield _sse_data({"text": piece})
        yield _sse_data("[DONE]")

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
