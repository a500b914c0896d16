"""API request/response schemas."""

from pydantic import BaseModel, Field


# Apply-link schemas
class ApplyLinkResponse(BaseModel):
    link: str


class ErrorResponse(BaseModel):
    error: str


# Chat schemas
class ChatMessagePart(BaseModel):
    type: str = "text"
    text: str = ""


class ChatMessage(BaseModel):
    role: str
    content: str | None = None
    parts: list[ChatMessagePart] | None = None


class ChatRequest(BaseModel):
    messages: list[ChatMessage] = Field(default_factory=list)


class ChatErrorResponse(BaseModel):
    success: bool = False
    error: str
