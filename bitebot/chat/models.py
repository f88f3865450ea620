from __future__ import annotations

import time

from pydantic import BaseModel, Field

from ..extraction.models import ExtractedEntity


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=1000)


class ChatMessage(BaseModel):
    content: str
    is_user: bool = False
    timestamp: float = Field(default_factory=time.time)
    restaurants: list[ExtractedEntity] | None = None
    is_error: bool = False


class ChatResponse(BaseModel):
    messages: list[ChatMessage]


class ExtractRequest(BaseModel):
    text: str


class ExtractResponse(BaseModel):
    restaurants: list[ExtractedEntity] | None = None
