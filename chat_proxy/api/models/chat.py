"""
Request and response models for the chat endpoint.
"""
from typing import Optional

from pydantic import BaseModel


class ChatRequest(BaseModel):
    """Payload for a single chat message."""

    message: str


class ChatReply(BaseModel):
    """Assistant reply, either canned or relayed from OpenAI."""

    message: Optional[str]
