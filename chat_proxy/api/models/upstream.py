"""
Models for the OpenAI chat completions payloads.

Only the fields the proxy sends or reads are modelled; everything else in
the upstream response is ignored.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel

# Fixed model, callers cannot select another one
DEFAULT_MODEL = "gpt-3.5-turbo"


class UpstreamMessage(BaseModel):
    role: Literal["user"] = "user"
    content: str


class UpstreamCompletionRequest(BaseModel):
    """Single-turn chat completion request."""

    model: str = DEFAULT_MODEL
    messages: List[UpstreamMessage]

    @classmethod
    def for_message(cls, message: str) -> "UpstreamCompletionRequest":
        return cls(messages=[UpstreamMessage(content=message)])


class UpstreamChoiceMessage(BaseModel):
    # null on refusals and tool calls
    content: Optional[str]


class UpstreamChoice(BaseModel):
    message: UpstreamChoiceMessage


class UpstreamCompletionResponse(BaseModel):
    choices: List[UpstreamChoice]
