from .chat import ChatRequest, ChatReply
from .error import ChatError
from .upstream import (
    DEFAULT_MODEL,
    UpstreamCompletionRequest,
    UpstreamCompletionResponse,
    UpstreamMessage,
)

__all__ = [
    "ChatError",
    "ChatRequest",
    "ChatReply",
    "DEFAULT_MODEL",
    "UpstreamCompletionRequest",
    "UpstreamCompletionResponse",
    "UpstreamMessage",
]
