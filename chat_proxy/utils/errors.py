"""
Chat proxy error types.

Every failure the chat handler can report is a ChatProxyError carrying the
HTTP status and the body fields the client receives.
"""
from typing import Any, Dict, Optional

from fastapi import status


class ChatProxyError(Exception):
    """Base error rendered as a ChatError JSON body."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "Failed to get response from AI"

    def __init__(
        self,
        details: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(self.error)
        self.details = details
        if status_code is not None:
            self.status_code = status_code

    def to_content(self) -> Dict[str, Any]:
        content: Dict[str, Any] = {"error": self.error}
        if self.details is not None:
            content["details"] = self.details
        return content


class ConfigurationError(ChatProxyError):
    error = "OpenAI API key is not configured"


class ValidationError(ChatProxyError):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "Missing message"


class UpstreamRequestError(ChatProxyError):
    """Non-retryable upstream status, relayed verbatim."""

    error = "OpenAI API request failed"


class RetriesExhaustedError(ChatProxyError):
    error = "OpenAI API request failed after retries"


class UpstreamTimeoutError(ChatProxyError):
    status_code = status.HTTP_504_GATEWAY_TIMEOUT
    error = "OpenAI API request timed out"


class InvalidUpstreamResponseError(ChatProxyError):
    error = "Invalid response from OpenAI API"


class UnknownChatError(ChatProxyError):
    error = "Failed to get response from AI"
