"""
OpenAI chat completions client.

Wraps AsyncOpenAI behind a minimal send(request, timeout) interface that
returns the raw status and body of one attempt. SDK retries are disabled;
ChatController owns the retry policy.
"""
import json
from dataclasses import dataclass
from typing import Any, Optional, Protocol

import httpx
from openai import APIConnectionError, APIStatusError, APITimeoutError, AsyncOpenAI

from chat_proxy.api.models import UpstreamCompletionRequest

OPENAI_BASE_URL = "https://api.openai.com/v1"


class UpstreamTransportError(Exception):
    """The attempt failed without producing an HTTP response."""


class UpstreamTimeout(UpstreamTransportError):
    """The attempt's deadline expired and the call was cancelled."""


@dataclass(frozen=True)
class UpstreamResponse:
    """Status and raw body text of a single upstream attempt."""

    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        return json.loads(self.text)


class CompletionClient(Protocol):
    async def send(
        self, request: UpstreamCompletionRequest, timeout: float
    ) -> UpstreamResponse:
        """Perform one attempt. ``timeout`` is in seconds."""
        ...


class OpenAICompletionClient:
    """CompletionClient backed by the official OpenAI SDK."""

    def __init__(
        self,
        api_key: str,
        base_url: str = OPENAI_BASE_URL,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            max_retries=0,
            http_client=http_client,
        )

    async def send(
        self, request: UpstreamCompletionRequest, timeout: float
    ) -> UpstreamResponse:
        payload = request.model_dump()
        try:
            raw = await self.client.chat.completions.with_raw_response.create(
                model=payload["model"],
                messages=payload["messages"],
                timeout=timeout,
            )
        except APIStatusError as e:
            # Non-2xx: hand the raw status and body back for the retry policy
            return UpstreamResponse(status_code=e.status_code, text=e.response.text)
        except APITimeoutError as e:
            raise UpstreamTimeout(f"Request timed out after {timeout}s") from e
        except APIConnectionError as e:
            cause = e.__cause__ or e
            raise UpstreamTransportError(str(cause) or type(cause).__name__) from e

        http_response = raw.http_response
        return UpstreamResponse(
            status_code=http_response.status_code, text=http_response.text
        )

    async def close(self) -> None:
        await self.client.close()
