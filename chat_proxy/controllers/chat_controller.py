"""
Chat controller.

Handles a single chat message: canned replies for known phrases, otherwise a
completion from the OpenAI API with a per-attempt timeout and bounded retries.
"""
import asyncio
import json
import logging
from typing import Awaitable, Callable, Optional

from fastapi import Request, status
from pydantic import ValidationError as PydanticValidationError

from chat_proxy.api.models import (
    ChatReply,
    ChatRequest,
    UpstreamCompletionRequest,
    UpstreamCompletionResponse,
)
from chat_proxy.config.settings import Settings
from chat_proxy.services.canned import match_canned_reply
from chat_proxy.services.openai_client import (
    CompletionClient,
    UpstreamResponse,
    UpstreamTimeout,
)
from chat_proxy.utils.errors import (
    ChatProxyError,
    ConfigurationError,
    InvalidUpstreamResponseError,
    RetriesExhaustedError,
    UnknownChatError,
    UpstreamRequestError,
    UpstreamTimeoutError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Rate limited / service unavailable
RETRYABLE_STATUS_CODES = frozenset(
    {status.HTTP_429_TOO_MANY_REQUESTS, status.HTTP_503_SERVICE_UNAVAILABLE}
)

SleepFunc = Callable[[float], Awaitable[None]]


class ChatController:
    """Controller for chat proxy operations."""

    def __init__(
        self,
        settings: Settings,
        client: CompletionClient,
        sleep: SleepFunc = asyncio.sleep,
    ):
        """
        Initialize chat controller.

        Args:
            settings: Immutable application settings
            client: Upstream completion client used for every attempt
            sleep: Awaitable used for the backoff delay between attempts
        """
        self.settings = settings
        self.client = client
        self._sleep = sleep

    async def handle(self, request: Request) -> ChatReply:
        """
        Produce a reply for one inbound chat request.

        Args:
            request: Raw HTTP request whose body is a ChatRequest

        Returns:
            ChatReply with the canned or upstream reply

        Raises:
            ChatProxyError: For every failure; the error middleware renders it
        """
        logger.info("Received request to /api/chat")

        # Checked before the body so a missing key always wins
        self._validate_configuration()

        try:
            message = await self._parse_message(request)
            logger.info(f"Received message: {message}")

            canned = match_canned_reply(message)
            if canned is not None:
                logger.info(f"Responding to {canned.name} query with canned reply")
                return ChatReply(message=canned.reply)

            response = await self._complete_with_retries(message)
            return self._build_reply(response)

        except ChatProxyError:
            raise
        except Exception as e:
            logger.exception(f"Chat API error: {e}")
            raise UnknownChatError() from e

    def _validate_configuration(self) -> None:
        if not self.settings.openai_api_key:
            logger.error("OpenAI API key is not set or empty")
            raise ConfigurationError()

    async def _parse_message(self, request: Request) -> str:
        """
        Extract the message from the request body.

        Raises:
            ValidationError: If the body is not JSON or the message is absent/empty
        """
        try:
            body = await request.json()
            payload = ChatRequest.model_validate(body)
        except (ValueError, PydanticValidationError) as e:
            logger.error(f"Missing message in request: {e}")
            raise ValidationError() from e

        if not payload.message:
            logger.error("Missing message in request")
            raise ValidationError()
        return payload.message

    async def _complete_with_retries(self, message: str) -> UpstreamResponse:
        """
        Call the upstream API until it succeeds or attempts run out.

        429/503 responses and every exception raised during the call are
        retried; any other non-2xx status is returned to the caller at once.
        """
        upstream_request = UpstreamCompletionRequest.for_message(message)
        max_retries = self.settings.openai_max_retries
        timeout = self.settings.fetch_timeout / 1000

        attempt = 0
        last_status: Optional[int] = None
        error_details = ""
        timed_out = False

        while attempt <= max_retries:
            logger.info(f"Attempt {attempt + 1} to call OpenAI API")
            try:
                response = await asyncio.wait_for(
                    self.client.send(upstream_request, timeout), timeout
                )
            except Exception as e:
                timed_out = isinstance(e, (UpstreamTimeout, asyncio.TimeoutError))
                error_details = str(e) or type(e).__name__
                logger.error(f"Fetch error during OpenAI API request: {error_details}")
            else:
                timed_out = False
                last_status = response.status_code
                if response.ok:
                    logger.info("OpenAI API request successful")
                    return response

                error_details = response.text
                logger.error(
                    f"OpenAI API request failed (status {response.status_code}): {error_details}"
                )
                self._log_error_body(error_details)

                if response.status_code not in RETRYABLE_STATUS_CODES:
                    raise UpstreamRequestError(
                        details=error_details, status_code=response.status_code
                    )

            attempt += 1
            if attempt <= max_retries:
                delay = attempt * self.settings.openai_retry_base_delay / 1000
                logger.info(f"Retrying OpenAI API request, attempt {attempt} in {delay}s")
                await self._sleep(delay)

        if timed_out:
            logger.error("OpenAI API request timed out")
            raise UpstreamTimeoutError()

        logger.error("OpenAI API request failed after retries")
        raise RetriesExhaustedError(
            details=error_details,
            status_code=last_status or status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    def _log_error_body(self, text: str) -> None:
        try:
            error_json = json.loads(text)
            logger.error(f"OpenAI API error details: {json.dumps(error_json, indent=2)}")
        except ValueError as e:
            logger.error(f"Failed to parse OpenAI API error response: {e}")

    def _build_reply(self, response: UpstreamResponse) -> ChatReply:
        """
        Extract the assistant message from a successful upstream response.

        Raises:
            InvalidUpstreamResponseError: If ``choices`` is missing, not a list or empty
        """
        data = response.json()
        logger.info(f"OpenAI API response data: {data}")

        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list) or not choices:
            logger.error(f"Invalid OpenAI API response: {data}")
            raise InvalidUpstreamResponseError()

        # Only the first choice is read
        completion = UpstreamCompletionResponse.model_validate({"choices": choices[:1]})
        assistant_message = completion.choices[0].message.content
        logger.info(f"Assistant message: {assistant_message}")
        return ChatReply(message=assistant_message)
