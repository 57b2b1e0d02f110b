"""
Chat proxy endpoint.

Relays a single user message to OpenAI, or answers from the canned replies.
"""
import logging
from typing import Dict

from fastapi import APIRouter, Depends, Request, status

from chat_proxy.api.models import ChatError, ChatReply
from chat_proxy.config.settings import Settings, get_settings
from chat_proxy.controllers.chat_controller import ChatController
from chat_proxy.services.openai_client import CompletionClient, OpenAICompletionClient
from chat_proxy.utils.errors import ConfigurationError

logger = logging.getLogger(__name__)

# ============================================================================
# Dependency Injection
# ============================================================================


# One long-lived client per API key, closed on shutdown
_clients: Dict[str, OpenAICompletionClient] = {}


def _client_for_key(api_key: str) -> OpenAICompletionClient:
    if api_key not in _clients:
        _clients[api_key] = OpenAICompletionClient(api_key=api_key)
    return _clients[api_key]


async def close_completion_clients() -> None:
    """Close every cached upstream client."""
    clients = list(_clients.values())
    _clients.clear()
    for client in clients:
        await client.close()


def get_completion_client(
    settings: Settings = Depends(get_settings),
) -> CompletionClient:
    """Dependency injection for the upstream completion client."""
    # The SDK refuses an empty key, so fail before any client is built
    if not settings.openai_configured:
        logger.error("OpenAI API key is not set or empty")
        raise ConfigurationError()
    return _client_for_key(settings.openai_api_key)


def get_chat_controller(
    settings: Settings = Depends(get_settings),
    client: CompletionClient = Depends(get_completion_client),
) -> ChatController:
    """Dependency injection for ChatController."""
    return ChatController(settings=settings, client=client)


# ============================================================================
# Router
# ============================================================================

router = APIRouter()


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "/chat",
    response_model=ChatReply,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ChatError, "description": "Missing message"},
        500: {"model": ChatError, "description": "Configuration or upstream error"},
        504: {"model": ChatError, "description": "Upstream request timed out"},
    },
)
async def chat(
    request: Request,
    controller: ChatController = Depends(get_chat_controller),
) -> ChatReply:
    """
    Chat endpoint.

    Takes ``{"message": str}`` and returns ``{"message": str}`` with either a
    canned reply or the first completion choice from OpenAI. Expects
    OPENAI_API_KEY to be configured.

    The raw request is handed to the controller so the API key check runs
    before the body is parsed.
    """
    return await controller.handle(request)
