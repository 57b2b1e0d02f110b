# Shared fixtures for the chat proxy tests.

import asyncio
import json

import pytest
from starlette.requests import Request

from chat_proxy.config.settings import Settings
from chat_proxy.services.openai_client import UpstreamResponse

# Outcome that makes FakeCompletionClient.send never return
HANG = object()


class FakeCompletionClient:
    """Scripted CompletionClient. The last outcome repeats once the script runs out."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    async def send(self, request, timeout):
        self.calls.append((request, timeout))
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if outcome is HANG:
            await asyncio.Event().wait()
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class RecordingSleep:
    """Backoff stand-in that records delays instead of waiting."""

    def __init__(self):
        self.delays = []

    async def __call__(self, delay):
        self.delays.append(delay)


def completion(content="Hello there"):
    body = {"id": "chatcmpl-1", "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}
    return UpstreamResponse(status_code=200, text=json.dumps(body))


def upstream_error(status_code, message="upstream failure"):
    return UpstreamResponse(
        status_code=status_code,
        text=json.dumps({"error": {"message": message, "type": "error"}}),
    )


def make_request(body) -> Request:
    """Build a POST /api/chat request; dicts are JSON-encoded, bytes sent as-is."""
    raw = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")

    async def receive():
        return {"type": "http.request", "body": raw, "more_body": False}

    scope = {
        "type": "http",
        "method": "POST",
        "path": "/api/chat",
        "headers": [(b"content-type", b"application/json")],
    }
    return Request(scope, receive)


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        openai_api_key="sk-test",
        fetch_timeout=10000,
        openai_max_retries=2,
        openai_retry_base_delay=1000,
    )


@pytest.fixture
def unconfigured_settings():
    return Settings(_env_file=None, openai_api_key="")


@pytest.fixture
def sleep():
    return RecordingSleep()
