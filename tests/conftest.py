import json
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from groq_proxy.app import create_app
from groq_proxy.shared.config import GroqConfig, Settings

TEST_KEY = "gsk_test_key_1234567890"

COMPLETION = {
    "id": "chatcmpl-123",
    "object": "chat.completion",
    "model": "llama-3.3-70b-versatile",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "Hello there!"},
            "finish_reason": "stop",
        }
    ],
    "usage": {"prompt_tokens": 9, "completion_tokens": 3, "total_tokens": 12},
}


class FakeGroq:
    """Stands in for the Groq API and records what the proxy sent."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.respond: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json=COMPLETION)
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def last_payload(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def groq():
    return FakeGroq()


@pytest.fixture
def make_client(groq):
    clients = []

    def _make(api_key=TEST_KEY, raise_server_exceptions=True, **groq_overrides):
        settings = Settings(groq=GroqConfig(api_key=api_key, **groq_overrides))
        app = create_app(settings, transport=httpx.MockTransport(groq))
        client = TestClient(app, raise_server_exceptions=raise_server_exceptions)
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    return make_client()
