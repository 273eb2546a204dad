"""Shared test fixtures for the Chatrelay test suite."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from chatrelay.config import settings
from chatrelay.llm import ChatMessage, ProviderCredentials, ProviderSelector


class RecordingTransport(httpx.MockTransport):
    """Mock upstream that records every request and replies with a canned response."""

    def __init__(
        self,
        status_code: int = 200,
        json_body: dict | None = None,
        text: str | None = None,
        error: Exception | None = None,
    ):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.json_body = json_body
        self.text = text
        self.error = error
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json_body or {})

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep tests independent of real keys in the environment and fast."""
    for field in ("gemini_api_key", "openai_api_key", "anthropic_api_key", "openrouter_api_key"):
        monkeypatch.setattr(settings, field, "")
    monkeypatch.setattr(settings, "stub_delay_seconds", 0.0)


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    return RecordingTransport


@pytest.fixture
def hello_messages() -> list[ChatMessage]:
    return [ChatMessage(role="user", content="Hello")]


@pytest.fixture
def conversation() -> list[ChatMessage]:
    """A short multi-turn conversation with a system prompt."""
    return [
        ChatMessage(role="system", content="Be terse"),
        ChatMessage(role="user", content="Hi"),
        ChatMessage(role="assistant", content="Hello."),
        ChatMessage(role="user", content="What is 2+2?"),
    ]


@pytest.fixture
def openai_reply() -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": "4"}}]}


@pytest.fixture
def gemini_reply() -> dict:
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": "4"}]}}]}


@pytest.fixture
def anthropic_reply() -> dict:
    return {"content": [{"type": "text", "text": "4"}]}


@pytest.fixture
def api_client():
    """Return a factory for a TestClient whose selector uses the given defaults/transport."""
    from chatrelay.api.deps import get_selector
    from chatrelay.main import app

    def _factory(
        defaults: ProviderCredentials | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> TestClient:
        selector = ProviderSelector(defaults=defaults, stub_delay=0, transport=transport)
        app.dependency_overrides[get_selector] = lambda: selector
        return TestClient(app)

    yield _factory
    app.dependency_overrides.clear()
