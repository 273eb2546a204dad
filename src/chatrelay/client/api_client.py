"""HTTP client the chat UI uses to talk to the relay server."""

from __future__ import annotations

import logging

import httpx

from chatrelay.client.settings_store import ApiKeys
from chatrelay.llm.base import ChatMessage

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "http://localhost:8000/api"
FALLBACK_REPLY = "I'm sorry, I encountered an error. Please try again."

# Vendors whose keys are forwarded to the server as request headers.
FORWARDED_KEYS = ("gemini", "openai", "anthropic", "openrouter")


def credential_headers(api_keys: ApiKeys) -> dict[str, str]:
    """Build the ``x-<vendor>-key`` headers from the saved keys."""
    headers = {"Content-Type": "application/json"}
    for vendor in FORWARDED_KEYS:
        headers[f"x-{vendor}-key"] = getattr(api_keys, vendor) or ""
    return headers


class ChatAPIClient:
    """Posts conversations to ``/api/chat``.

    Never raises for server or network failures; the caller gets the fixed
    fallback reply instead of raw error text.
    """

    def __init__(
        self,
        api_base: str = DEFAULT_API_BASE,
        timeout: float = 120,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def send(self, messages: list[ChatMessage], model: str, api_keys: ApiKeys) -> str:
        payload = {
            "messages": [m.model_dump() for m in messages],
            "model": model,
        }
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                r = client.post(
                    f"{self.api_base}/chat",
                    headers=credential_headers(api_keys),
                    json=payload,
                )
                r.raise_for_status()
                content = r.json()["content"]
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.error("Chat request to %s failed: %s", self.api_base, e)
            return FALLBACK_REPLY

        if not isinstance(content, str):
            logger.error(
                "Chat reply from %s has no text content: %r", self.api_base, content
            )
            return FALLBACK_REPLY
        return content

    def list_models(self) -> list[dict]:
        """Fetch the model catalog; empty list when the server is unreachable."""
        try:
            with httpx.Client(timeout=10, transport=self.transport) as client:
                r = client.get(f"{self.api_base}/models")
                r.raise_for_status()
                return r.json().get("models", [])
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Could not load models from %s: %s", self.api_base, e)
            return []
