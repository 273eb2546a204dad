"""OpenRouter gateway adapter."""

from __future__ import annotations

import httpx

from chatrelay.llm.base import DEFAULT_TIMEOUT, Vendor
from chatrelay.llm.providers.openai import OpenAIProvider

OPENROUTER_CHAT_URL = "https://openrouter.ai/api/v1/chat/completions"

# Downstream model picked by the gateway adapter, never by the caller.
OPENROUTER_DEFAULT_MODEL = "openai/gpt-3.5-turbo"


class OpenRouterProvider(OpenAIProvider):
    """OpenRouter speaks the OpenAI chat-completions dialect."""

    id = "openrouter"
    name = "OpenRouter"
    vendor = Vendor.OPENROUTER
    url = OPENROUTER_CHAT_URL

    def __init__(
        self,
        api_key: str | None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(
            api_key, model=OPENROUTER_DEFAULT_MODEL, timeout=timeout, transport=transport
        )
