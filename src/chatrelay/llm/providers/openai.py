"""OpenAI adapter (chat completions API)."""

from __future__ import annotations

from typing import Any

import httpx

from chatrelay.llm.base import DEFAULT_TIMEOUT, ChatMessage, HTTPProviderAdapter, Vendor

OPENAI_CHAT_URL = "https://api.openai.com/v1/chat/completions"


class OpenAIProvider(HTTPProviderAdapter):
    """Sends the conversation verbatim with a bearer token."""

    id = "gpt-4"
    name = "OpenAI"
    vendor = Vendor.OPENAI
    url = OPENAI_CHAT_URL

    def __init__(
        self,
        api_key: str | None,
        model: str = "gpt-4",
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(api_key, timeout=timeout, transport=transport)
        self.model = model

    def build_request(
        self, messages: list[ChatMessage]
    ) -> tuple[str, dict[str, str], dict[str, Any]]:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        body = {
            "model": self.model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
        }
        return self.url, headers, body

    def extract_text(self, data: dict[str, Any]) -> str:
        return data["choices"][0]["message"]["content"]
