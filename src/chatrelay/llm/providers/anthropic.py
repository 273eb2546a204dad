"""Anthropic adapter (messages API)."""

from __future__ import annotations

from typing import Any

from chatrelay.llm.base import ChatMessage, HTTPProviderAdapter, Vendor

ANTHROPIC_MESSAGES_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"
ANTHROPIC_MODEL = "claude-3-opus-20240229"
ANTHROPIC_MAX_TOKENS = 1024


class AnthropicProvider(HTTPProviderAdapter):
    """System prompt goes in a top-level ``system`` field.

    Only the first system message is forwarded; later system messages are
    dropped.  All user/assistant turns keep their order.
    """

    id = "claude-3"
    name = "Anthropic"
    vendor = Vendor.ANTHROPIC

    def build_request(
        self, messages: list[ChatMessage]
    ) -> tuple[str, dict[str, str], dict[str, Any]]:
        system = next((m.content for m in messages if m.role == "system"), None)
        turns = [
            {"role": m.role, "content": m.content}
            for m in messages
            if m.role != "system"
        ]

        headers = {
            "x-api-key": self.api_key or "",
            "anthropic-version": ANTHROPIC_VERSION,
            "content-type": "application/json",
        }
        body: dict[str, Any] = {
            "model": ANTHROPIC_MODEL,
            "max_tokens": ANTHROPIC_MAX_TOKENS,
            "messages": turns,
        }
        if system is not None:
            body["system"] = system
        return ANTHROPIC_MESSAGES_URL, headers, body

    def extract_text(self, data: dict[str, Any]) -> str:
        return data["content"][0]["text"]
