"""Google Gemini adapter (generateContent API)."""

from __future__ import annotations

from typing import Any

import httpx

from chatrelay.llm.base import ChatMessage, HTTPProviderAdapter, Vendor

GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"
GEMINI_MODEL = "gemini-1.5-flash"


class GeminiProvider(HTTPProviderAdapter):
    """Gemini has no system field and calls the assistant role ``model``.

    Every message goes into ``contents``; anything that is not a user turn is
    sent with role ``model``.  The key travels in the query string.
    """

    id = "gemini"
    name = "Gemini"
    vendor = Vendor.GEMINI

    def build_request(
        self, messages: list[ChatMessage]
    ) -> tuple[str, dict[str, str], dict[str, Any]]:
        url = str(
            httpx.URL(
                f"{GEMINI_API_BASE}/{GEMINI_MODEL}:generateContent",
                params={"key": self.api_key or ""},
            )
        )
        contents = [
            {
                "role": "user" if m.role == "user" else "model",
                "parts": [{"text": m.content}],
            }
            for m in messages
        ]
        return url, {"Content-Type": "application/json"}, {"contents": contents}

    def extract_text(self, data: dict[str, Any]) -> str:
        return data["candidates"][0]["content"]["parts"][0]["text"]
