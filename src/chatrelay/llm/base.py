"""Base provider interface for the vendor adapter layer."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Literal

import httpx
from pydantic import BaseModel

from chatrelay.llm.errors import (
    MissingCredentialError,
    ParseError,
    TransportError,
    UpstreamError,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0


class ChatMessage(BaseModel):
    """One turn of a conversation."""

    role: Literal["user", "assistant", "system"]
    content: str


class Vendor(str, Enum):
    """Closed set of upstream vendors the relay knows about."""

    GEMINI = "gemini"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    OPENROUTER = "openrouter"
    GROK = "grok"
    DEEPSEEK = "deepseek"
    MISTRAL = "mistral"


class ProviderCredentials(BaseModel):
    """Optional API key per vendor.

    Used both for per-request overrides (from request headers) and for the
    process-wide defaults (from settings).
    """

    gemini: str | None = None
    openai: str | None = None
    anthropic: str | None = None
    openrouter: str | None = None

    model_config = {"frozen": True}

    def get(self, vendor: Vendor) -> str | None:
        """Return the key for *vendor*, treating blank strings as absent."""
        value = getattr(self, vendor.value, None)
        return value or None


class ProviderIdentity(BaseModel):
    id: str
    name: str


class ProviderAdapter(ABC):
    """Interface shared by every vendor adapter and the stub.

    An adapter is built per request and turns an ordered list of
    :class:`ChatMessage` into a single generated text.
    """

    id: str = "base"
    name: str = "Base Provider"

    def identify(self) -> ProviderIdentity:
        return ProviderIdentity(id=self.id, name=self.name)

    @abstractmethod
    async def generate(self, messages: list[ChatMessage]) -> str:
        """Generate a reply for the conversation.

        Args:
            messages: Conversation in chronological order; the last entry is
                the newest user turn.

        Returns:
            The generated text.
        """
        ...


class HTTPProviderAdapter(ProviderAdapter):
    """Adapter that talks to a vendor's JSON-over-HTTPS API.

    Subclasses describe the vendor wire format through :meth:`build_request`
    and :meth:`extract_text`; this class performs exactly one POST per call
    and maps failures onto the relay's error taxonomy.
    """

    vendor: Vendor

    def __init__(
        self,
        api_key: str | None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    @abstractmethod
    def build_request(
        self, messages: list[ChatMessage]
    ) -> tuple[str, dict[str, str], dict[str, Any]]:
        """Return ``(url, headers, json_body)`` for the vendor call."""
        ...

    @abstractmethod
    def extract_text(self, data: dict[str, Any]) -> str:
        """Pull the generated text out of a successful response body."""
        ...

    async def generate(self, messages: list[ChatMessage]) -> str:
        if not self.api_key:
            raise MissingCredentialError(f"{self.name} API Key missing")

        url, headers, body = self.build_request(messages)
        logger.info(
            "%s request: vendor=%s messages=%d",
            self.name,
            self.vendor.value,
            len(messages),
        )

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(url, headers=headers, json=body)
        except httpx.HTTPError as exc:
            logger.warning("%s transport failure: %r", self.name, exc)
            raise TransportError(f"Could not reach {self.name} API") from exc

        if not response.is_success:
            text = response.text
            logger.error(
                "%s error response: status=%d body=%s",
                self.name,
                response.status_code,
                text[:500],
            )
            raise UpstreamError(self.name, response.status_code, text)

        try:
            text = self.extract_text(response.json())
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            logger.warning(
                "%s returned an unexpected body: %s", self.name, response.text[:500]
            )
            raise ParseError(f"Unexpected response from {self.name} API") from exc

        if not isinstance(text, str) or not text:
            logger.warning("%s returned no text content: %r", self.name, text)
            raise ParseError(f"Unexpected response from {self.name} API")
        return text
