"""Provider selector - maps a logical model id to a concrete adapter."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from chatrelay.llm.base import (
    DEFAULT_TIMEOUT,
    HTTPProviderAdapter,
    ProviderAdapter,
    ProviderCredentials,
    Vendor,
)
from chatrelay.llm.providers import (
    AnthropicProvider,
    GeminiProvider,
    OpenAIProvider,
    OpenRouterProvider,
    StubProvider,
)
from chatrelay.llm.providers.stub import STUB_DELAY_SECONDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelSpec:
    id: str
    name: str
    vendor: Vendor


# Model ids offered to clients, in display order.
MODEL_CATALOG: dict[str, ModelSpec] = {
    spec.id: spec
    for spec in (
        ModelSpec("gemini", "Gemini", Vendor.GEMINI),
        ModelSpec("gpt-4", "GPT-4", Vendor.OPENAI),
        ModelSpec("claude-3", "Claude 3", Vendor.ANTHROPIC),
        ModelSpec("openrouter", "OpenRouter", Vendor.OPENROUTER),
        ModelSpec("grok", "Grok", Vendor.GROK),
        ModelSpec("deepseek", "DeepSeek", Vendor.DEEPSEEK),
        ModelSpec("mistral", "Mistral", Vendor.MISTRAL),
    )
}

# Vendors with a real adapter.  Grok, DeepSeek and Mistral are listed in the
# catalog but always answered by the stub.
ADAPTERS: dict[Vendor, type[HTTPProviderAdapter]] = {
    Vendor.GEMINI: GeminiProvider,
    Vendor.OPENAI: OpenAIProvider,
    Vendor.ANTHROPIC: AnthropicProvider,
    Vendor.OPENROUTER: OpenRouterProvider,
}


class ProviderSelector:
    """Chooses the adapter that will serve a request.

    Selection never fails: an unknown model id, a vendor without an adapter,
    or a missing key all resolve to the :class:`StubProvider`.  The selector
    holds only read-only configuration, so identical arguments always give
    adapters with identical behaviour.
    """

    def __init__(
        self,
        defaults: ProviderCredentials | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        stub_delay: float = STUB_DELAY_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.defaults = defaults or ProviderCredentials()
        self.timeout = timeout
        self.stub_delay = stub_delay
        self.transport = transport

    def resolve_key(
        self, vendor: Vendor, credentials: ProviderCredentials | None = None
    ) -> str | None:
        """Per-request override first, then the process default."""
        if credentials is not None:
            override = credentials.get(vendor)
            if override:
                return override
        return self.defaults.get(vendor)

    def select(
        self, model_id: str, credentials: ProviderCredentials | None = None
    ) -> ProviderAdapter:
        spec = MODEL_CATALOG.get(model_id)
        if spec is None:
            logger.info("Unknown model %r, using stub provider", model_id)
            return self._stub()

        adapter_cls = ADAPTERS.get(spec.vendor)
        if adapter_cls is None:
            logger.info("No adapter for %s yet, using stub provider", spec.vendor.value)
            return self._stub()

        api_key = self.resolve_key(spec.vendor, credentials)
        if not api_key:
            logger.info("No %s key configured, using stub provider", spec.vendor.value)
            return self._stub()

        return adapter_cls(api_key, timeout=self.timeout, transport=self.transport)

    def _stub(self) -> StubProvider:
        return StubProvider(delay=self.stub_delay)

    def has_default_key(self, vendor: Vendor) -> bool:
        return self.defaults.get(vendor) is not None
