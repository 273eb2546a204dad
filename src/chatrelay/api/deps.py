"""FastAPI dependency injection helpers."""

from __future__ import annotations

from fastapi import Header

from chatrelay.config import settings
from chatrelay.llm import ProviderCredentials, ProviderSelector

# Singleton selector built from the process-wide defaults
_selector: ProviderSelector | None = None


def get_selector() -> ProviderSelector:
    """Get or create the provider selector."""
    global _selector
    if _selector is None:
        _selector = ProviderSelector(
            defaults=settings.default_credentials(),
            timeout=settings.request_timeout,
            stub_delay=settings.stub_delay_seconds,
        )
    return _selector


async def get_credential_overrides(
    gemini_key: str | None = Header(default=None, alias="x-gemini-key"),
    openai_key: str | None = Header(default=None, alias="x-openai-key"),
    anthropic_key: str | None = Header(default=None, alias="x-anthropic-key"),
    openrouter_key: str | None = Header(default=None, alias="x-openrouter-key"),
) -> ProviderCredentials:
    """Collect per-request API keys from the vendor headers.

    Blank headers count as absent, so the server default still applies.
    """
    return ProviderCredentials(
        gemini=gemini_key or None,
        openai=openai_key or None,
        anthropic=anthropic_key or None,
        openrouter=openrouter_key or None,
    )
