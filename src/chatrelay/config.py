"""Chatrelay application configuration via environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from chatrelay.llm.base import ProviderCredentials


class Settings(BaseSettings):
    """Global application settings loaded from environment / .env file."""

    # General
    chatrelay_env: str = "development"
    chatrelay_debug: bool = True
    cors_origins: list[str] = ["*"]

    # Process-wide default credentials, consulted only when a request
    # carries no override for the vendor.
    gemini_api_key: str = ""
    openai_api_key: str = ""
    anthropic_api_key: str = ""
    openrouter_api_key: str = ""

    # Upstream calls
    request_timeout: float = 60.0  # seconds, per outbound call
    stub_delay_seconds: float = 1.0  # simulated latency of the mock provider

    # Diagnostics: verbose logs the full traceback of a failed chat request,
    # terse logs a single line.
    verbose_errors: bool = True

    def default_credentials(self) -> ProviderCredentials:
        """Return the read-only default credential set."""
        return ProviderCredentials(
            gemini=self.gemini_api_key or None,
            openai=self.openai_api_key or None,
            anthropic=self.anthropic_api_key or None,
            openrouter=self.openrouter_api_key or None,
        )

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
