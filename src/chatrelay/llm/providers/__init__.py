"""LLM provider implementations.

One adapter per upstream vendor, all sharing the ``ProviderAdapter`` interface:

- GeminiProvider     — Google Gemini generateContent
- OpenAIProvider     — OpenAI chat completions
- AnthropicProvider  — Anthropic messages
- OpenRouterProvider — OpenRouter gateway (OpenAI dialect)
- StubProvider       — offline mock used when no key is configured
"""

from chatrelay.llm.providers.anthropic import AnthropicProvider
from chatrelay.llm.providers.gemini import GeminiProvider
from chatrelay.llm.providers.openai import OpenAIProvider
from chatrelay.llm.providers.openrouter import OpenRouterProvider
from chatrelay.llm.providers.stub import StubProvider

__all__ = [
    "AnthropicProvider",
    "GeminiProvider",
    "OpenAIProvider",
    "OpenRouterProvider",
    "StubProvider",
]
