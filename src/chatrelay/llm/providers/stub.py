"""Mock provider used when no real credential is available."""

from __future__ import annotations

import asyncio

from chatrelay.llm.base import ChatMessage, ProviderAdapter

STUB_DELAY_SECONDS = 1.0


class StubProvider(ProviderAdapter):
    """Simulates a reply after a short delay without any network access."""

    id = "mock"
    name = "Mock Provider"

    def __init__(self, delay: float = STUB_DELAY_SECONDS):
        self.delay = delay

    async def generate(self, messages: list[ChatMessage]) -> str:
        if self.delay > 0:
            await asyncio.sleep(self.delay)
        last = messages[-1].content if messages else ""
        return (
            f'[MOCK] This is a simulated response for the last message: "{last}". '
            "\n\n Configure API keys to get real responses."
        )
