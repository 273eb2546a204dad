"""Visible conversation state for one chat panel."""

from __future__ import annotations

from chatrelay.client.api_client import ChatAPIClient
from chatrelay.client.settings_store import ApiKeys
from chatrelay.llm.base import ChatMessage


def welcome_message(model: str) -> ChatMessage:
    return ChatMessage(
        role="assistant",
        content=f"Hello! I'm ready to help you using **{model}**. How can I assist you today?",
    )


class ChatSession:
    """Conversation shown in the UI, with single-flight submission.

    While a submission is in flight further submits are ignored, mirroring
    the disabled input box in the UI.
    """

    def __init__(self, client: ChatAPIClient, model: str):
        self.client = client
        self.model = model
        self.messages: list[ChatMessage] = [welcome_message(model)]
        self.pending = False

    def select_model(self, model: str) -> None:
        """Switch models, refreshing the welcome message if nothing was said yet."""
        self.model = model
        if len(self.messages) == 1 and self.messages[0].role == "assistant":
            self.messages = [welcome_message(model)]

    def submit(self, text: str, api_keys: ApiKeys) -> ChatMessage | None:
        """Send a user turn and append the reply.

        Returns the assistant message, or ``None`` when the input was blank or
        another submission is still pending.
        """
        if not text.strip() or self.pending:
            return None

        self.messages.append(ChatMessage(role="user", content=text))
        self.pending = True
        try:
            reply = self.client.send(self.messages, self.model, api_keys)
        finally:
            self.pending = False

        assistant = ChatMessage(role="assistant", content=reply)
        self.messages.append(assistant)
        return assistant
