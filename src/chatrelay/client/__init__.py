"""Client-side helpers for the chat UI: settings store, API client, session."""

from chatrelay.client.api_client import FALLBACK_REPLY, ChatAPIClient
from chatrelay.client.session import ChatSession
from chatrelay.client.settings_store import ApiKeys, ClientSettings, SettingsStore

__all__ = [
    "ApiKeys",
    "ChatAPIClient",
    "ChatSession",
    "ClientSettings",
    "FALLBACK_REPLY",
    "SettingsStore",
]
