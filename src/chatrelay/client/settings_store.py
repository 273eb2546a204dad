"""Client-local settings persistence.

The chat UI keeps its theme and per-vendor API keys in a single JSON blob that
the server never sees.  The blob is read once at startup and rewritten after
every change.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

SETTINGS_KEY = "chatbot-settings"
DEFAULT_SETTINGS_DIR = Path("~/.chatrelay")


class ApiKeys(BaseModel):
    gemini: str = ""
    openai: str = ""
    anthropic: str = ""
    openrouter: str = ""
    grok: str = ""
    deepseek: str = ""


class ClientSettings(BaseModel):
    theme: Literal["dark", "light"] = "dark"
    api_keys: ApiKeys = Field(default_factory=ApiKeys, alias="apiKeys")

    model_config = {"populate_by_name": True}

    def with_api_key(self, vendor: str, key: str) -> ClientSettings:
        """Return a copy with one vendor key replaced."""
        if vendor not in ApiKeys.model_fields:
            raise ValueError(f"Unknown vendor: {vendor}")
        keys = self.api_keys.model_copy(update={vendor: key})
        return self.model_copy(update={"api_keys": keys})


class SettingsStore:
    """Reads and writes the ``chatbot-settings`` blob on local disk."""

    def __init__(self, directory: str | Path | None = None):
        base = Path(directory) if directory is not None else DEFAULT_SETTINGS_DIR
        self.path = base.expanduser() / f"{SETTINGS_KEY}.json"

    def load(self) -> ClientSettings:
        """Load saved settings, falling back to defaults.

        A partial blob is merged over the defaults; a missing, unreadable or
        malformed blob yields the defaults.
        """
        if not self.path.exists():
            return ClientSettings()

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            logger.warning("Failed to parse settings at %s, using defaults", self.path)
            return ClientSettings()

        if not isinstance(raw, dict):
            logger.warning("Settings at %s are not an object, using defaults", self.path)
            return ClientSettings()

        defaults = ClientSettings().model_dump(by_alias=True)
        saved_keys = raw.get("apiKeys")
        merged = {**defaults, **raw}
        if isinstance(saved_keys, dict):
            merged["apiKeys"] = {**defaults["apiKeys"], **saved_keys}

        try:
            return ClientSettings.model_validate(merged)
        except ValidationError:
            logger.warning("Invalid settings at %s, using defaults", self.path)
            return ClientSettings()

    def save(self, settings: ClientSettings) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(settings.model_dump(by_alias=True), indent=2), encoding="utf-8"
        )
