"""Provider-selection and request-translation layer."""

from chatrelay.llm.base import (
    ChatMessage,
    ProviderAdapter,
    ProviderCredentials,
    ProviderIdentity,
    Vendor,
)
from chatrelay.llm.selector import MODEL_CATALOG, ProviderSelector

__all__ = [
    "ChatMessage",
    "MODEL_CATALOG",
    "ProviderAdapter",
    "ProviderCredentials",
    "ProviderIdentity",
    "ProviderSelector",
    "Vendor",
]
