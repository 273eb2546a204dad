"""Exceptions raised by the chat relay.

Everything derives from :class:`ChatRelayError` so the request handler can
map failures to an HTTP envelope at a single boundary.
"""

from __future__ import annotations


class ChatRelayError(Exception):
    """Base class for all relay failures."""

    status_code: int = 500


class InvalidChatRequest(ChatRelayError):
    """Malformed or missing request fields; never reaches an adapter."""

    status_code = 400


class MissingCredentialError(ChatRelayError):
    """An adapter was invoked without a usable API key."""


class UpstreamError(ChatRelayError):
    """The vendor answered with a non-2xx status.

    The message embeds the vendor name and the raw response body so operators
    can see what the vendor complained about.
    """

    def __init__(self, vendor: str, status: int, body: str):
        self.vendor = vendor
        self.status = status
        self.body = body
        super().__init__(f"{vendor} API Error: {body}")


class TransportError(ChatRelayError):
    """The vendor could not be reached (DNS, connect, timeout, ...)."""


class ParseError(ChatRelayError):
    """A 2xx reply did not have the documented shape."""
