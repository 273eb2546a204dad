"""Chat request handler - validation, provider dispatch and envelopes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from chatrelay.config import settings
from chatrelay.llm import ProviderCredentials, ProviderSelector
from chatrelay.llm.errors import InvalidChatRequest
from chatrelay.models.schemas import ChatRequest, ChatResponse, ErrorResponse

logger = logging.getLogger(__name__)


@dataclass
class ChatOutcome:
    status_code: int
    body: ChatResponse | ErrorResponse


def parse_chat_request(payload: Any) -> ChatRequest:
    """Validate a decoded JSON payload.

    Raises:
        InvalidChatRequest: ``messages`` is missing, not a list, empty or
            malformed, or ``model`` is missing or blank.
    """
    if not isinstance(payload, dict):
        raise InvalidChatRequest("Invalid JSON body")

    messages = payload.get("messages")
    if not messages or not isinstance(messages, list):
        raise InvalidChatRequest("Invalid messages format")

    model = payload.get("model")
    if not isinstance(model, str) or not model.strip():
        raise InvalidChatRequest("Model not specified")

    try:
        return ChatRequest.model_validate({"messages": messages, "model": model})
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise InvalidChatRequest(
            f"Invalid messages format: {location}: {first['msg']}"
        ) from exc


async def handle_chat(
    payload: Any,
    selector: ProviderSelector,
    credentials: ProviderCredentials | None = None,
    verbose: bool | None = None,
) -> ChatOutcome:
    """Run one chat request end to end.

    Validation errors become a 400 and never reach an adapter.  Any failure
    while selecting or calling the adapter is logged and becomes a 500
    carrying only the exception message.
    """
    try:
        request = parse_chat_request(payload)
    except InvalidChatRequest as exc:
        logger.info("Rejected chat request: %s", exc)
        return ChatOutcome(exc.status_code, ErrorResponse(error=str(exc)))

    if verbose is None:
        verbose = settings.verbose_errors

    try:
        adapter = selector.select(request.model, credentials)
        logger.info(
            "Chat request: model=%s provider=%s messages=%d",
            request.model,
            adapter.identify().id,
            len(request.messages),
        )
        content = await adapter.generate(request.messages)
    except Exception as exc:
        if verbose:
            logger.exception("Chat request failed for model=%s", request.model)
        else:
            logger.error("Chat request failed for model=%s: %s", request.model, exc)
        return ChatOutcome(500, ErrorResponse(error=str(exc) or "Internal Server Error"))

    return ChatOutcome(200, ChatResponse(content=content))
