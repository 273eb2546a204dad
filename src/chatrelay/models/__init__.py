"""Data models - Pydantic request and response schemas."""

from chatrelay.models.schemas import (
    ChatRequest,
    ChatResponse,
    ErrorResponse,
    ModelInfo,
    ModelListResponse,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "ErrorResponse",
    "ModelInfo",
    "ModelListResponse",
]
