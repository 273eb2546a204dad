"""Pydantic schemas for API request/response validation."""

from __future__ import annotations

from pydantic import BaseModel, Field

from chatrelay.llm.base import ChatMessage


# ── Chat ──────────────────────────────────────────────────────────────────────


class ChatRequest(BaseModel):
    messages: list[ChatMessage] = Field(..., min_length=1)
    model: str = Field(..., min_length=1)


class ChatResponse(BaseModel):
    content: str


class ErrorResponse(BaseModel):
    error: str


# ── Models ────────────────────────────────────────────────────────────────────


class ModelInfo(BaseModel):
    id: str
    name: str
    vendor: str
    has_adapter: bool
    server_key_configured: bool


class ModelListResponse(BaseModel):
    models: list[ModelInfo]
    total: int
