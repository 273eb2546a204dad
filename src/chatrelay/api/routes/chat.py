"""Chat API routes."""

from __future__ import annotations

import json

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from chatrelay.api.deps import get_credential_overrides, get_selector
from chatrelay.api.handler import handle_chat
from chatrelay.llm import MODEL_CATALOG, ProviderCredentials, ProviderSelector
from chatrelay.llm.selector import ADAPTERS
from chatrelay.models.schemas import ErrorResponse, ModelInfo, ModelListResponse

router = APIRouter()


@router.post("/chat")
async def chat(
    request: Request,
    credentials: ProviderCredentials = Depends(get_credential_overrides),
    selector: ProviderSelector = Depends(get_selector),
):
    """Relay a conversation to the provider behind ``model``.

    Returns ``{"content": ...}`` on success, ``{"error": ...}`` with 400 for
    malformed input and 500 for any upstream failure.
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return JSONResponse(
            status_code=400, content=ErrorResponse(error="Invalid JSON body").model_dump()
        )

    outcome = await handle_chat(payload, selector, credentials)
    return JSONResponse(status_code=outcome.status_code, content=outcome.body.model_dump())


@router.get("/models", response_model=ModelListResponse)
async def list_models(selector: ProviderSelector = Depends(get_selector)):
    """List the model ids clients may pick from."""
    models = [
        ModelInfo(
            id=spec.id,
            name=spec.name,
            vendor=spec.vendor.value,
            has_adapter=spec.vendor in ADAPTERS,
            server_key_configured=selector.has_default_key(spec.vendor),
        )
        for spec in MODEL_CATALOG.values()
    ]
    return ModelListResponse(models=models, total=len(models))
