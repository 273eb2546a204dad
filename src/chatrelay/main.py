"""Chatrelay FastAPI application entrypoint."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chatrelay.config import settings

VERSION = "0.1.0"

# ── Logging ───────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=logging.DEBUG if settings.chatrelay_debug else logging.INFO,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
)
# Quiet down noisy third-party loggers
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)


app = FastAPI(
    title="Chatrelay",
    description="Multi-provider LLM chat relay",
    version=VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register API routes
from chatrelay.api.routes import chat  # noqa: E402

app.include_router(chat.router, prefix="/api", tags=["Chat"])


@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": VERSION, "env": settings.chatrelay_env}
