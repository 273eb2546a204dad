"""Chatrelay CLI — talk to a provider without the browser UI.

Usage::

    # List the model ids the relay understands
    python -m chatrelay.cli models

    # Send one message in-process (no server needed)
    python -m chatrelay.cli chat --model gemini "Hello"

    # Run the HTTP API
    python -m chatrelay.cli serve --port 8000
"""

from __future__ import annotations

import asyncio
import sys

import click

from chatrelay.config import settings


@click.group()
def cli():
    """Chatrelay — multi-provider LLM chat relay."""
    pass


# ── models ────────────────────────────────────────────────────────────


@cli.command()
def models():
    """List known model ids and whether a real provider backs them."""
    from chatrelay.llm.selector import ADAPTERS, MODEL_CATALOG

    defaults = settings.default_credentials()
    for spec in MODEL_CATALOG.values():
        if spec.vendor not in ADAPTERS:
            status = click.style("mock only", fg="yellow")
        elif defaults.get(spec.vendor):
            status = click.style("key configured", fg="green")
        else:
            status = click.style("no key (mock)", fg="yellow")
        click.echo(f"{spec.id:<12} {spec.name:<12} {status}")


# ── chat ──────────────────────────────────────────────────────────────


@cli.command()
@click.argument("message")
@click.option("--model", "model_id", default="gemini", help="Model id (see `models`).")
@click.option(
    "--system",
    default=None,
    help="Optional system prompt sent before the message.",
)
@click.option(
    "--api-key",
    default=None,
    help="Key for the model's vendor, overriding the environment default.",
)
def chat(message: str, model_id: str, system: str | None, api_key: str | None):
    """Send MESSAGE to a provider and print the reply."""
    asyncio.run(_chat(message, model_id, system, api_key))


async def _chat(
    message: str, model_id: str, system: str | None, api_key: str | None
) -> None:
    from chatrelay.api.handler import handle_chat
    from chatrelay.llm import MODEL_CATALOG, ProviderCredentials, ProviderSelector

    credentials = None
    spec = MODEL_CATALOG.get(model_id)
    if api_key and spec is not None and spec.vendor.value in ProviderCredentials.model_fields:
        credentials = ProviderCredentials(**{spec.vendor.value: api_key})

    messages = []
    if system:
        messages.append({"role": "system", "content": system})
    messages.append({"role": "user", "content": message})

    selector = ProviderSelector(
        defaults=settings.default_credentials(),
        timeout=settings.request_timeout,
        stub_delay=settings.stub_delay_seconds,
    )
    outcome = await handle_chat(
        {"messages": messages, "model": model_id}, selector, credentials
    )

    if outcome.status_code != 200:
        click.secho(f"Error: {outcome.body.error}", fg="red", err=True)
        sys.exit(1)
    click.echo(outcome.body.content)


# ── serve ─────────────────────────────────────────────────────────────


@cli.command()
@click.option("--host", default="127.0.0.1", help="Bind address.")
@click.option("--port", default=8000, type=int, help="Bind port.")
@click.option("--reload", is_flag=True, default=False, help="Reload on code changes.")
def serve(host: str, port: int, reload: bool):
    """Run the chat relay HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run("chatrelay.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    cli()
