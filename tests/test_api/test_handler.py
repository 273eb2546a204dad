"""Tests for the chat request handler outside of HTTP."""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from chatrelay.api.handler import handle_chat, parse_chat_request
from chatrelay.llm import ProviderCredentials, ProviderSelector
from chatrelay.llm.errors import InvalidChatRequest


def _adapter(result: str = "", error: Exception | None = None) -> MagicMock:
    adapter = MagicMock()
    adapter.identify.return_value.id = "test"
    adapter.generate = AsyncMock(return_value=result, side_effect=error)
    return adapter


def _selector_with(adapter) -> MagicMock:
    selector = MagicMock(spec=ProviderSelector)
    selector.select.return_value = adapter
    return selector


class TestParseChatRequest:
    def test_valid(self):
        request = parse_chat_request(
            {"messages": [{"role": "user", "content": "Hi"}], "model": "gpt-4"}
        )
        assert request.model == "gpt-4"
        assert request.messages[0].content == "Hi"

    def test_preserves_order(self):
        turns = [
            {"role": "user", "content": "one"},
            {"role": "assistant", "content": "two"},
            {"role": "user", "content": "three"},
        ]
        request = parse_chat_request({"messages": turns, "model": "gemini"})
        assert [m.content for m in request.messages] == ["one", "two", "three"]

    def test_missing_content(self):
        with pytest.raises(InvalidChatRequest, match="messages format"):
            parse_chat_request({"messages": [{"role": "user"}], "model": "gemini"})


class TestHandleChat:
    """Tests for handle_chat's envelopes and logging."""

    @pytest.mark.asyncio
    async def test_success_envelope(self):
        adapter = _adapter("hi there")
        selector = _selector_with(adapter)
        creds = ProviderCredentials(openai="sk")

        outcome = await handle_chat(
            {"messages": [{"role": "user", "content": "Hi"}], "model": "gpt-4"}, selector, creds
        )

        assert outcome.status_code == 200
        assert outcome.body.content == "hi there"
        selector.select.assert_called_once_with("gpt-4", creds)

    @pytest.mark.asyncio
    async def test_validation_failure_skips_selection(self):
        selector = _selector_with(_adapter())

        outcome = await handle_chat({"messages": [], "model": "gpt-4"}, selector)

        assert outcome.status_code == 400
        selector.select.assert_not_called()

    @pytest.mark.asyncio
    async def test_unexpected_exception_is_caught(self):
        adapter = _adapter(error=RuntimeError())
        outcome = await handle_chat(
            {"messages": [{"role": "user", "content": "Hi"}], "model": "gpt-4"},
            _selector_with(adapter),
        )

        assert outcome.status_code == 500
        assert outcome.body.error == "Internal Server Error"

    @pytest.mark.asyncio
    async def test_verbose_logs_traceback(self, caplog):
        adapter = _adapter(error=ValueError("boom"))

        with caplog.at_level(logging.ERROR, logger="chatrelay.api.handler"):
            outcome = await handle_chat(
                {"messages": [{"role": "user", "content": "Hi"}], "model": "gpt-4"},
                _selector_with(adapter),
                verbose=True,
            )

        assert outcome.body.error == "boom"
        assert caplog.records[-1].exc_info is not None

    @pytest.mark.asyncio
    async def test_terse_logs_one_line(self, caplog):
        adapter = _adapter(error=ValueError("boom"))

        with caplog.at_level(logging.ERROR, logger="chatrelay.api.handler"):
            await handle_chat(
                {"messages": [{"role": "user", "content": "Hi"}], "model": "gpt-4"},
                _selector_with(adapter),
                verbose=False,
            )

        record = caplog.records[-1]
        assert record.exc_info is None
        assert "boom" in record.getMessage()

    @pytest.mark.asyncio
    async def test_real_selector_stub(self):
        outcome = await handle_chat(
            {"messages": [{"role": "user", "content": "Hello"}], "model": "deepseek"},
            ProviderSelector(stub_delay=0),
        )
        assert outcome.status_code == 200
        assert "Hello" in outcome.body.content
