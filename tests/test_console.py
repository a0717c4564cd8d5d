"""Tests for the tool-call logging helpers and the demo agent prompt."""

import inspect
import logging
from datetime import date

import pytest

from agent.prompt import get_text_assistant_prompt
from tools.console import log_response, logged


class TestLogged:
    """Test suite for the @logged decorator."""

    def test_preserves_signature_and_docstring(self):
        def shout(message: str, times: int = 1) -> str:
            """Shout the message."""
            return message.upper() * times

        wrapped = logged(shout)
        assert wrapped.__name__ == "shout"
        assert wrapped.__doc__ == "Shout the message."
        assert list(inspect.signature(wrapped).parameters) == ["message", "times"]

    def test_logs_request_and_response(self, caplog):
        wrapped = logged(lambda message: f"Echo: {message}")
        with caplog.at_level(logging.INFO, logger="tools"):
            assert wrapped("hi") == "Echo: hi"

        assert "called with: message='hi'" in caplog.text
        assert '"Echo: hi"' in caplog.text

    @pytest.mark.asyncio
    async def test_wraps_coroutines(self, caplog):
        async def word_total(text: str) -> int:
            return len(text.split())

        wrapped = logged(word_total)
        assert inspect.iscoroutinefunction(wrapped)
        with caplog.at_level(logging.INFO, logger="tools"):
            assert await wrapped(text="a b c") == 3
        assert "word_total called with: text='a b c'" in caplog.text

    def test_long_values_are_shortened_in_log_only(self, caplog):
        big = "x" * 2000
        with caplog.at_level(logging.INFO, logger="tools"):
            assert log_response("trim", big) is big
        assert "…" in caplog.text
        assert big not in caplog.text


class TestAgentPrompt:
    """Test suite for the demo agent's system prompt."""

    def test_injects_today(self):
        assert date.today().isoformat() in get_text_assistant_prompt()

    def test_mentions_roster_tools(self):
        prompt = get_text_assistant_prompt()
        assert "get_monkeys" in prompt
        assert "get_monkey" in prompt
