"""Tests for the LiteLLM completion backend and the HTTP helpers."""

import urllib.error
from types import SimpleNamespace

import litellm
import pytest

from core import http
from core.completion import LiteLlmBackend
from core.models import GenerationOptions
from core.pipeline import build_messages


def _fake_response(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class TestLiteLlmBackend:
    """Test suite for LiteLlmBackend."""

    @pytest.mark.asyncio
    async def test_passes_messages_and_options(self, monkeypatch):
        captured = {}

        async def fake_acompletion(**kwargs):
            captured.update(kwargs)
            return _fake_response("Positive (95)")

        monkeypatch.setattr(litellm, "acompletion", fake_acompletion)

        backend = LiteLlmBackend("openrouter/openai/gpt-4o-mini")
        result = await backend.complete(
            build_messages("You are an analyst.", "Analyze this"),
            GenerationOptions(max_tokens=150, temperature=0.2),
        )

        assert result == "Positive (95)"
        assert captured["model"] == "openrouter/openai/gpt-4o-mini"
        assert captured["messages"] == [
            {"role": "system", "content": "You are an analyst."},
            {"role": "user", "content": "Analyze this"},
        ]
        assert captured["max_tokens"] == 150
        assert captured["temperature"] == 0.2
        assert "api_base" not in captured

    @pytest.mark.asyncio
    async def test_api_base_and_empty_content(self, monkeypatch):
        captured = {}

        async def fake_acompletion(**kwargs):
            captured.update(kwargs)
            return _fake_response(None)

        monkeypatch.setattr(litellm, "acompletion", fake_acompletion)

        backend = LiteLlmBackend("ollama/llama3", api_base="http://localhost:11434")
        result = await backend.complete(build_messages("p", "r"), GenerationOptions(100, 0.5))

        assert result == ""
        assert captured["api_base"] == "http://localhost:11434"

    @pytest.mark.asyncio
    async def test_errors_propagate(self, monkeypatch):
        async def fake_acompletion(**kwargs):
            raise RuntimeError("rate limited")

        monkeypatch.setattr(litellm, "acompletion", fake_acompletion)

        with pytest.raises(RuntimeError, match="rate limited"):
            await LiteLlmBackend("m").complete(build_messages("p", "r"), GenerationOptions(100, 0.5))


class _FakeHttpResponse:
    def __init__(self, body: bytes, charset="utf-8"):
        self._body = body
        self.headers = SimpleNamespace(get_content_charset=lambda: charset)

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class TestHttpHelpers:
    """Test suite for fetch_text and fetch_json."""

    def test_fetch_json_decodes_body(self, monkeypatch):
        monkeypatch.setattr(
            http.urllib.request, "urlopen",
            lambda req, timeout: _FakeHttpResponse(b'[{"name": "Alice"}]'),
        )
        assert http.fetch_json("https://example.com/monkeys.json") == [{"name": "Alice"}]

    def test_fetch_json_returns_none_on_network_error(self, monkeypatch):
        def fail(req, timeout):
            raise urllib.error.URLError("unreachable")

        monkeypatch.setattr(http.urllib.request, "urlopen", fail)
        assert http.fetch_json("https://example.com/monkeys.json") is None

    def test_fetch_json_returns_none_on_malformed_json(self, monkeypatch):
        monkeypatch.setattr(
            http.urllib.request, "urlopen",
            lambda req, timeout: _FakeHttpResponse(b"<html>not json</html>"),
        )
        assert http.fetch_json("https://example.com/monkeys.json") is None

    def test_fetch_text_propagates_errors(self, monkeypatch):
        def fail(req, timeout):
            raise urllib.error.URLError("unreachable")

        monkeypatch.setattr(http.urllib.request, "urlopen", fail)
        with pytest.raises(urllib.error.URLError):
            http.fetch_text("https://example.com")

    def test_fetch_text_uses_response_charset(self, monkeypatch):
        monkeypatch.setattr(
            http.urllib.request, "urlopen",
            lambda req, timeout: _FakeHttpResponse("café".encode("latin-1"), charset="latin-1"),
        )
        assert http.fetch_text("https://example.com") == "café"
