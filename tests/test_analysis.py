"""Tests for the AI-assisted analysis tools."""

import urllib.error

import pytest

from core import analysis, catalogs

BLANK_CASES = [
    (analysis.analyze_sentiment, {"text": "  "}, "No text provided for sentiment analysis."),
    (analysis.analyze_writing_tone, {"text": ""}, "No text provided for tone analysis."),
    (analysis.improve_writing, {"text": "\n"}, "No text provided for improvement suggestions."),
    (analysis.analyze_readability, {"text": ""}, "No text provided for readability analysis."),
    (analysis.analyze_argument_structure, {"argument": " "}, "No argument provided for structural analysis."),
    (analysis.analyze_bias_in_text, {"text": ""}, "No text provided for bias analysis."),
    (analysis.analyze_emotional_tone, {"text": "\t"}, "No text provided for emotional tone analysis."),
    (analysis.summarize_content_from_url, {"url": " "}, "No URL provided for summarization."),
]


class TestRequiredArguments:
    """Test that blank required text short-circuits before the backend."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool,kwargs,message", BLANK_CASES)
    async def test_blank_input_returns_message_without_backend_call(self, backend, tool, kwargs, message):
        assert await tool(backend, **kwargs) == message
        assert backend.call_count == 0


class TestSentiment:
    """Test suite for analyze_sentiment."""

    @pytest.mark.asyncio
    async def test_prompt_and_label(self, backend):
        result = await analysis.analyze_sentiment(backend, "I love this!")
        assert result == "Sentiment Analysis: stub reply"
        assert backend.last_request == 'Analyze the sentiment of this text: "I love this!"'
        assert "sentiment analysis expert" in backend.last_persona
        assert backend.last_options == catalogs.SENTIMENT_OPTIONS


class TestImproveWriting:
    """Test suite for improve_writing focus handling."""

    @pytest.mark.asyncio
    async def test_known_focus_selects_instruction(self, backend):
        await analysis.improve_writing(backend, "Me and him goes.", focus="GRAMMAR")
        assert catalogs.IMPROVEMENT_FOCUS.instruction("grammar") in backend.last_persona

    @pytest.mark.asyncio
    async def test_unknown_focus_matches_default(self, backend):
        """Test that an unrecognized focus resolves exactly like the default."""
        await analysis.improve_writing(backend, "Some text.", focus="banana")
        banana_messages = backend.last_messages
        await analysis.improve_writing(backend, "Some text.")
        assert backend.last_messages == banana_messages

    @pytest.mark.asyncio
    async def test_label_echoes_raw_focus(self, backend):
        result = await analysis.improve_writing(backend, "Some text.", focus="banana")
        assert result.startswith("Writing Improvement Suggestions (banana): ")


class TestSummarizeContentFromUrl:
    """Test suite for summarize_content_from_url."""

    @pytest.mark.asyncio
    async def test_downloads_then_summarizes(self, backend):
        fetched = []

        def fetch(url):
            fetched.append(url)
            return "Page body"

        result = await analysis.summarize_content_from_url(backend, "  https://example.com  ", fetch=fetch)
        assert fetched == ["https://example.com"]
        assert result == "Summary: stub reply"
        assert backend.last_request == "Page body"
        assert backend.last_persona == "Briefly summarize the following downloaded content:"
        assert backend.last_options == catalogs.SUMMARIZE_OPTIONS

    @pytest.mark.asyncio
    async def test_download_errors_propagate(self, backend):
        def fetch(url):
            raise urllib.error.URLError("unreachable")

        with pytest.raises(urllib.error.URLError):
            await analysis.summarize_content_from_url(backend, "https://example.com", fetch=fetch)
        assert backend.call_count == 0
