"""Tests for the AI-assisted learning and facilitation tools."""

import pytest

from core import catalogs, learning

BLANK_CASES = [
    (learning.explain_concept, {"concept": ""}, "No concept provided for explanation."),
    (learning.translate_text, {"text": "   ", "target_language": "French"}, "No text provided for translation."),
    (learning.generate_questions, {"topic": ""}, "No topic provided for question generation."),
    (learning.generate_debate_points, {"topic": "\n"}, "No topic provided for debate point generation."),
    (learning.create_definitions, {"term": ""}, "No term provided for definition creation."),
    (learning.create_tutorial_outline, {"topic": " "}, "No topic provided for tutorial outline creation."),
]


class TestRequiredArguments:
    """Test that blank required text short-circuits before the backend."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool,kwargs,message", BLANK_CASES)
    async def test_blank_input_returns_message_without_backend_call(self, backend, tool, kwargs, message):
        assert await tool(backend, **kwargs) == message
        assert backend.call_count == 0


# (tool, required kwargs, name of the count argument, bounds)
COUNT_CASES = [
    (learning.generate_questions, {"topic": "climate"}, "count", catalogs.QUESTION_COUNT),
    (learning.create_conversation_starters, {}, "count", catalogs.CONVERSATION_STARTER_COUNT),
    (learning.generate_icebreakers, {}, "count", catalogs.ICEBREAKER_COUNT),
]

# (tool, required kwargs, name of the category argument)
CATEGORY_CASES = [
    (learning.explain_concept, {"concept": "gravity"}, "audience_level"),
    (learning.generate_questions, {"topic": "climate"}, "question_type"),
    (learning.generate_debate_points, {"topic": "remote work"}, "side"),
    (learning.create_definitions, {"term": "entropy"}, "definition_style"),
    (learning.create_tutorial_outline, {"topic": "git"}, "skill_level"),
    (learning.create_tutorial_outline, {"topic": "git"}, "format"),
    (learning.create_conversation_starters, {}, "context"),
    (learning.generate_icebreakers, {}, "context"),
    (learning.generate_icebreakers, {}, "group_size"),
]


def _tool_id(case):
    return case.__name__ if callable(case) else None


class TestCountClamp:
    """Test that out-of-range counts behave exactly like the default."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool,kwargs,param,bounds", COUNT_CASES, ids=_tool_id)
    async def test_out_of_range_counts_match_default(self, backend, tool, kwargs, param, bounds):
        await tool(backend, **kwargs)
        default_messages = backend.last_messages

        for bad in (0, -3, bounds.maximum + 1):
            await tool(backend, **kwargs, **{param: bad})
            assert backend.last_messages == default_messages

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool,kwargs,param,bounds", COUNT_CASES, ids=_tool_id)
    async def test_in_range_count_reaches_prompt(self, backend, tool, kwargs, param, bounds):
        await tool(backend, **kwargs, **{param: bounds.maximum})
        assert f"Generate {bounds.maximum} " in backend.last_request


class TestCategoryResolution:
    """Test that unknown categories resolve to the default instruction."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool,kwargs,param", CATEGORY_CASES, ids=_tool_id)
    async def test_unknown_category_matches_default(self, backend, tool, kwargs, param):
        await tool(backend, **kwargs)
        default_messages = backend.last_messages

        await tool(backend, **kwargs, **{param: "banana"})
        assert backend.last_messages == default_messages


class TestExplainConcept:
    """Test suite for explain_concept."""

    @pytest.mark.asyncio
    async def test_audience_selects_persona(self, backend):
        result = await learning.explain_concept(backend, "gravity", audience_level="CHILD")
        assert result == "Explanation of 'gravity' (for CHILD audience): stub reply"
        assert backend.last_persona == catalogs.AUDIENCE_LEVELS.instruction("child")
        assert backend.last_request == "Explain the concept of 'gravity' in 2-3 sentences."

    @pytest.mark.asyncio
    async def test_unknown_audience_matches_default(self, backend):
        await learning.explain_concept(backend, "gravity", audience_level="banana")
        assert backend.last_persona == catalogs.AUDIENCE_LEVELS.instruction("adult")


class TestTranslateText:
    """Test suite for translate_text."""

    @pytest.mark.asyncio
    async def test_translates_with_source_language(self, backend):
        result = await learning.translate_text(backend, "Hola", "English", "Spanish")
        assert result == "Translation to English: stub reply"
        assert backend.last_request == 'Translate the following text from Spanish to English: "Hola"'
        assert backend.last_options == catalogs.TRANSLATE_OPTIONS

    @pytest.mark.asyncio
    async def test_blank_source_language_auto_detects(self, backend):
        await learning.translate_text(backend, "Bonjour", "German")
        assert backend.last_request == 'Translate the following text to German: "Bonjour"'

    @pytest.mark.asyncio
    async def test_blank_target_language_still_proceeds(self, backend):
        """Test that only the text is required; a blank target falls back to English."""
        result = await learning.translate_text(backend, "Guten Tag", target_language="  ")
        assert backend.call_count == 1
        assert "to English" in backend.last_request
        assert result.endswith("stub reply")


class TestFacilitationTools:
    """Test suite for the count- and category-driven learning tools."""

    @pytest.mark.asyncio
    async def test_questions_clamp_and_default_type(self, backend):
        await learning.generate_questions(backend, "climate")
        default_messages = backend.last_messages

        await learning.generate_questions(backend, "climate", question_type="banana", count=99)
        assert backend.last_messages == default_messages
        assert backend.last_request == "Generate 5 discussion questions about: climate"

    @pytest.mark.asyncio
    async def test_questions_label_echoes_raw_type(self, backend):
        result = await learning.generate_questions(backend, "climate", question_type="Research", count=2)
        assert result == "RESEARCH Questions about climate: stub reply"
        assert backend.last_request == "Generate 2 research questions about: climate"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "side,fragment",
        [("for", "supporting"), ("against", "opposing"), ("both", "both for and against"), ("banana", "both for and against")],
    )
    async def test_debate_sides(self, backend, side, fragment):
        result = await learning.generate_debate_points(backend, "remote work", side=side)
        assert fragment in backend.last_request
        assert backend.last_request.endswith("remote work")
        assert result.startswith(f"Debate Points ({side}) for 'remote work': ")

    @pytest.mark.asyncio
    async def test_definitions_examples_toggle(self, backend):
        await learning.create_definitions(backend, "entropy")
        assert "Include relevant examples" in backend.last_persona

        result = await learning.create_definitions(backend, "entropy", "technical", include_examples=False)
        assert "Include relevant examples" not in backend.last_persona
        assert result == "TECHNICAL Definition of 'entropy': stub reply"

    @pytest.mark.asyncio
    async def test_tutorial_outline_defaults(self, backend):
        await learning.create_tutorial_outline(backend, "git", skill_level="banana", format="banana")
        assert backend.last_request == "Create a beginner-level written tutorial outline for: git"

    @pytest.mark.asyncio
    async def test_conversation_starters_need_no_arguments(self, backend):
        result = await learning.create_conversation_starters(backend)
        assert backend.call_count == 1
        assert backend.last_request == "Generate 5 conversation starters for casual situations."
        assert result == "CASUAL Conversation Starters: stub reply"

    @pytest.mark.asyncio
    async def test_icebreakers_group_size(self, backend):
        result = await learning.generate_icebreakers(backend, group_size="large", count=0)
        assert "large (20+ people)" in backend.last_request
        assert backend.last_request.startswith("Generate 3 icebreaker activities")
        assert result == "TEAM MEETING Icebreakers (large group): stub reply"
