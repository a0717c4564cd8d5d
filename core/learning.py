# =============================================================================
# core/learning.py  —  AI-assisted teaching & facilitation tools
# =============================================================================
#
# Explanations, translations, definitions, tutorial outlines, discussion
# questions, debate points, conversation starters and icebreakers.
#
# Same pipeline and conventions as core/creative.py.  Two tools here have no
# required argument at all (conversation starters, icebreakers); one
# (translate_text) validates only its primary text and falls back to
# English when the target language is blank.
# =============================================================================

from core import catalogs
from core.pipeline import CompletionBackend, generate, is_blank


async def explain_concept(backend: CompletionBackend, concept: str, audience_level: str = "adult") -> str:
    if is_blank(concept):
        return "No concept provided for explanation."

    return await generate(
        backend,
        persona=catalogs.AUDIENCE_LEVELS.instruction(audience_level),
        request=f"Explain the concept of '{concept}' in 2-3 sentences.",
        options=catalogs.EXPLAIN_OPTIONS,
        label=f"Explanation of '{concept}' (for {audience_level} audience)",
    )


async def translate_text(
    backend: CompletionBackend,
    text: str,
    target_language: str = catalogs.DEFAULT_TARGET_LANGUAGE,
    source_language: str = "",
) -> str:
    """Translate ``text``.  A blank source language lets the model auto-detect."""
    if is_blank(text):
        return "No text provided for translation."

    target = catalogs.DEFAULT_TARGET_LANGUAGE if is_blank(target_language) else target_language.strip()
    if is_blank(source_language):
        request = f'Translate the following text to {target}: "{text}"'
    else:
        request = f'Translate the following text from {source_language.strip()} to {target}: "{text}"'

    return await generate(
        backend,
        persona=(
            "You are a professional translator. Provide accurate translations while preserving "
            "the original meaning and tone."
        ),
        request=request,
        options=catalogs.TRANSLATE_OPTIONS,
        label=f"Translation to {target_language}",
    )


async def generate_questions(
    backend: CompletionBackend,
    topic: str,
    question_type: str = "discussion",
    count: int = 5,
) -> str:
    if is_blank(topic):
        return "No topic provided for question generation."

    count = catalogs.QUESTION_COUNT.clamp(count)
    type_key = catalogs.QUESTION_TYPES.key_for(question_type)
    type_instruction = catalogs.QUESTION_TYPES.instruction(question_type)
    return await generate(
        backend,
        persona=f"You are an expert at crafting meaningful questions. {type_instruction} about the given topic.",
        request=f"Generate {count} {type_key} questions about: {topic}",
        options=catalogs.QUESTION_OPTIONS,
        label=f"{question_type.upper()} Questions about {topic}",
    )


async def generate_debate_points(backend: CompletionBackend, topic: str, side: str = "both") -> str:
    if is_blank(topic):
        return "No topic provided for debate point generation."

    return await generate(
        backend,
        persona=(
            "You are a skilled debater who can present logical, well-reasoned arguments. "
            "Focus on factual points and logical reasoning."
        ),
        request=catalogs.DEBATE_SIDES.instruction(side).format(topic=topic),
        options=catalogs.DEBATE_OPTIONS,
        label=f"Debate Points ({side}) for '{topic}'",
    )


async def create_definitions(
    backend: CompletionBackend,
    term: str,
    definition_style: str = "simple",
    include_examples: bool = True,
) -> str:
    if is_blank(term):
        return "No term provided for definition creation."

    style_key = catalogs.DEFINITION_STYLES.key_for(definition_style)
    style_instruction = catalogs.DEFINITION_STYLES.instruction(definition_style)
    example_clause = " Include relevant examples to illustrate the concept." if include_examples else ""
    return await generate(
        backend,
        persona=f"You are an expert at creating clear definitions. {style_instruction}.{example_clause}",
        request=f"Define the term '{term}' in a {style_key} style.",
        options=catalogs.DEFINITION_OPTIONS,
        label=f"{definition_style.upper()} Definition of '{term}'",
    )


async def create_tutorial_outline(
    backend: CompletionBackend,
    topic: str,
    skill_level: str = "beginner",
    format: str = "written",
) -> str:
    if is_blank(topic):
        return "No topic provided for tutorial outline creation."

    level_key = catalogs.SKILL_LEVELS.key_for(skill_level)
    format_key = catalogs.TUTORIAL_FORMATS.key_for(format)
    level_instruction = catalogs.SKILL_LEVELS.instruction(skill_level)
    format_instruction = catalogs.TUTORIAL_FORMATS.instruction(format)
    return await generate(
        backend,
        persona=(
            f"You are an instructional designer. {level_instruction}. {format_instruction}. "
            "Create clear, logical learning progressions."
        ),
        request=f"Create a {level_key}-level {format_key} tutorial outline for: {topic}",
        options=catalogs.TUTORIAL_OPTIONS,
        label=f"{skill_level.upper()} {format.upper()} Tutorial Outline - {topic}",
    )


async def create_conversation_starters(
    backend: CompletionBackend,
    context: str = "casual",
    count: int = 5,
) -> str:
    count = catalogs.CONVERSATION_STARTER_COUNT.clamp(count)
    context_key = catalogs.CONVERSATION_CONTEXTS.key_for(context)
    context_instruction = catalogs.CONVERSATION_CONTEXTS.instruction(context)
    return await generate(
        backend,
        persona=(
            f"You are a social skills expert. {context_instruction}. "
            "Make them engaging and appropriate for the setting."
        ),
        request=f"Generate {count} conversation starters for {context_key} situations.",
        options=catalogs.CONVERSATION_STARTER_OPTIONS,
        label=f"{context.upper()} Conversation Starters",
    )


async def generate_icebreakers(
    backend: CompletionBackend,
    context: str = "team meeting",
    group_size: str = "medium",
    count: int = 3,
) -> str:
    count = catalogs.ICEBREAKER_COUNT.clamp(count)
    context_key = catalogs.ICEBREAKER_CONTEXTS.key_for(context)
    context_instruction = catalogs.ICEBREAKER_CONTEXTS.instruction(context)
    size = catalogs.GROUP_SIZES.instruction(group_size)
    return await generate(
        backend,
        persona=(
            f"You are an expert facilitator. {context_instruction} for {size} groups. "
            "Make them engaging and appropriate for the setting."
        ),
        request=f"Generate {count} icebreaker activities for a {size} group in a {context_key} setting.",
        options=catalogs.ICEBREAKER_OPTIONS,
        label=f"{context.upper()} Icebreakers ({group_size} group)",
    )
