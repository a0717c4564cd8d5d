# =============================================================================
# tools/ai_tools.py  —  MCP wrappers for the AI-assisted tools
# =============================================================================
#
# Each function here is a thin wrapper around core/analysis.py,
# core/creative.py or core/learning.py:
#
#   1. FastMCP injects the request Context (ctx)
#   2. get_backend(ctx) picks sampling or LiteLLM (tools/backends.py)
#   3. the core function validates, prompts, and labels the result
#
# The docstring of each wrapper is what the host's LLM reads to decide WHEN
# to call the tool, so it lists the accepted categories and defaults.  The
# ctx parameter is hidden from the tool schema by FastMCP.
# =============================================================================

from fastmcp import Context

from core import analysis, creative, learning
from tools.backends import get_backend
from tools.console import logged


# =============================================================================
# Analysis
# =============================================================================
@logged
async def summarize_content_from_url(ctx: Context, url: str) -> str:
    """Summarizes content downloaded from a specific URL.

    Args:
        url: The URL from which to download the content to summarize.
    """
    return await analysis.summarize_content_from_url(get_backend(ctx), url)


@logged
async def analyze_sentiment(ctx: Context, text: str) -> str:
    """Analyzes the sentiment of the provided text using AI.

    Returns positive / negative / neutral with a 0-100 confidence score and a
    short explanation.

    Args:
        text: The text to analyze for sentiment.
    """
    return await analysis.analyze_sentiment(get_backend(ctx), text)


@logged
async def analyze_writing_tone(ctx: Context, text: str) -> str:
    """Analyzes the tone and style of written text (formality, emotion, audience).

    Args:
        text: The text to analyze.
    """
    return await analysis.analyze_writing_tone(get_backend(ctx), text)


@logged
async def improve_writing(ctx: Context, text: str, focus: str = "all") -> str:
    """Suggests improvements for written text.

    Args:
        text: The text to improve.
        focus: 'grammar', 'clarity', 'style', 'conciseness' or 'all' (default: 'all').
    """
    return await analysis.improve_writing(get_backend(ctx), text, focus)


@logged
async def analyze_readability(ctx: Context, text: str) -> str:
    """Analyzes text readability and suggests improvements.

    Args:
        text: The text to analyze for readability.
    """
    return await analysis.analyze_readability(get_backend(ctx), text)


@logged
async def analyze_argument_structure(ctx: Context, argument: str) -> str:
    """Analyzes the logical structure of an argument: premises, conclusions, fallacies.

    Args:
        argument: The argument or persuasive text to analyze.
    """
    return await analysis.analyze_argument_structure(get_backend(ctx), argument)


@logged
async def analyze_bias_in_text(ctx: Context, text: str) -> str:
    """Identifies potential bias and loaded language in text.

    Args:
        text: The text to analyze for bias.
    """
    return await analysis.analyze_bias_in_text(get_backend(ctx), text)


@logged
async def analyze_emotional_tone(ctx: Context, text: str) -> str:
    """Analyzes the emotional undertones and mood of text.

    Args:
        text: The text to analyze for emotional tone.
    """
    return await analysis.analyze_emotional_tone(get_backend(ctx), text)


# =============================================================================
# Creative generation
# =============================================================================
@logged
async def generate_rhyme(ctx: Context, word: str, count: int = 5) -> str:
    """Generates words that rhyme with the provided word.

    Args:
        word: The word to find rhymes for.
        count: Number of rhymes to generate, 1-20 (default: 5).
    """
    return await creative.generate_rhyme(get_backend(ctx), word, count)


@logged
async def generate_poem(ctx: Context, theme: str, style: str = "free verse") -> str:
    """Generates a poem based on a given theme or topic.

    Args:
        theme: The theme or topic for the poem.
        style: 'haiku', 'sonnet', 'free verse' or 'limerick' (default: 'free verse').
    """
    return await creative.generate_poem(get_backend(ctx), theme, style)


@logged
async def generate_story(ctx: Context, character: str, setting: str, genre: str = "adventure") -> str:
    """Generates a short story (about 150-200 words).

    Args:
        character: Main character or protagonist.
        setting: Setting or location.
        genre: 'mystery', 'romance', 'sci-fi', 'fantasy', 'horror', 'comedy'
            or 'adventure' (default: 'adventure').
    """
    return await creative.generate_story(get_backend(ctx), character, setting, genre)


@logged
async def generate_joke(ctx: Context, topic: str, style: str = "clean") -> str:
    """Generates a joke about a topic.

    Args:
        topic: Topic or subject for the joke.
        style: 'pun', 'one-liner', 'knock-knock', 'dad-joke' or 'clean' (default: 'clean').
    """
    return await creative.generate_joke(get_backend(ctx), topic, style)


@logged
async def create_metaphors(ctx: Context, concept: str, count: int = 3) -> str:
    """Generates metaphors and analogies for a concept.

    Args:
        concept: The concept to create metaphors for.
        count: Number of metaphors to generate, 1-10 (default: 3).
    """
    return await creative.create_metaphors(get_backend(ctx), concept, count)


@logged
async def create_acronym(ctx: Context, input_text: str, mode: str = "create") -> str:
    """Creates a memorable acronym from a phrase, or a phrase from an acronym.

    Args:
        input_text: Phrase to turn into an acronym, or acronym to expand.
        mode: 'create' (phrase to acronym) or 'expand' (acronym to phrase).
    """
    return await creative.create_acronym(get_backend(ctx), input_text, mode)


@logged
async def generate_slogan(ctx: Context, subject: str, tone: str = "professional", count: int = 3) -> str:
    """Creates catchy slogans or taglines.

    Args:
        subject: Product, service, or concept to create slogans for.
        tone: 'professional', 'playful', 'inspirational', 'urgent' or 'friendly'
            (default: 'professional').
        count: Number of slogans to generate, 1-10 (default: 3).
    """
    return await creative.generate_slogan(get_backend(ctx), subject, tone, count)


@logged
async def generate_hashtags(ctx: Context, content: str, platform: str = "general", count: int = 10) -> str:
    """Generates relevant hashtags for social media content.

    Args:
        content: Content or topic to generate hashtags for.
        platform: 'twitter', 'instagram', 'linkedin' or 'general' (default: 'general').
        count: Number of hashtags to generate, 1-30 (default: 10).
    """
    return await creative.generate_hashtags(get_backend(ctx), content, platform, count)


@logged
async def create_analogy_chain(ctx: Context, concept: str, chain_length: int = 3) -> str:
    """Creates a chain of progressively richer analogies to explain a complex concept.

    Args:
        concept: Complex concept to explain through analogies.
        chain_length: Number of analogies in the chain, 1-7 (default: 3).
    """
    return await creative.create_analogy_chain(get_backend(ctx), concept, chain_length)


@logged
async def create_word_associations(
    ctx: Context,
    word: str,
    count: int = 8,
    association_type: str = "semantic",
) -> str:
    """Generates word associations and semantic connections.

    Args:
        word: The starting word for associations.
        count: Number of associations to generate, 1-20 (default: 8).
        association_type: 'semantic', 'emotional', 'visual' or 'conceptual' (default: 'semantic').
    """
    return await creative.create_word_associations(get_backend(ctx), word, count, association_type)


@logged
async def generate_motivational_quote(ctx: Context, theme: str, style: str = "inspirational") -> str:
    """Creates an inspirational or motivational quote.

    Args:
        theme: Theme or area of life (e.g., 'success', 'perseverance', 'growth').
        style: 'inspirational', 'philosophical', 'actionable' or 'uplifting'
            (default: 'inspirational').
    """
    return await creative.generate_motivational_quote(get_backend(ctx), theme, style)


@logged
async def create_memory_device(ctx: Context, information: str, device_type: str = "acronym") -> str:
    """Creates mnemonic devices and memory aids.

    Args:
        information: Information or list to create a memory device for.
        device_type: 'acronym', 'rhyme', 'story' or 'visualization' (default: 'acronym').
    """
    return await creative.create_memory_device(get_backend(ctx), information, device_type)


@logged
async def generate_alternatives(
    ctx: Context,
    input_text: str,
    alternative_type: str = "synonyms",
    count: int = 6,
) -> str:
    """Generates alternative words, phrases, approaches, or solutions.

    Args:
        input_text: The word, phrase, or concept to find alternatives for.
        alternative_type: 'synonyms', 'phrases', 'approaches' or 'solutions' (default: 'synonyms').
        count: Number of alternatives to generate, 1-15 (default: 6).
    """
    return await creative.generate_alternatives(get_backend(ctx), input_text, alternative_type, count)


@logged
async def create_character_profile(ctx: Context, character: str, genre: str = "contemporary") -> str:
    """Generates a detailed character profile for creative writing.

    Args:
        character: Basic character description or name.
        genre: 'fantasy', 'sci-fi', 'contemporary', 'historical' or 'mystery'
            (default: 'contemporary').
    """
    return await creative.create_character_profile(get_backend(ctx), character, genre)


@logged
async def generate_product_names(
    ctx: Context,
    product_description: str,
    naming_style: str = "professional",
    count: int = 5,
) -> str:
    """Creates names for a product or service.

    Args:
        product_description: Description of the product or service.
        naming_style: 'professional', 'creative', 'technical', 'playful' or 'premium'
            (default: 'professional').
        count: Number of names to generate, 1-15 (default: 5).
    """
    return await creative.generate_product_names(get_backend(ctx), product_description, naming_style, count)


@logged
async def generate_creative_prompts(
    ctx: Context,
    prompt_type: str = "writing",
    theme: str = "",
    count: int = 3,
) -> str:
    """Creates writing or other creative prompts for inspiration.

    Args:
        prompt_type: 'writing', 'art', 'photography', 'music' or 'general' (default: 'writing').
        theme: Optional theme or genre.
        count: Number of prompts to generate, 1-10 (default: 3).
    """
    return await creative.generate_creative_prompts(get_backend(ctx), prompt_type, theme, count)


@logged
async def simulate_dialogue(
    ctx: Context,
    character1: str,
    character2: str,
    scenario: str,
    tone: str = "friendly",
) -> str:
    """Creates a realistic dialogue (4-6 exchanges) between two characters.

    Args:
        character1: Character 1 description.
        character2: Character 2 description.
        scenario: Scenario or topic of conversation.
        tone: 'friendly', 'tense', 'professional', 'romantic' or 'argumentative'
            (default: 'friendly').
    """
    return await creative.simulate_dialogue(get_backend(ctx), character1, character2, scenario, tone)


@logged
async def generate_email_subjects(
    ctx: Context,
    email_purpose: str,
    tone: str = "professional",
    count: int = 5,
) -> str:
    """Creates compelling email subject lines.

    Args:
        email_purpose: Email content summary or purpose.
        tone: 'professional', 'urgent', 'friendly', 'promotional' or 'informative'
            (default: 'professional').
        count: Number of subject lines to generate, 1-15 (default: 5).
    """
    return await creative.generate_email_subjects(get_backend(ctx), email_purpose, tone, count)


@logged
async def generate_testimonials(
    ctx: Context,
    product_service: str,
    customer_type: str,
    tone: str = "professional",
    count: int = 3,
) -> str:
    """Creates realistic testimonials and reviews.

    Args:
        product_service: Product or service to create testimonials for.
        customer_type: Customer type or demographic.
        tone: 'enthusiastic', 'professional', 'detailed' or 'brief' (default: 'professional').
        count: Number of testimonials to generate, 1-8 (default: 3).
    """
    return await creative.generate_testimonials(get_backend(ctx), product_service, customer_type, tone, count)


@logged
async def create_user_personas(ctx: Context, product: str, demographic: str, count: int = 2) -> str:
    """Generates detailed user personas for design and marketing.

    Args:
        product: Product or service to create personas for.
        demographic: Target demographic or market segment.
        count: Number of personas to create, 1-5 (default: 2).
    """
    return await creative.create_user_personas(get_backend(ctx), product, demographic, count)


# =============================================================================
# Learning & facilitation
# =============================================================================
@logged
async def explain_concept(ctx: Context, concept: str, audience_level: str = "adult") -> str:
    """Provides a simple 2-3 sentence explanation of a concept or term.

    Args:
        concept: The concept, term, or topic to explain.
        audience_level: 'child', 'teen', 'adult' or 'expert' (default: 'adult').
    """
    return await learning.explain_concept(get_backend(ctx), concept, audience_level)


@logged
async def translate_text(
    ctx: Context,
    text: str,
    target_language: str = "English",
    source_language: str = "",
) -> str:
    """Translates text from one language to another.

    Args:
        text: The text to translate.
        target_language: Target language, e.g. 'Spanish', 'French', 'German' (default: 'English').
        source_language: Source language; leave empty to auto-detect.
    """
    return await learning.translate_text(get_backend(ctx), text, target_language, source_language)


@logged
async def generate_questions(
    ctx: Context,
    topic: str,
    question_type: str = "discussion",
    count: int = 5,
) -> str:
    """Generates thought-provoking questions about a topic.

    Args:
        topic: The topic to generate questions about.
        question_type: 'discussion', 'interview', 'research' or 'critical-thinking'
            (default: 'discussion').
        count: Number of questions to generate, 1-15 (default: 5).
    """
    return await learning.generate_questions(get_backend(ctx), topic, question_type, count)


@logged
async def generate_debate_points(ctx: Context, topic: str, side: str = "both") -> str:
    """Generates arguments for one or both sides of a debate topic.

    Args:
        topic: The debate topic or statement.
        side: 'for', 'against' or 'both' (default: 'both').
    """
    return await learning.generate_debate_points(get_backend(ctx), topic, side)


@logged
async def create_definitions(
    ctx: Context,
    term: str,
    definition_style: str = "simple",
    include_examples: bool = True,
) -> str:
    """Creates a clear, accessible definition for a term or concept.

    Args:
        term: Term or concept to define.
        definition_style: 'simple', 'academic', 'technical' or 'conversational' (default: 'simple').
        include_examples: Whether to include illustrative examples (default: true).
    """
    return await learning.create_definitions(get_backend(ctx), term, definition_style, include_examples)


@logged
async def create_tutorial_outline(
    ctx: Context,
    topic: str,
    skill_level: str = "beginner",
    format: str = "written",
) -> str:
    """Generates a structured outline for a tutorial or how-to guide.

    Args:
        topic: Topic or skill to create the tutorial for.
        skill_level: 'beginner', 'intermediate' or 'advanced' (default: 'beginner').
        format: 'video', 'written', 'interactive' or 'workshop' (default: 'written').
    """
    return await learning.create_tutorial_outline(get_backend(ctx), topic, skill_level, format)


@logged
async def create_conversation_starters(ctx: Context, context: str = "casual", count: int = 5) -> str:
    """Generates conversation starters for a social or professional setting.

    Args:
        context: 'networking', 'first date', 'dinner party', 'interview' or 'casual'
            (default: 'casual').
        count: Number of conversation starters to generate, 1-15 (default: 5).
    """
    return await learning.create_conversation_starters(get_backend(ctx), context, count)


@logged
async def generate_icebreakers(
    ctx: Context,
    context: str = "team meeting",
    group_size: str = "medium",
    count: int = 3,
) -> str:
    """Creates icebreaker activities and questions for groups.

    Args:
        context: 'team meeting', 'workshop', 'social event', 'classroom' or 'online meeting'
            (default: 'team meeting').
        group_size: 'small' (3-8), 'medium' (9-20) or 'large' (20+) (default: 'medium').
        count: Number of icebreakers to generate, 1-8 (default: 3).
    """
    return await learning.generate_icebreakers(get_backend(ctx), context, group_size, count)


AI_TOOLS = [
    summarize_content_from_url,
    analyze_sentiment,
    analyze_writing_tone,
    improve_writing,
    analyze_readability,
    analyze_argument_structure,
    analyze_bias_in_text,
    analyze_emotional_tone,
    generate_rhyme,
    generate_poem,
    generate_story,
    generate_joke,
    create_metaphors,
    create_acronym,
    generate_slogan,
    generate_hashtags,
    create_analogy_chain,
    create_word_associations,
    generate_motivational_quote,
    create_memory_device,
    generate_alternatives,
    create_character_profile,
    generate_product_names,
    generate_creative_prompts,
    simulate_dialogue,
    generate_email_subjects,
    generate_testimonials,
    create_user_personas,
    explain_concept,
    translate_text,
    generate_questions,
    generate_debate_points,
    create_definitions,
    create_tutorial_outline,
    create_conversation_starters,
    generate_icebreakers,
]
