# =============================================================================
# core/analysis.py  —  AI-assisted analysis tools
# =============================================================================
#
# Tools that READ the caller's text and report on it: sentiment, tone,
# readability, bias, argument structure, editing suggestions, and URL
# summaries.  All of them run cold (temperature 0.2-0.3); see
# core/catalogs.py for the exact limits.
#
# Each function is one instance of the pipeline in core/pipeline.py:
#   blank input → fixed message, otherwise one backend call → labeled text.
# =============================================================================

import asyncio
from typing import Callable

from core import catalogs
from core.http import fetch_text
from core.pipeline import CompletionBackend, generate, is_blank


async def summarize_content_from_url(
    backend: CompletionBackend,
    url: str,
    fetch: Callable[[str], str] = fetch_text,
) -> str:
    """Download ``url`` and summarize it.  Download errors propagate."""
    if is_blank(url):
        return "No URL provided for summarization."

    content = await asyncio.to_thread(fetch, url.strip())
    return await generate(
        backend,
        persona="Briefly summarize the following downloaded content:",
        request=content,
        options=catalogs.SUMMARIZE_OPTIONS,
        label="Summary",
    )


async def analyze_sentiment(backend: CompletionBackend, text: str) -> str:
    if is_blank(text):
        return "No text provided for sentiment analysis."

    return await generate(
        backend,
        persona=(
            "You are a sentiment analysis expert. Analyze the sentiment of the following text "
            "and provide a brief response indicating whether it's positive, negative, or neutral, "
            "along with a confidence score (0-100) and a brief explanation."
        ),
        request=f'Analyze the sentiment of this text: "{text}"',
        options=catalogs.SENTIMENT_OPTIONS,
        label="Sentiment Analysis",
    )


async def analyze_writing_tone(backend: CompletionBackend, text: str) -> str:
    if is_blank(text):
        return "No text provided for tone analysis."

    return await generate(
        backend,
        persona=(
            "You are a writing expert. Analyze the tone, style, and emotional qualities of the "
            "given text. Identify elements like formality level, emotional tone, writing style, "
            "and target audience."
        ),
        request=f'Analyze the tone and style of this text: "{text}"',
        options=catalogs.WRITING_TONE_OPTIONS,
        label="Writing Tone Analysis",
    )


async def improve_writing(backend: CompletionBackend, text: str, focus: str = "all") -> str:
    """Editing suggestions, optionally narrowed to one focus area."""
    if is_blank(text):
        return "No text provided for improvement suggestions."

    focus_instruction = catalogs.IMPROVEMENT_FOCUS.instruction(focus)
    return await generate(
        backend,
        persona=(
            f"You are a professional editor and writing coach. {focus_instruction} "
            "Provide specific, actionable suggestions."
        ),
        request=f'Please review and suggest improvements for this text: "{text}"',
        options=catalogs.IMPROVE_WRITING_OPTIONS,
        label=f"Writing Improvement Suggestions ({focus})",
    )


async def analyze_readability(backend: CompletionBackend, text: str) -> str:
    if is_blank(text):
        return "No text provided for readability analysis."

    return await generate(
        backend,
        persona=(
            "You are a readability expert. Analyze text for clarity, sentence structure, "
            "vocabulary complexity, and overall accessibility. Provide specific suggestions "
            "for improvement."
        ),
        request=f'Analyze the readability of this text and suggest improvements: "{text}"',
        options=catalogs.READABILITY_OPTIONS,
        label="Readability Analysis",
    )


async def analyze_argument_structure(backend: CompletionBackend, argument: str) -> str:
    if is_blank(argument):
        return "No argument provided for structural analysis."

    return await generate(
        backend,
        persona=(
            "You are a logic and rhetoric expert. Analyze the structure of arguments, "
            "identifying premises, conclusions, logical connections, and potential fallacies "
            "or weaknesses."
        ),
        request=f'Analyze the logical structure of this argument: "{argument}"',
        options=catalogs.ARGUMENT_OPTIONS,
        label="Argument Structure Analysis",
    )


async def analyze_bias_in_text(backend: CompletionBackend, text: str) -> str:
    if is_blank(text):
        return "No text provided for bias analysis."

    return await generate(
        backend,
        persona=(
            "You are an expert in media literacy and critical analysis. Identify potential bias, "
            "loaded language, assumptions, and subjective framing in text. Be objective and "
            "balanced in your analysis."
        ),
        request=f'Analyze this text for potential bias, loaded language, or subjective framing: "{text}"',
        options=catalogs.BIAS_OPTIONS,
        label="Bias Analysis",
    )


async def analyze_emotional_tone(backend: CompletionBackend, text: str) -> str:
    if is_blank(text):
        return "No text provided for emotional tone analysis."

    return await generate(
        backend,
        persona=(
            "You are an expert in emotional intelligence and text analysis. Identify the "
            "emotional undertones, mood, and feelings conveyed in text. Consider both explicit "
            "emotions and subtle implications."
        ),
        request=f'Analyze the emotional tone and mood of this text: "{text}"',
        options=catalogs.EMOTIONAL_TONE_OPTIONS,
        label="Emotional Tone Analysis",
    )
