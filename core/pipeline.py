# =============================================================================
# core/pipeline.py  —  The Tool Invocation Pipeline
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Every AI-assisted tool in core/analysis.py, core/creative.py and
#   core/learning.py runs the same six steps:
#
#     1. Required-argument check   → is_blank()
#     2. Count clamp               → CountBounds.clamp()   (core/models.py)
#     3. Category resolution       → StyleCatalog          (core/models.py)
#     4. Prompt assembly           → build_messages()
#     5. Backend invocation        → generate()
#     6. Result formatting         → generate()
#
#   Steps 1-3 return a plain string message instead of raising, so the host
#   always gets text back.  Steps 4-6 live in generate(): one backend call,
#   one labeled string.  Backend failures and cancellation are NOT caught
#   here; there is no sensible text to produce without the backend.
#
# THE BACKEND:
#   Anything with an async complete(messages, options) -> str method.  The
#   pipeline never inspects it.  See core/completion.py (LiteLLM) and
#   tools/backends.py (MCP sampling through the connected host).
# =============================================================================

import logging
from typing import Optional, Protocol, Sequence

from core.models import SYSTEM, USER, ChatMessage, GenerationOptions

logger = logging.getLogger(__name__)


class CompletionBackend(Protocol):
    """A text-completion capability: role-tagged messages in, text out."""

    async def complete(
        self,
        messages: Sequence[ChatMessage],
        options: GenerationOptions,
    ) -> str:
        ...


def is_blank(*values: Optional[str]) -> bool:
    """True if ANY of the values is None, empty, or whitespace-only."""
    return any(value is None or not value.strip() for value in values)


def build_messages(persona: str, request: str) -> list[ChatMessage]:
    """Assemble the two-entry instruction set: persona first, request second."""
    return [ChatMessage(SYSTEM, persona), ChatMessage(USER, request)]


async def generate(
    backend: CompletionBackend,
    *,
    persona: str,
    request: str,
    options: GenerationOptions,
    label: str,
    separator: str = ": ",
) -> str:
    """Run steps 4-6 of the pipeline and return ``<label><separator><response>``.

    Args:
        backend: The completion backend to call exactly once.
        persona: System/persona instruction (resolved category already applied).
        request: User instruction embedding the caller's content.
        options: The tool's fixed GenerationOptions.
        label: Result label built from the caller's raw arguments.
        separator: Text between label and response (": " for most tools,
            ":\\n" for long-form output such as poems and stories).
    """
    messages = build_messages(persona, request)
    logger.debug(
        "Calling completion backend for %r (max_tokens=%d, temperature=%.1f)",
        label, options.max_tokens, options.temperature,
    )
    response = await backend.complete(messages, options)
    return f"{label}{separator}{response}"
