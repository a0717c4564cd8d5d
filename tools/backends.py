# =============================================================================
# tools/backends.py  —  Picking the completion backend for a tool call
# =============================================================================
#
# Two ways to get text generated:
#
#   sampling (default)
#       Ask the CONNECTED HOST to run the completion through MCP sampling
#       (Context.sample).  The server needs no model or API key of its own;
#       the host's LLM does the work.  The host must support sampling.
#
#   litellm
#       Call a model directly from this process via core/completion.py.
#       Needed when the host cannot answer sampling requests, e.g. the
#       Google ADK demo agent in agent/.
#
# TEXT_TOOLS_BACKEND selects one (see core/settings.py).
# =============================================================================

from typing import Sequence

from fastmcp import Context

from core.completion import LiteLlmBackend
from core.models import SYSTEM, ChatMessage, GenerationOptions
from core.pipeline import CompletionBackend
from core.settings import get_settings


class SamplingBackend:
    """Completion backend that delegates to the MCP host's LLM."""

    def __init__(self, ctx: Context):
        self._ctx = ctx

    async def complete(
        self,
        messages: Sequence[ChatMessage],
        options: GenerationOptions,
    ) -> str:
        # MCP sampling carries the persona as a separate system prompt.
        system_prompt = "\n\n".join(m.text for m in messages if m.role == SYSTEM) or None
        prompts = [m.text for m in messages if m.role != SYSTEM]

        result = await self._ctx.sample(
            prompts,
            system_prompt=system_prompt,
            temperature=options.temperature,
            max_tokens=options.max_tokens,
        )
        text = getattr(result, "text", None)
        if text is None:
            raise TypeError(f"Host returned non-text sampling content: {type(result).__name__}")
        return text


def get_backend(ctx: Context) -> CompletionBackend:
    """Return the backend configured for this process, bound to this request."""
    settings = get_settings()
    if settings.backend == "litellm":
        return LiteLlmBackend(settings.model, api_base=settings.api_base)
    return SamplingBackend(ctx)
