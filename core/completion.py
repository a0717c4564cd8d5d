# =============================================================================
# core/completion.py  —  Server-side completion backend (LiteLLM)
# =============================================================================
#
# The pipeline (core/pipeline.py) only needs "messages + options → text".
# This module provides that on top of LiteLLM, the same universal LLM proxy
# the demo agent uses (agent/text_agent.py).  Any provider LiteLLM knows works:
#
#     "openrouter/openai/gpt-4o-mini"     (default, reads OPENROUTER_API_KEY)
#     "openai/gpt-4o"
#     "anthropic/claude-3-5-haiku-latest"
#     "ollama/llama3"                      (with TEXT_TOOLS_API_BASE)
#
# The other backend, MCP sampling, lives in tools/backends.py because it
# needs a FastMCP request context.
# =============================================================================

from typing import Optional, Sequence

import litellm

from core.models import ChatMessage, GenerationOptions


class LiteLlmBackend:
    """Completion backend that calls a model through ``litellm.acompletion``."""

    def __init__(self, model: str, api_base: Optional[str] = None):
        self.model = model
        self.api_base = api_base

    async def complete(
        self,
        messages: Sequence[ChatMessage],
        options: GenerationOptions,
    ) -> str:
        kwargs = {}
        if self.api_base:
            kwargs["api_base"] = self.api_base
        response = await litellm.acompletion(
            model=self.model,
            messages=[{"role": m.role, "content": m.text} for m in messages],
            max_tokens=options.max_tokens,
            temperature=options.temperature,
            **kwargs,
        )
        return response.choices[0].message.content or ""
