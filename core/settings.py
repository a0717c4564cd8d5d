# =============================================================================
# core/settings.py  —  Environment-driven configuration
# =============================================================================
#
# All knobs are environment variables (optionally loaded from a .env file by
# the entry points via python-dotenv):
#
#   TEXT_TOOLS_BACKEND        "sampling" (default) or "litellm"
#                               sampling → ask the connected MCP host's LLM
#                               litellm  → call a model from this process
#   TEXT_TOOLS_MODEL          LiteLLM model string (litellm backend only)
#   TEXT_TOOLS_API_BASE       Optional LiteLLM base URL
#   MONKEYS_URL               Roster feed
#   MONKEYS_FETCH_TIMEOUT     Roster socket timeout, seconds
#   MONKEYS_FAILURE_COOLDOWN  Seconds to wait before refetching after an
#                             empty/failed roster fetch (0 = every call)
# =============================================================================

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

from core.http import DEFAULT_TIMEOUT
from core.monkeys import MONKEYS_URL

BACKENDS = ("sampling", "litellm")


@dataclass(frozen=True)
class Settings:
    """Process configuration for the text tools server."""

    backend: str = "sampling"
    model: str = "openrouter/openai/gpt-4o-mini"
    api_base: Optional[str] = None
    monkeys_url: str = MONKEYS_URL
    monkeys_fetch_timeout: float = DEFAULT_TIMEOUT
    monkeys_failure_cooldown: float = 0.0

    def __post_init__(self) -> None:
        if self.backend not in BACKENDS:
            raise ValueError(f"Unknown backend {self.backend!r}, expected one of {BACKENDS}")
        if self.monkeys_fetch_timeout <= 0:
            raise ValueError("MONKEYS_FETCH_TIMEOUT must be positive")
        if self.monkeys_failure_cooldown < 0:
            raise ValueError("MONKEYS_FAILURE_COOLDOWN cannot be negative")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build Settings from environment variables (os.environ by default).

        Raises:
            ValueError: on an unknown backend or a non-numeric duration.
        """
        env = os.environ if environ is None else environ
        return cls(
            backend=env.get("TEXT_TOOLS_BACKEND", cls.backend).strip().lower(),
            model=env.get("TEXT_TOOLS_MODEL", cls.model),
            api_base=env.get("TEXT_TOOLS_API_BASE") or None,
            monkeys_url=env.get("MONKEYS_URL", cls.monkeys_url),
            monkeys_fetch_timeout=float(env.get("MONKEYS_FETCH_TIMEOUT", cls.monkeys_fetch_timeout)),
            monkeys_failure_cooldown=float(env.get("MONKEYS_FAILURE_COOLDOWN", cls.monkeys_failure_cooldown)),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings for this process, read once from the environment."""
    return Settings.from_env()
