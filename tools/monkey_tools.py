# =============================================================================
# tools/monkey_tools.py  —  MCP wrappers for the cached roster service
# =============================================================================
#
# The tools are closures over ONE MonkeyService, created by
# tools/mcp_server.create_server().  There is no module-level roster: the
# service instance is passed in explicitly, so tests can hand in a service
# with a stub fetch.
#
# CONTEXT BUDGET DISCIPLINE:
#   Both tools return plain dicts (never dataclasses) so FastMCP can
#   serialize them.  A missing monkey is reported as data, with the names
#   the agent CAN ask for, instead of raising a tool error.
# =============================================================================

from typing import Any, Callable

from core.monkeys import MonkeyService
from tools.console import log_status, logged


def monkey_tools(service: MonkeyService) -> list[Callable]:
    """Build the roster tools bound to ``service``."""

    @logged
    async def get_monkeys() -> list[dict[str, Any]]:
        """Get the full list of monkeys with their location, population and coordinates.

        The roster is downloaded once and then served from memory.  An empty
        list means the roster source could not be reached; try again later.
        """
        monkeys = await service.get_monkeys()
        log_status(f"{len(monkeys)} monkeys available")
        return [monkey.to_dict() for monkey in monkeys]

    @logged
    async def get_monkey(name: str) -> dict[str, Any]:
        """Get a single monkey by name (case-insensitive).

        WHEN TO CALL THIS: when the user asks about one specific monkey.
        Call get_monkeys first if you do not know which names exist.

        Args:
            name: The name of the monkey, e.g. "Baboon".

        Returns:
            The monkey's record, or a dict with "error", "available_monkeys"
            and "hint" when no monkey has that name.
        """
        if not name or not name.strip():
            return {"error": "No monkey name provided."}

        monkey = await service.get_monkey(name.strip())
        if monkey is not None:
            return monkey.to_dict()

        available = [m.name for m in await service.get_monkeys()]
        log_status(f"Monkey '{name}' not found among {len(available)}")
        return {
            "error": f"Monkey '{name}' not found.",
            "available_monkeys": available,
            "hint": "Use one of the available_monkeys names, or call get_monkeys for full details.",
        }

    return [get_monkeys, get_monkey]
