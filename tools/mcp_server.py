# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools registered here)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the FastMCP server and registers every tool the host can call:
#     - tools/text_tools.py    deterministic string tools (echo, repeat, ...)
#     - tools/ai_tools.py      AI-assisted tools (sentiment, rhymes, ...)
#     - tools/monkey_tools.py  the cached monkey roster
#
# HOW IT WORKS (the flow):
#   1. The host (an MCP client, or the ADK agent in agent/) picks a tool
#   2. It calls the tool by name via MCP (e.g., "analyze_sentiment")
#   3. FastMCP validates the arguments against the function signature and
#      routes the call to the wrapper
#   4. The wrapper calls core/ logic and returns the result
#
# TOOL NAMING:
#   Every tool is registered under its Python function name, so the
#   snake_case name in the wrapper IS the public tool name.
#
# RUNNING THIS SERVER:
#     a) Standalone over stdio:  python -m tools.mcp_server
#        (or the `text-tools-mcp` console script)
#     b) Spawned by the Google ADK agent via stdio transport (agent/)
#     c) In-process in tests:  Client(create_server(...))
# =============================================================================

import logging
import sys
from typing import Optional

from dotenv import load_dotenv
from fastmcp import FastMCP

# --- Import core logic ---
# The tools layer depends on core/ and nothing else; never on agent/.
from core.monkeys import MonkeyService
from core.settings import get_settings
from tools.ai_tools import AI_TOOLS
from tools.monkey_tools import monkey_tools
from tools.text_tools import TEXT_TOOLS

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server communicates with its host via
# STDOUT.  Log lines on stdout would corrupt the MCP JSON stream.
# =============================================================================
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)

SERVER_NAME = "text-tools"


def create_server(monkey_service: Optional[MonkeyService] = None) -> FastMCP:
    """Build a FastMCP server with every tool registered.

    Args:
        monkey_service: The roster service the monkey tools share.  Defaults
            to a new MonkeyService configured from the environment.
    """
    if monkey_service is None:
        settings = get_settings()
        monkey_service = MonkeyService(
            url=settings.monkeys_url,
            timeout=settings.monkeys_fetch_timeout,
            failure_cooldown=settings.monkeys_failure_cooldown,
        )

    mcp = FastMCP(SERVER_NAME)
    for fn in [*TEXT_TOOLS, *AI_TOOLS, *monkey_tools(monkey_service)]:
        mcp.tool(fn)

    logging.getLogger(__name__).debug(
        "Registered %d text, %d AI and 2 roster tools", len(TEXT_TOOLS), len(AI_TOOLS)
    )
    return mcp


# =============================================================================
# Server entry point
# =============================================================================
# When run directly (python -m tools.mcp_server), start the MCP server over
# stdio.  .env is loaded first so TEXT_TOOLS_* settings can live there.
# =============================================================================
def main() -> None:
    load_dotenv()
    settings = get_settings()
    logging.info(f"Starting {SERVER_NAME} server (backend={settings.backend})")
    create_server().run()


if __name__ == "__main__":
    main()
