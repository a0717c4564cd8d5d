# =============================================================================
# agent/text_agent.py  —  Google ADK Agent Configuration (LLM via LiteLlm)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Configures the Google ADK agent that acts as an MCP HOST for the tool
#   server in tools/.  It is a demo: the server works with any MCP client.
#
# ADK + LITELLM:
#   Google ADK is the agent framework (orchestration, tool calling,
#   sessions); LiteLlm lets it use any provider's model.  The model string
#   comes from TEXT_TOOLS_MODEL (see core/settings.py), e.g.
#   "openrouter/openai/gpt-4o-mini", and LiteLLM reads the provider's API
#   key (OPENROUTER_API_KEY, ...) from the environment.
#
#   ┌──────────────────────────────┐        ┌──────────────────────────┐
#   │  Google ADK Agent            │  stdio │  FastMCP Server          │
#   │  prompt + LiteLlm model      │───────▶│  (tools/mcp_server.py)   │
#   │  + MCPToolset                │        │  text / AI / roster tools│
#   └──────────────────────────────┘        └──────────────────────────┘
#                                                        │
#                                                        ▼
#                                           ┌──────────────────────────┐
#                                           │  core/ (pure Python)     │
#                                           └──────────────────────────┘
#
# WHY TEXT_TOOLS_BACKEND=litellm FOR THE SUBPROCESS:
#   By default the AI tools ask the HOST to run completions through MCP
#   sampling.  ADK's MCPToolset does not answer sampling requests, so the
#   spawned server is told to call the model itself through LiteLLM.
# =============================================================================

import os
import sys

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_text_assistant_prompt
from core.settings import get_settings


def create_agent() -> Agent:
    """Create and configure the text assistant agent.

    This function:
      1. Sets up the MCP connection to our FastMCP tool server
      2. Configures the reasoning model (via LiteLlm)
      3. Creates an ADK Agent with the system prompt and tools

    Returns:
        A configured Google ADK Agent instance.
    """
    settings = get_settings()

    # =========================================================================
    # Step 1: Configure the MCP tool connection
    # =========================================================================
    # ADK starts the server as a subprocess with the SAME interpreter that
    # runs the agent, so the subprocess sees the same installed packages.
    # The project root goes first on PYTHONPATH so `core` and `tools`
    # resolve when the server script is run by path.
    # =========================================================================
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    mcp_server_path = os.path.join(project_root, "tools", "mcp_server.py")

    env = dict(os.environ)
    env["TEXT_TOOLS_BACKEND"] = "litellm"
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [project_root, env.get("PYTHONPATH")]))

    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command=sys.executable,
            args=[mcp_server_path],
            env=env,
        ),
    )

    # =========================================================================
    # Step 2: Create the ADK Agent
    # =========================================================================
    # To switch models, change TEXT_TOOLS_MODEL.  Nothing else changes.
    # =========================================================================
    agent = Agent(
        name="text_assistant",                       # Used in logs and traces
        model=LiteLlm(model=settings.model),          # Any LiteLLM model string
        instruction=get_text_assistant_prompt(),      # System prompt from prompt.py
        tools=[mcp_tools],                            # Our FastMCP tool server
    )

    return agent
