# =============================================================================
# main.py  —  Entry Point for the Text Assistant demo agent
# =============================================================================
#
# HOW TO RUN:
#   python main.py
#
# WHAT HAPPENS:
#   1. Creates the Google ADK agent (agent/text_agent.py), which spawns the
#      FastMCP tool server (tools/mcp_server.py) as a subprocess
#   2. Sets up an interactive session
#   3. Sends each line you type to the agent
#   4. Prints the tools the agent calls and its final answer
#
# GOOGLE ADK CONCEPTS USED:
#   - Runner: Manages the agent's execution lifecycle
#   - SessionService: Tracks conversation state across turns
#   - Content/Part: ADK's message format
#   - Event stream: Real-time updates as the agent thinks and acts
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Load environment variables from .env (OPENROUTER_API_KEY, TEXT_TOOLS_MODEL,
# ...) BEFORE creating the agent: LiteLlm and core/settings.py read them.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.text_agent import create_agent

APP_NAME = "text_assistant"
USER_ID = "demo_user"


async def run_agent():
    """Run the text assistant agent interactively."""

    print("=" * 70)
    print("  TEXT ASSISTANT AGENT")
    print("  Powered by Google ADK + LiteLLM + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    # InMemorySessionService keeps the conversation in RAM (fine for a demo).
    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask for a poem, a sentiment check, a translation, a monkey...")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        # Events are text, tool calls or tool results; keep the last text.
        final_response = ""
        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text
                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
