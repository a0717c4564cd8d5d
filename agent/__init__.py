# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK demo agent.
#
# ARCHITECTURAL ROLE:
#   The agent/ layer is an MCP HOST.  It:
#     1. Receives the user's request ("Write me a haiku about rain")
#     2. Decides which tool fits (via the LLM and the tool docstrings)
#     3. Calls the tool through MCP and presents the result
#
# WHAT THE AGENT IS NOT:
#   - It is NOT the tool logic (that's in core/)
#   - It is NOT the MCP wrappers (that's in tools/)
#   - It is NOT required: any MCP client can use the server
# =============================================================================
