# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between MCP and the core logic.  Each
#   file here:
#     1. Imports plain functions/services from core/
#     2. Adapts them to FastMCP (Context -> completion backend, dataclasses
#        -> dicts)
#     3. Logs every call to stderr (tools/console.py)
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT build prompts or validate arguments (that's in core/)
#   - They do NOT know about Google ADK (agent/ is just one possible host)
#
# TOOL CONTRACT QUALITY:
#   The wrapper's name, typed parameters and docstring are exactly what the
#   host's LLM sees.  A well-named tool with a good docstring gets called
#   correctly; a badly-named one gets misused or ignored.
# =============================================================================
