# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL the logic behind the text tools.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any other
#   orchestration framework.  Every module here can be imported and tested
#   in a bare Python REPL: the AI tools take their completion backend as an
#   argument, and the roster service takes its fetch function as one.
#
# LAYOUT:
#   models.py      dataclasses (messages, options, catalogs, Monkey)
#   pipeline.py    the shared validate → prompt → backend → label pipeline
#   catalogs.py    per-tool tables (options, count bounds, categories)
#   analysis.py    AI tools that analyze text
#   creative.py    AI tools that generate creative text
#   learning.py    AI tools for explaining, translating, facilitating
#   text_ops.py    deterministic string tools
#   http.py        blocking GET helpers (urllib)
#   monkeys.py     the cached roster service
#   completion.py  LiteLLM completion backend
#   settings.py    environment configuration
# =============================================================================
