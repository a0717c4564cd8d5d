# =============================================================================
# tools/console.py  —  Colored request/response logging for tool calls
# =============================================================================
#
# We log to STDERR because the MCP server talks to its host over STDOUT
# (stdio transport).  Anything printed to stdout would corrupt the MCP JSON
# stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for responses
#     - YELLOW for intermediate status/progress messages
#
# Every tool in tools/ is wrapped with @logged, which logs the call and its
# result around the real function.  functools.wraps keeps the original
# signature and docstring visible, so FastMCP still builds the right
# argument schema.
# =============================================================================

import functools
import inspect
import json
import logging
from typing import Any, Callable

from fastmcp import Context

# ANSI color codes for terminal output
_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

# Long prompts and results are cut in the log, never in the response.
_MAX_LOGGED_CHARS = 500

logger = logging.getLogger("tools")


def log_request(tool_name: str, **params: Any) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={_shorten(repr(v))}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def log_response(tool_name: str, result: Any) -> Any:
    """Log the tool response in GREEN, then return it unchanged."""
    rendered = json.dumps(result, separators=(",", ":"), default=str, ensure_ascii=False)
    logger.info(f"{_GREEN}  ← {tool_name} response: {_shorten(rendered)}{_RESET}")
    return result


def logged(func: Callable) -> Callable:
    """Wrap a tool function so every call is logged with log_request/log_response."""
    name = func.__name__
    signature = inspect.signature(func)

    def _params(args: tuple, kwargs: dict) -> dict[str, Any]:
        bound = signature.bind_partial(*args, **kwargs)
        return {k: v for k, v in bound.arguments.items() if not isinstance(v, Context)}

    if inspect.iscoroutinefunction(func):
        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            log_request(name, **_params(args, kwargs))
            return log_response(name, await func(*args, **kwargs))

        return async_wrapper

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        log_request(name, **_params(args, kwargs))
        return log_response(name, func(*args, **kwargs))

    return wrapper


def _shorten(text: str) -> str:
    if len(text) <= _MAX_LOGGED_CHARS:
        return text
    return text[:_MAX_LOGGED_CHARS] + "…"
