# =============================================================================
# core/http.py  —  Blocking HTTP GET helpers
# =============================================================================
#
# Two small wrappers around urllib.request:
#
#   fetch_text(url)  → page body as text; errors PROPAGATE (used by the
#                      summarize tool, where a failed download is a failure)
#   fetch_json(url)  → decoded JSON or None; errors are LOGGED and swallowed
#                      (used by the roster, where "no data" is a valid answer)
#
# Both are blocking.  Async callers run them with asyncio.to_thread().
# =============================================================================

import json
import logging
import urllib.request
from typing import Any, Optional

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
_USER_AGENT = "text-tools-mcp/0.1"


def fetch_text(url: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Download ``url`` and return the body decoded as text.

    Raises:
        urllib.error.URLError: network failure or non-2xx status.
        ValueError: malformed URL.
    """
    req = urllib.request.Request(url, headers={"User-Agent": _USER_AGENT})
    with urllib.request.urlopen(req, timeout=timeout) as response:
        charset = response.headers.get_content_charset() or "utf-8"
        return response.read().decode(charset, errors="replace")


def fetch_json(url: str, timeout: float = DEFAULT_TIMEOUT) -> Optional[Any]:
    """Download ``url`` and decode it as JSON.

    Returns None on any network error, non-2xx status, or malformed JSON.
    """
    req = urllib.request.Request(
        url,
        headers={"User-Agent": _USER_AGENT, "Accept": "application/json"},
    )
    try:
        with urllib.request.urlopen(req, timeout=timeout) as response:
            return json.loads(response.read().decode("utf-8"))
    except OSError as e:
        # URLError/HTTPError (non-2xx) and socket timeouts are all OSErrors.
        logger.warning("GET %s failed: %s", url, e)
    except ValueError as e:
        logger.warning("GET %s returned malformed JSON: %s", url, e)
    return None
