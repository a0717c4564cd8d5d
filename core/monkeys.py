# =============================================================================
# core/monkeys.py  —  Cached Roster Service
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Serves a roster of monkeys fetched from a fixed remote JSON feed.  The
#   feed is downloaded lazily, on the first request, and kept in memory for
#   the life of the process.
#
# THE REFRESH RULE:
#   The cache is refreshed whenever it is EMPTY, not "if we never fetched".
#   A failed download or an empty feed leaves the cache empty, so the next
#   call tries again.  During a remote outage every call refetches unless a
#   failure_cooldown is configured (MONKEYS_FAILURE_COOLDOWN, seconds), in
#   which case calls inside the cooldown window return [] without touching
#   the network.
#
# OWNERSHIP:
#   There is no module-level instance.  tools/mcp_server.py creates ONE
#   MonkeyService and hands it to the monkey tools.  Tests create their own
#   with a stub fetch.
#
# CONCURRENCY:
#   No lock.  Two calls that both see an empty cache both fetch; the last one
#   to finish wins.  Both write the same data, so the result is the same.
# =============================================================================

import asyncio
import functools
import logging
import time
from typing import Any, Callable, Optional

from core.http import DEFAULT_TIMEOUT, fetch_json
from core.models import Monkey

logger = logging.getLogger(__name__)

MONKEYS_URL = "https://www.montemagno.com/monkeys.json"


def parse_monkeys(payload: Any) -> list[Monkey]:
    """Turn a decoded JSON payload into Monkeys.

    Anything that is not a list yields []; entries without a string name
    are skipped.
    """
    if not isinstance(payload, list):
        return []
    monkeys = []
    for item in payload:
        if not isinstance(item, dict):
            continue
        monkey = Monkey.from_dict(item)
        if monkey is not None:
            monkeys.append(monkey)
    return monkeys


class MonkeyService:
    """Fetch-once-then-cache access to the monkey roster."""

    def __init__(
        self,
        fetch: Optional[Callable[[], Any]] = None,
        *,
        url: str = MONKEYS_URL,
        timeout: float = DEFAULT_TIMEOUT,
        failure_cooldown: float = 0.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            fetch: Blocking callable returning the decoded JSON payload (or
                None).  Defaults to fetch_json(url, timeout).
            url: Roster feed used by the default fetch.
            timeout: Socket timeout for the default fetch, in seconds.
            failure_cooldown: Seconds to wait after an empty/failed fetch
                before fetching again.  0 refetches on every call.
            clock: Monotonic time source (injectable for tests).
        """
        self._fetch = fetch or functools.partial(fetch_json, url, timeout)
        self._failure_cooldown = failure_cooldown
        self._clock = clock
        self._monkeys: list[Monkey] = []
        self._last_failure: Optional[float] = None

    async def get_monkeys(self) -> list[Monkey]:
        """Return a copy of the roster, fetching it only while the cache is empty."""
        if self._monkeys:
            return list(self._monkeys)

        if self._cooling_down():
            logger.debug("Roster fetch skipped, last failure was under %ss ago", self._failure_cooldown)
            return []

        payload = await asyncio.to_thread(self._fetch)
        monkeys = parse_monkeys(payload)

        # Nothing is assigned until the fetch has completed, so a cancelled
        # call leaves the cache exactly as it was.
        self._monkeys = monkeys
        if monkeys:
            self._last_failure = None
            logger.info("Roster cached with %d monkeys", len(monkeys))
        else:
            self._last_failure = self._clock()
            logger.warning("Roster fetch returned no monkeys, will retry on next call")
        return list(self._monkeys)

    async def get_monkey(self, name: str) -> Optional[Monkey]:
        """Return the first monkey whose name matches case-insensitively, else None."""
        for monkey in await self.get_monkeys():
            if monkey.matches(name):
                return monkey
        return None

    def _cooling_down(self) -> bool:
        if self._last_failure is None or self._failure_cooldown <= 0:
            return False
        return self._clock() - self._last_failure < self._failure_cooldown
