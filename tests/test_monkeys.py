"""Tests for the cached roster service."""

import asyncio
import threading

import pytest

from core.monkeys import MonkeyService, parse_monkeys


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class TestParseMonkeys:
    """Test suite for parse_monkeys."""

    def test_non_list_payload_is_empty(self):
        assert parse_monkeys(None) == []
        assert parse_monkeys({"name": "Alice"}) == []

    def test_skips_entries_without_name(self):
        monkeys = parse_monkeys([{"name": "Alice"}, {"location": "?"}, "junk", {"Name": "Bob"}])
        assert [m.name for m in monkeys] == ["Alice", "Bob"]


class TestMonkeyService:
    """Test suite for MonkeyService caching."""

    @pytest.mark.asyncio
    async def test_alice_and_bob_scenario(self, monkey_service, roster_fetch):
        """Test fetch-once-then-cache end to end."""
        first = await monkey_service.get_monkeys()
        assert roster_fetch.calls == 1
        assert [m.name for m in first] == ["Alice", "Bob"]

        second = await monkey_service.get_monkeys()
        assert roster_fetch.calls == 1
        assert second == first

        bob = await monkey_service.get_monkey("bob")
        assert bob is not None
        assert bob.name == "Bob"
        assert roster_fetch.calls == 1

    @pytest.mark.asyncio
    async def test_changing_returned_list_leaves_cache_intact(self, monkey_service, roster_fetch):
        """Test that callers get a copy, so clearing it does not force a refetch."""
        first = await monkey_service.get_monkeys()
        first.clear()
        first.append("junk")

        second = await monkey_service.get_monkeys()
        assert [m.name for m in second] == ["Alice", "Bob"]
        assert roster_fetch.calls == 1

    @pytest.mark.asyncio
    async def test_lookup_is_case_insensitive(self, monkey_service):
        alice = await monkey_service.get_monkey("ALICE")
        assert alice.name == "Alice"

    @pytest.mark.asyncio
    async def test_unknown_name_is_not_found(self, monkey_service):
        assert await monkey_service.get_monkey("nonexistent") is None

    @pytest.mark.asyncio
    async def test_failed_fetch_is_retried_on_next_call(self):
        """Test that an empty result leaves the cache empty so the next call refetches."""
        calls = []
        payloads = [None, [], [{"name": "Alice"}]]

        def fetch():
            calls.append(1)
            return payloads[len(calls) - 1]

        service = MonkeyService(fetch)
        assert await service.get_monkeys() == []
        assert await service.get_monkeys() == []
        recovered = await service.get_monkeys()
        assert [m.name for m in recovered] == ["Alice"]
        assert len(calls) == 3

        await service.get_monkeys()
        assert len(calls) == 3

    @pytest.mark.asyncio
    async def test_failure_cooldown_suppresses_refetch(self):
        calls = []

        def fetch():
            calls.append(1)
            return None if len(calls) == 1 else [{"name": "Alice"}]

        clock = FakeClock()
        service = MonkeyService(fetch, failure_cooldown=30.0, clock=clock)

        assert await service.get_monkeys() == []
        clock.advance(10)
        assert await service.get_monkeys() == []
        assert len(calls) == 1

        clock.advance(25)
        assert [m.name for m in await service.get_monkeys()] == ["Alice"]
        assert len(calls) == 2

    @pytest.mark.asyncio
    async def test_cancelled_fetch_leaves_cache_empty(self):
        """Test that cancelling during the fetch never applies a partial result."""
        started = threading.Event()
        release = threading.Event()
        calls = []

        def fetch():
            calls.append(1)
            if len(calls) == 1:
                started.set()
                release.wait(5)
            return [{"name": "Alice"}]

        service = MonkeyService(fetch)
        task = asyncio.create_task(service.get_monkeys())
        await asyncio.to_thread(started.wait, 5)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        release.set()

        # Still empty, so the next call fetches again.
        monkeys = await service.get_monkeys()
        assert [m.name for m in monkeys] == ["Alice"]
        assert len(calls) == 2
