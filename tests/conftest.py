"""Shared fixtures: a recording completion backend and a counting roster fetch."""

import pytest

from core.monkeys import MonkeyService


class StubBackend:
    """Completion backend that records every call and returns canned text."""

    def __init__(self, reply: str = "stub reply"):
        self.reply = reply
        self.calls = []

    async def complete(self, messages, options):
        self.calls.append((list(messages), options))
        return self.reply

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def last_messages(self):
        return self.calls[-1][0]

    @property
    def last_options(self):
        return self.calls[-1][1]

    @property
    def last_persona(self) -> str:
        return self.last_messages[0].text

    @property
    def last_request(self) -> str:
        return self.last_messages[1].text


class CountingFetch:
    """Blocking roster fetch that returns queued payloads and counts calls."""

    def __init__(self, *payloads):
        self.payloads = list(payloads)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if len(self.payloads) > 1:
            return self.payloads.pop(0)
        return self.payloads[0] if self.payloads else None


@pytest.fixture
def backend():
    """Provide a fresh StubBackend."""
    return StubBackend()


@pytest.fixture
def make_fetch():
    """Provide the CountingFetch factory."""
    return CountingFetch


@pytest.fixture
def roster_fetch():
    """Provide a fetch returning the Alice/Bob roster."""
    return CountingFetch([{"name": "Alice"}, {"name": "Bob"}])


@pytest.fixture
def monkey_service(roster_fetch):
    """Provide a MonkeyService backed by roster_fetch."""
    return MonkeyService(roster_fetch)
