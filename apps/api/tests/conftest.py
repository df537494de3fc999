"""
Shared fixtures: in-process chat providers so nothing leaves the machine.
"""

import asyncio

import pytest

from promptlab.providers import ChatProvider
from promptlab.services import PromptComposer

SCENARIO_1_RESPONSE = (
    "**Framework-Wahl:** CLEAR passt, da die Aufgabe einfach ist.\n"
    "C – Kontext: ...\n"
    "L – Länge: 100 Wörter"
)


class FakeChatProvider(ChatProvider):
    """Returns a canned answer, or raises a canned error, and records every prompt."""

    def __init__(self, response: str = SCENARIO_1_RESPONSE, error: Exception | None = None):
        self.model = "fake-model"
        self.response = response
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


class BlockingChatProvider(FakeChatProvider):
    """Holds every request open until `release` is set."""

    def __init__(self, response: str = SCENARIO_1_RESPONSE):
        super().__init__(response=response)
        self.release = asyncio.Event()

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        await self.release.wait()
        return self.response


@pytest.fixture
def fake_provider():
    return FakeChatProvider()


@pytest.fixture
def composer(fake_provider):
    return PromptComposer(fake_provider)
