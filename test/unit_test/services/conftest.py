"""Fixtures for service-layer tests."""

from __future__ import annotations

import random
from typing import List, Optional

import pytest

from accountability_ai.integrations.errors import LLMProviderError
from accountability_ai.integrations.llm import LLMResult
from accountability_ai.services import CoachingService


class StubRouter:
    """Stands in for ``LLMRouter``; replies with ``reply`` or raises when it is None."""

    def __init__(self, reply: Optional[str] = "Great focus, keep going.") -> None:
        self.reply = reply
        self.calls: List[dict] = []

    async def complete(self, system: str, prompt: str, *, requested: Optional[str] = None) -> LLMResult:
        self.calls.append({"system": system, "prompt": prompt, "requested": requested})
        if self.reply is None:
            raise LLMProviderError("All AI providers failed", details=["openai: down"])
        return LLMResult(text=self.reply, provider="openai", model="gpt-4o-mini", tokens=12)


@pytest.fixture
def stub_router():
    return StubRouter


@pytest.fixture
def router(stub_router) -> StubRouter:
    return stub_router()


@pytest.fixture
def coach(repos, router) -> CoachingService:
    return CoachingService(repos, router, rng=random.Random(7))
