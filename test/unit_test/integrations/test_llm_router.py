"""Unit tests for provider fallback routing."""

from __future__ import annotations

from typing import List, Optional

import httpx
import pytest

from accountability_ai.core.models.domain import LLMProviderName
from accountability_ai.integrations.errors import LLMProviderError
from accountability_ai.integrations.llm import LLMProvider, LLMResult, LLMRouter, OllamaProvider, OpenAIProvider
from accountability_ai.server.core.config import Settings

pytestmark = pytest.mark.asyncio


class FakeProvider(LLMProvider):
    def __init__(self, name: LLMProviderName, *, configured: bool = True, reply: Optional[str] = "ok") -> None:
        super().__init__("http://mock-llm", f"{name}-model")
        self.name = name
        self._configured = configured
        self._reply = reply
        self.calls: List[str] = []

    @property
    def is_configured(self) -> bool:
        return self._configured

    async def complete(self, system: str, prompt: str) -> LLMResult:
        self.calls.append(prompt)
        if self._reply is None:
            raise LLMProviderError(f"{self.name} down")
        return self._result(self._reply)


def _router(*providers: FakeProvider, preferred: Optional[str] = None) -> LLMRouter:
    return LLMRouter(providers, order=[str(p.name) for p in providers], preferred=preferred)


class TestCandidates:
    def test_skips_unconfigured(self):
        openai = FakeProvider(LLMProviderName.openai, configured=False)
        ollama = FakeProvider(LLMProviderName.ollama)
        assert _router(openai, ollama).candidates() == [ollama]

    def test_preferred_moves_to_front(self):
        openai = FakeProvider(LLMProviderName.openai)
        google = FakeProvider(LLMProviderName.google)
        router = _router(openai, google, preferred="google")
        assert [str(p.name) for p in router.candidates()] == ["google", "openai"]

    def test_requested_overrides_preferred(self):
        openai = FakeProvider(LLMProviderName.openai)
        google = FakeProvider(LLMProviderName.google)
        anthropic = FakeProvider(LLMProviderName.anthropic)
        router = _router(openai, google, anthropic, preferred="google")
        assert [str(p.name) for p in router.candidates("anthropic")] == ["anthropic", "openai", "google"]

    def test_unknown_requested_keeps_order(self):
        openai = FakeProvider(LLMProviderName.openai)
        assert _router(openai).candidates("nope") == [openai]


class TestComplete:
    async def test_falls_back_to_next_provider(self):
        openai = FakeProvider(LLMProviderName.openai, reply=None)
        ollama = FakeProvider(LLMProviderName.ollama, reply="from ollama")
        result = await _router(openai, ollama).complete("sys", "hi")
        assert result.text == "from ollama"
        assert result.provider == "ollama"
        assert openai.calls == ["hi"]

    async def test_each_provider_tried_once(self):
        openai = FakeProvider(LLMProviderName.openai, reply=None)
        ollama = FakeProvider(LLMProviderName.ollama, reply=None)
        with pytest.raises(LLMProviderError, match="All AI providers failed") as exc_info:
            await _router(openai, ollama).complete("sys", "hi")
        assert len(openai.calls) == 1
        assert len(ollama.calls) == 1
        assert len(exc_info.value.details) == 2

    async def test_no_configured_provider(self):
        router = _router(FakeProvider(LLMProviderName.openai, configured=False))
        with pytest.raises(LLMProviderError, match="No AI provider configured"):
            await router.complete("sys", "hi")

    async def test_malformed_success_body_falls_back(self, mock_http):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.host == "mock-openai":
                return httpx.Response(200, json={"choices": [{"message": {"content": ["part"]}}]})
            return httpx.Response(200, json={"response": "from ollama"})

        client = mock_http(handler)
        openai = OpenAIProvider("sk", base_url="https://mock-openai/v1", client=client)
        ollama = OllamaProvider("http://mock-ollama:11434", client=client)
        router = LLMRouter([openai, ollama], order=["openai", "ollama"])

        result = await router.complete("sys", "hi")

        assert result.provider == "ollama"
        assert result.text == "from ollama"

    async def test_malformed_body_from_every_provider_is_a_provider_error(self, mock_http):
        client = mock_http(lambda request: httpx.Response(200, json={"response": {"text": "nested"}}))
        router = LLMRouter([OllamaProvider("http://mock-ollama:11434", client=client)])
        with pytest.raises(LLMProviderError, match="All AI providers failed") as exc_info:
            await router.complete("sys", "hi")
        assert exc_info.value.details == ["ollama: ollama returned a malformed response"]


def test_from_settings_wires_every_provider():
    settings = Settings(
        OPENAI_API_KEY="sk",
        ANTHROPIC_API_KEY=None,
        GOOGLE_API_KEY=None,
        AI_PREFERRED_PROVIDER=None,
        OLLAMA_ENABLED=False,
        AI_PROVIDER_ORDER=["ollama", "openai", "anthropic", "google"],
        _env_file=None,
    )
    router = LLMRouter.from_settings(settings)
    assert [str(p.name) for p in router.candidates()] == ["openai"]
