"""
LLM provider routing.

Providers are tried once each, in configured order, with a requested or
preferred provider moved to the front. Unconfigured providers are skipped.
The first provider that answers wins; there is no retry and no state kept
between calls.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Optional

import httpx

from accountability_ai.core import monitoring
from accountability_ai.server.core.config import Settings

from ..errors import LLMProviderError
from .anthropic import AnthropicProvider
from .base import GenerationOptions, LLMProvider, LLMResult
from .google import GoogleProvider
from .ollama import OllamaProvider
from .openai import OpenAIProvider

logger = logging.getLogger(__name__)


class LLMRouter:
    """Dispatches a completion to the first configured provider that succeeds."""

    def __init__(
        self,
        providers: Iterable[LLMProvider],
        *,
        order: Optional[List[str]] = None,
        preferred: Optional[str] = None,
    ) -> None:
        self._providers: Dict[str, LLMProvider] = {str(p.name): p for p in providers}
        self._order = [name for name in (order or list(self._providers)) if name in self._providers]
        self._preferred = preferred

    @classmethod
    def from_settings(cls, settings: Settings, *, client: Optional[httpx.AsyncClient] = None) -> "LLMRouter":
        """Build a router with every provider wired from ``settings``.

        Args:
            settings: Application settings
            client: Optional shared HTTP client (tests inject a mock transport here)

        Returns:
            A router over OpenAI, Anthropic, Google and Ollama
        """
        routing = settings.ai_routing
        options = GenerationOptions(
            temperature=routing.temperature, top_p=routing.top_p, max_tokens=routing.max_tokens
        )
        common = {"options": options, "timeout": routing.request_timeout, "client": client}
        openai_cfg, anthropic_cfg, google_cfg, ollama_cfg = (
            settings.openai,
            settings.anthropic,
            settings.google,
            settings.ollama,
        )
        providers: List[LLMProvider] = [
            OpenAIProvider(
                openai_cfg.api_key.get_secret_value() if openai_cfg.api_key else None,
                openai_cfg.model,
                openai_cfg.base_url,
                **common,
            ),
            AnthropicProvider(
                anthropic_cfg.api_key.get_secret_value() if anthropic_cfg.api_key else None,
                anthropic_cfg.model,
                anthropic_cfg.base_url,
                **common,
            ),
            GoogleProvider(
                google_cfg.api_key.get_secret_value() if google_cfg.api_key else None,
                google_cfg.model,
                google_cfg.base_url,
                **common,
            ),
            OllamaProvider(ollama_cfg.base_url, ollama_cfg.model, enabled=ollama_cfg.enabled, **common),
        ]
        return cls(providers, order=routing.provider_order, preferred=routing.preferred_provider)

    def candidates(self, requested: Optional[str] = None) -> List[LLMProvider]:
        """Configured providers in the order they will be tried.

        Args:
            requested: Provider to move to the front, overriding the preferred one

        Returns:
            Ordered list of configured providers
        """
        order = list(self._order)
        first = requested or self._preferred
        if first and first in order:
            order.remove(first)
            order.insert(0, first)
        return [self._providers[name] for name in order if self._providers[name].is_configured]

    async def complete(self, system: str, prompt: str, *, requested: Optional[str] = None) -> LLMResult:
        """Try each candidate once and return the first successful reply.

        Raises:
            LLMProviderError: When no provider is configured or all of them failed
        """
        candidates = self.candidates(requested)
        if not candidates:
            raise LLMProviderError("No AI provider configured")

        failures: List[str] = []
        for provider in candidates:
            started = time.perf_counter()
            try:
                result = await provider.complete(system, prompt)
            except LLMProviderError as e:
                logger.warning(f"LLM provider {provider.name} failed: {e}")
                failures.append(f"{provider.name}: {e}")
                continue
            duration_ms = (time.perf_counter() - started) * 1000
            monitoring.log_llm_call(result.provider, result.model, duration_ms, result.tokens)
            return result

        raise LLMProviderError("All AI providers failed", details=failures)
