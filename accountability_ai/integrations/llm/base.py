"""
LLM provider abstraction.

Each provider wraps one vendor's HTTP API behind ``complete(system, prompt)``
and reports whether it has enough configuration to be tried.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import httpx

from accountability_ai.core.models.domain.enums import LLMProviderName

from ..base import AsyncApiClient
from ..errors import LLMProviderError


@dataclass(frozen=True)
class GenerationOptions:
    """Sampling parameters shared by all providers."""

    temperature: float = 0.7
    top_p: float = 0.9
    max_tokens: int = 200


@dataclass(frozen=True)
class LLMResult:
    """Text produced by a provider plus the usage it reported."""

    text: str
    provider: str
    model: str
    tokens: Optional[int] = None


class LLMProvider(AsyncApiClient, ABC):
    """Base class for a single chat-completion backend."""

    name: LLMProviderName
    error_class = LLMProviderError

    def __init__(
        self,
        base_url: str,
        model: str,
        *,
        options: Optional[GenerationOptions] = None,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__(base_url, timeout=timeout, client=client)
        self.model = model
        self.options = options or GenerationOptions()

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether the provider has the credentials it needs."""

    @abstractmethod
    async def complete(self, system: str, prompt: str) -> LLMResult:
        """Generate a reply.

        Args:
            system: System instructions
            prompt: The user message

        Returns:
            LLMResult with the reply text

        Raises:
            LLMProviderError: On HTTP failure or an empty/malformed reply
        """

    def _result(self, text: object, tokens: Optional[int] = None) -> LLMResult:
        if text is not None and not isinstance(text, str):
            raise LLMProviderError(f"{self.name} returned a malformed response", details=text)
        if not text or not text.strip():
            raise LLMProviderError(f"{self.name} returned an empty response")
        return LLMResult(text=text.strip(), provider=str(self.name), model=self.model, tokens=tokens)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model={self.model!r}, configured={self.is_configured})"
