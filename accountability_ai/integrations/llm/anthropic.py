"""Anthropic Messages API provider."""

from __future__ import annotations

from typing import Optional

import httpx

from accountability_ai.core.models.domain.enums import LLMProviderName

from .base import GenerationOptions, LLMProvider, LLMResult

ANTHROPIC_VERSION = "2023-06-01"


class AnthropicProvider(LLMProvider):
    """Calls ``POST {base_url}/messages``."""

    name = LLMProviderName.anthropic

    def __init__(
        self,
        api_key: Optional[str],
        model: str = "claude-3-5-haiku-latest",
        base_url: str = "https://api.anthropic.com/v1",
        *,
        options: Optional[GenerationOptions] = None,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__(base_url, model, options=options, timeout=timeout, client=client)
        self._api_key = api_key

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def complete(self, system: str, prompt: str) -> LLMResult:
        response = await self._request(
            "POST",
            self._url("messages"),
            what="Anthropic messages",
            json={
                "model": self.model,
                "max_tokens": self.options.max_tokens,
                "temperature": self.options.temperature,
                "system": system,
                "messages": [{"role": "user", "content": prompt}],
            },
            headers={
                "x-api-key": self._api_key or "",
                "anthropic-version": ANTHROPIC_VERSION,
                "content-type": "application/json",
            },
        )
        data = self._json(response, what="Anthropic messages")
        if not isinstance(data, dict):
            return self._result(None)
        # content is a list of blocks; only text blocks carry the reply
        blocks = data.get("content")
        text = "".join(
            b["text"]
            for b in (blocks if isinstance(blocks, list) else [])
            if isinstance(b, dict) and b.get("type") == "text" and isinstance(b.get("text"), str)
        )
        usage = data.get("usage")
        tokens = None
        if isinstance(usage, dict) and usage:
            tokens = (usage.get("input_tokens") or 0) + (usage.get("output_tokens") or 0)
        return self._result(text, tokens)
