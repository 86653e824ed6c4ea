"""OpenAI-compatible chat completions provider."""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from accountability_ai.core.models.domain.enums import LLMProviderName

from .base import GenerationOptions, LLMProvider, LLMResult


class OpenAIProvider(LLMProvider):
    """Calls ``POST {base_url}/chat/completions`` with a bearer key."""

    name = LLMProviderName.openai

    def __init__(
        self,
        api_key: Optional[str],
        model: str = "gpt-4o-mini",
        base_url: str = "https://api.openai.com/v1",
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
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            "temperature": self.options.temperature,
            "top_p": self.options.top_p,
            "max_tokens": self.options.max_tokens,
        }
        response = await self._request(
            "POST",
            self._url("chat/completions"),
            what="OpenAI chat completion",
            json=payload,
            headers={"Authorization": f"Bearer {self._api_key}", "Content-Type": "application/json"},
        )
        data = self._json(response, what="OpenAI chat completion")
        try:
            text = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            text = None
        usage = data.get("usage") if isinstance(data, dict) else None
        tokens = usage.get("total_tokens") if isinstance(usage, dict) else None
        return self._result(text, tokens)
