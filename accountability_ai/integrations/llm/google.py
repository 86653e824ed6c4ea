"""Google Gemini ``generateContent`` provider."""

from __future__ import annotations

from typing import Optional

import httpx

from accountability_ai.core.models.domain.enums import LLMProviderName

from .base import GenerationOptions, LLMProvider, LLMResult


class GoogleProvider(LLMProvider):
    """Calls ``POST {base_url}/models/{model}:generateContent``."""

    name = LLMProviderName.google

    def __init__(
        self,
        api_key: Optional[str],
        model: str = "gemini-1.5-flash",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
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
            self._url(f"models/{self.model}:generateContent"),
            what="Gemini generateContent",
            params={"key": self._api_key},
            json={
                "systemInstruction": {"parts": [{"text": system}]},
                "contents": [{"role": "user", "parts": [{"text": prompt}]}],
                "generationConfig": {
                    "temperature": self.options.temperature,
                    "topP": self.options.top_p,
                    "maxOutputTokens": self.options.max_tokens,
                },
            },
        )
        data = self._json(response, what="Gemini generateContent")
        try:
            parts = data["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError):
            return self._result(None)
        if not isinstance(parts, list):
            return self._result(parts)
        text = "".join(p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str))
        usage = data.get("usageMetadata") if isinstance(data, dict) else None
        tokens = usage.get("totalTokenCount") if isinstance(usage, dict) else None
        return self._result(text, tokens)
