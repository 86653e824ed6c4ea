"""Local Ollama server provider."""

from __future__ import annotations

from typing import Optional

import httpx

from accountability_ai.core.models.domain.enums import LLMProviderName

from .base import GenerationOptions, LLMProvider, LLMResult


class OllamaProvider(LLMProvider):
    """Calls ``POST {base_url}/api/generate`` with streaming disabled.

    Ollama takes a single prompt, so the system instructions are prepended.
    """

    name = LLMProviderName.ollama

    def __init__(
        self,
        base_url: Optional[str] = "http://localhost:11434",
        model: str = "phi3:mini",
        *,
        enabled: bool = True,
        options: Optional[GenerationOptions] = None,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__(base_url or "", model, options=options, timeout=timeout, client=client)
        self.enabled = enabled

    @property
    def is_configured(self) -> bool:
        return self.enabled and bool(self.base_url)

    async def complete(self, system: str, prompt: str) -> LLMResult:
        response = await self._request(
            "POST",
            self._url("api/generate"),
            what="Ollama generate",
            json={
                "model": self.model,
                "prompt": f"{system}\n\nUser: {prompt}\n\nAssistant:",
                "stream": False,
                "options": {
                    "temperature": self.options.temperature,
                    "top_p": self.options.top_p,
                    "num_predict": self.options.max_tokens,
                },
            },
        )
        data = self._json(response, what="Ollama generate")
        text = data.get("response") if isinstance(data, dict) else None
        tokens = None
        if isinstance(data, dict) and "eval_count" in data:
            tokens = (data.get("prompt_eval_count") or 0) + (data.get("eval_count") or 0)
        return self._result(text, tokens)
