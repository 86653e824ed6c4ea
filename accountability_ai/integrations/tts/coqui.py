"""Coqui TTS server client."""

from __future__ import annotations

import base64
from typing import Any, Dict, List, Optional

import httpx

from ..base import AsyncApiClient
from ..errors import TTSServerError


class CoquiTTSClient(AsyncApiClient):
    """Client for a self-hosted Coqui TTS server."""

    error_class = TTSServerError

    def __init__(
        self,
        server_url: str,
        *,
        timeout: float = 30.0,
        status_timeout: float = 5.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__(server_url, timeout=timeout, client=client)
        self.status_timeout = status_timeout

    async def synthesize(
        self,
        text: str,
        *,
        model: Optional[str] = None,
        speaker_id: Optional[str] = None,
        language_id: Optional[str] = None,
    ) -> str:
        """Synthesize ``text`` and return it as a WAV data URL.

        API
        ---
        - Method/Path: ``POST /api/tts``
        - Body: ``text`` plus optional ``model_name``, ``speaker_id``, ``language_id``

        Returns:
            ``data:audio/wav;base64,...``
        """
        body: Dict[str, Any] = {"text": text}
        if model:
            body["model_name"] = model
        if speaker_id:
            body["speaker_id"] = speaker_id
        if language_id:
            body["language_id"] = language_id
        response = await self._request("POST", self._url("api/tts"), what="Coqui TTS synthesis", json=body)
        if not response.content:
            raise TTSServerError("Coqui TTS returned no audio", status_code=response.status_code)
        encoded = base64.b64encode(response.content).decode("ascii")
        return f"data:audio/wav;base64,{encoded}"

    async def list_models(self) -> List[Any]:
        """Models the server exposes (``GET /api/tts/models``)."""
        response = await self._request("GET", self._url("api/tts/models"), what="Coqui TTS models")
        data = self._json(response, what="Coqui TTS models")
        if isinstance(data, dict):
            return data.get("models", [])
        return data if isinstance(data, list) else []

    async def status(self) -> Dict[str, Any]:
        """Probe ``HEAD /api/tts`` with the short status timeout.

        Returns:
            ``{"available": bool, "status": int}``; available means a 2xx answer

        Raises:
            TTSServerError: When the server cannot be reached in time
        """
        try:
            async with self._http(self.status_timeout) as client:
                response = await client.head(self._url("api/tts"), timeout=self.status_timeout)
        except httpx.HTTPError as e:
            raise TTSServerError(f"Coqui TTS server unreachable: {e}") from e
        return {"available": response.is_success, "status": response.status_code}
