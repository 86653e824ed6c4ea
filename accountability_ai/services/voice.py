"""
Voice service.

Speech synthesis goes to a Coqui TTS server when one is configured; the
browser's built-in speech is the fallback. Recognition always happens in the
browser.
"""

from __future__ import annotations

from typing import Optional

import httpx

from accountability_ai.core.database.entities import User
from accountability_ai.core.database.repositories import SqlRepoBundle
from accountability_ai.core.logging_config import get_logger
from accountability_ai.core.models.io import (
    SpeechToTextRequest,
    SpeechToTextResult,
    TextToSpeechRequest,
    TextToSpeechResult,
    TTSModelsResult,
    TTSStatus,
    VoicePreferences,
    VoicePreferencesUpdate,
)
from accountability_ai.integrations.errors import IntegrationError
from accountability_ai.integrations.tts import CoquiTTSClient
from accountability_ai.server.core.config import CoquiTTSConfig

logger = get_logger(__name__)

NOT_CONFIGURED = "Coqui TTS server URL not configured"


def _or_default(value: Optional[float], default: float = 1.0) -> float:
    return default if value is None else value


class VoiceService:
    """Text-to-speech, speech-to-text and voice preferences."""

    def __init__(
        self, repos: SqlRepoBundle, config: CoquiTTSConfig, *, http_client: Optional[httpx.AsyncClient] = None
    ) -> None:
        self.repos = repos
        self.config = config
        self.http_client = http_client

    def _client(self) -> Optional[CoquiTTSClient]:
        if not self.config.server_url:
            return None
        return CoquiTTSClient(
            self.config.server_url,
            timeout=self.config.timeout,
            status_timeout=self.config.status_timeout,
            client=self.http_client,
        )

    async def text_to_speech(self, request: TextToSpeechRequest) -> TextToSpeechResult:
        """Synthesize with Coqui, or tell the client to use browser speech."""
        client = self._client()
        if client is not None:
            try:
                audio_url = await client.synthesize(
                    request.text, model=request.model, speaker_id=request.speaker_id, language_id=request.language_id
                )
                return TextToSpeechResult(
                    success=True,
                    provider="coqui",
                    audio_url=audio_url,
                    text=request.text,
                    voice_id=request.voice_id or "coqui-default",
                )
            except IntegrationError as e:
                logger.warning(f"Coqui TTS failed, falling back to browser TTS: {e}")

        return TextToSpeechResult(
            success=True,
            provider="browser",
            audio_url=None,
            fallback=True,
            text=request.text,
            voice_id=request.voice_id or "browser-default",
        )

    async def get_tts_models(self) -> TTSModelsResult:
        client = self._client()
        if client is None:
            return TTSModelsResult(success=False, error=NOT_CONFIGURED)
        try:
            return TTSModelsResult(success=True, models=await client.list_models())
        except IntegrationError as e:
            logger.error(f"Fetching Coqui models failed: {e}")
            return TTSModelsResult(success=False, error=str(e))

    async def check_tts_status(self) -> TTSStatus:
        client = self._client()
        if client is None:
            return TTSStatus(configured=False, available=False, error=NOT_CONFIGURED)
        try:
            probe = await client.status()
        except IntegrationError as e:
            return TTSStatus(configured=True, available=False, server_url=self.config.server_url, error=str(e))
        return TTSStatus(
            configured=True, available=probe["available"], status=probe["status"], server_url=self.config.server_url
        )

    async def speech_to_text(self, request: SpeechToTextRequest) -> SpeechToTextResult:
        """Recognition runs in the browser, so the server only acknowledges."""
        return SpeechToTextResult(success=True, transcript="", confidence=1.0)

    async def get_voice_preferences(self, user: User) -> VoicePreferences:
        return VoicePreferences(
            voice_enabled=bool(user.voice_enabled),
            preferred_voice=user.preferred_voice,
            speech_rate=_or_default(user.speech_rate),
            speech_pitch=_or_default(user.speech_pitch),
            speech_volume=_or_default(user.speech_volume),
        )

    async def update_voice_preferences(self, user: User, update: VoicePreferencesUpdate) -> VoicePreferences:
        user = await self.repos.users.patch(user, update.model_dump(include=update.model_fields_set))
        return await self.get_voice_preferences(user)
