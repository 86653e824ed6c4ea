"""
Voice Endpoints.

Speech synthesis through a Coqui TTS server with browser fallback, server
status, and the user's voice preferences.
"""

from fastapi import APIRouter

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
from accountability_ai.server.services.deps import CurrentUserDep, VoiceServiceDep

router = APIRouter()


@router.post(
    "/tts",
    response_model=TextToSpeechResult,
    summary="Text to Speech",
    description="Synthesize speech with the Coqui server; falls back to browser speech when unavailable.",
)
async def text_to_speech(
    request: TextToSpeechRequest, user: CurrentUserDep, service: VoiceServiceDep
) -> TextToSpeechResult:
    return await service.text_to_speech(request)


@router.get("/tts/models", response_model=TTSModelsResult, summary="List TTS Models")
async def get_tts_models(user: CurrentUserDep, service: VoiceServiceDep) -> TTSModelsResult:
    return await service.get_tts_models()


@router.get("/tts/status", response_model=TTSStatus, summary="TTS Server Status")
async def check_tts_status(user: CurrentUserDep, service: VoiceServiceDep) -> TTSStatus:
    return await service.check_tts_status()


@router.post(
    "/stt",
    response_model=SpeechToTextResult,
    summary="Speech to Text",
    description="Recognition runs in the browser; the server acknowledges with an empty transcript.",
)
async def speech_to_text(
    request: SpeechToTextRequest, user: CurrentUserDep, service: VoiceServiceDep
) -> SpeechToTextResult:
    return await service.speech_to_text(request)


@router.get("/preferences", response_model=VoicePreferences, summary="Get Voice Preferences")
async def get_voice_preferences(user: CurrentUserDep, service: VoiceServiceDep) -> VoicePreferences:
    return await service.get_voice_preferences(user)


@router.patch("/preferences", response_model=VoicePreferences, summary="Update Voice Preferences")
async def update_voice_preferences(
    update: VoicePreferencesUpdate, user: CurrentUserDep, service: VoiceServiceDep
) -> VoicePreferences:
    return await service.update_voice_preferences(user, update)
