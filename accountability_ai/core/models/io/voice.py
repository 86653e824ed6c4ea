"""
Voice I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class TextToSpeechRequest(BaseModel):
    """Schema for a synthesis request."""

    text: str = Field(min_length=1)
    voice_id: Optional[str] = None
    model: Optional[str] = None
    speaker_id: Optional[str] = None
    language_id: Optional[str] = None


class TextToSpeechResult(BaseModel):
    """Synthesised audio, or a hint to fall back to browser speech."""

    success: bool
    provider: str
    audio_url: Optional[str] = None
    fallback: bool = False
    voice_id: Optional[str] = None
    text: Optional[str] = None
    error: Optional[str] = None


class TTSModelsResult(BaseModel):
    """Models reported by the TTS server."""

    success: bool
    models: List[Any] = Field(default_factory=list)
    error: Optional[str] = None


class TTSStatus(BaseModel):
    """Availability of the TTS server."""

    configured: bool
    available: bool
    status: Optional[int] = None
    server_url: Optional[str] = None
    error: Optional[str] = None


class SpeechToTextRequest(BaseModel):
    """Schema for a transcription request; recognition itself runs in the browser."""

    audio_data: Optional[str] = Field(default=None, description="Base64 audio payload")
    language: Optional[str] = None


class SpeechToTextResult(BaseModel):
    """Transcription outcome."""

    success: bool
    transcript: str
    confidence: float


class VoicePreferences(BaseModel):
    """A user's voice settings with defaults filled in."""

    voice_enabled: bool
    preferred_voice: Optional[str] = None
    speech_rate: float
    speech_pitch: float
    speech_volume: float


class VoicePreferencesUpdate(BaseModel):
    """Schema for updating voice settings."""

    voice_enabled: Optional[bool] = None
    preferred_voice: Optional[str] = None
    speech_rate: Optional[float] = Field(default=None, gt=0)
    speech_pitch: Optional[float] = Field(default=None, gt=0)
    speech_volume: Optional[float] = Field(default=None, ge=0, le=1)
