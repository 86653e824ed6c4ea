"""
Outbound integrations.

Thin httpx clients for the LLM providers, the prayer-time API, Microsoft
Graph and the Coqui TTS server. Every client raises a subclass of
``IntegrationError`` on failure.
"""

from .errors import (
    GraphApiError,
    IntegrationError,
    LLMProviderError,
    PrayerTimesApiError,
    TTSServerError,
)

__all__ = [
    "GraphApiError",
    "IntegrationError",
    "LLMProviderError",
    "PrayerTimesApiError",
    "TTSServerError",
]
