"""Error types raised by the outbound integration clients.

Purpose:
- Provide typed exceptions thrown by the LLM, prayer-time, Microsoft Graph and
  TTS clients.
- Expose HTTP-oriented context (status code, response body) for diagnosis.

Usage:
- Services catch ``IntegrationError`` and turn it into a ``success: false``
  payload; callers needing finer control catch the specific subclass.
"""

from __future__ import annotations

from typing import Any, Optional


class IntegrationError(Exception):
    """Base error for outbound API failures.

    Args:
        message: Human-readable error description.
        status_code: Optional HTTP status code associated with the failure.
        details: Optional payload from the remote service (e.g., response body).
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class LLMProviderError(IntegrationError):
    """An LLM provider call failed or returned an unusable payload."""


class PrayerTimesApiError(IntegrationError):
    """The prayer-time API call failed."""


class GraphApiError(IntegrationError):
    """A Microsoft identity platform or Graph call failed."""


class TTSServerError(IntegrationError):
    """The text-to-speech server call failed."""
