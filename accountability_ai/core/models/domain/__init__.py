"""Domain enums and value types."""

from .enums import (
    CheckinResponse,
    LLMProviderName,
    PrayerDayStatus,
    PrayerStatus,
    SessionStatus,
    TaskPriority,
    TaskStatus,
    UserRole,
)

__all__ = [
    "CheckinResponse",
    "LLMProviderName",
    "PrayerDayStatus",
    "PrayerStatus",
    "SessionStatus",
    "TaskPriority",
    "TaskStatus",
    "UserRole",
]
