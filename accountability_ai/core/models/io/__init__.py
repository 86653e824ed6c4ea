"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and clients. These models are separate from database
entities to allow independent evolution of API contracts.

Modules:
- users: account and preference models
- sessions: focus session models and statistics
- checkins: check-in models
- ai: coaching chat and prompt models
- prayers: prayer preference, check-in and statistics models
- tasks: Microsoft To-Do task models
- voice: speech synthesis and voice preference models
"""

from .ai import (
    AccountabilityPrompt,
    AccountabilityPromptRequest,
    AIInteractionRead,
    ChatRequest,
    ChatResult,
)
from .checkins import CheckinCreate, CheckinRead, CheckinReply, CheckinReplyResult
from .prayers import (
    NextPrayer,
    PrayerCheckinCreate,
    PrayerCheckinRead,
    PrayerPreferences,
    PrayerPreferencesUpdate,
    PrayerStats,
    PrayerTimingsRequest,
    PrayerTimingsResult,
    TodayPrayerStatus,
)
from .sessions import (
    CheckinDue,
    FocusSessionCreate,
    FocusSessionRead,
    FocusSessionStatusUpdate,
    SessionStats,
)
from .tasks import TaskCreate, TaskCreateResult, TaskListResult, TodoTaskRead
from .users import CheckinPreferencesUpdate, PrayerTimeEntry, UserPreferencesUpdate, UserRead
from .voice import (
    SpeechToTextRequest,
    SpeechToTextResult,
    TextToSpeechRequest,
    TextToSpeechResult,
    TTSModelsResult,
    TTSStatus,
    VoicePreferences,
    VoicePreferencesUpdate,
)

__all__ = [
    "AIInteractionRead",
    "AccountabilityPrompt",
    "AccountabilityPromptRequest",
    "ChatRequest",
    "ChatResult",
    "CheckinCreate",
    "CheckinDue",
    "CheckinPreferencesUpdate",
    "CheckinRead",
    "CheckinReply",
    "CheckinReplyResult",
    "FocusSessionCreate",
    "FocusSessionRead",
    "FocusSessionStatusUpdate",
    "NextPrayer",
    "PrayerCheckinCreate",
    "PrayerCheckinRead",
    "PrayerPreferences",
    "PrayerPreferencesUpdate",
    "PrayerStats",
    "PrayerTimeEntry",
    "PrayerTimingsRequest",
    "PrayerTimingsResult",
    "SessionStats",
    "SpeechToTextRequest",
    "SpeechToTextResult",
    "TTSModelsResult",
    "TTSStatus",
    "TaskCreate",
    "TaskCreateResult",
    "TaskListResult",
    "TextToSpeechRequest",
    "TextToSpeechResult",
    "TodoTaskRead",
    "UserPreferencesUpdate",
    "UserRead",
    "VoicePreferences",
    "VoicePreferencesUpdate",
]
