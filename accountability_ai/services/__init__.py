"""
Service layer.

Plain async service classes holding the application logic. Each takes the
repository bundle (and the integration clients it needs) and operates on
behalf of an already-resolved user.
"""

from .checkins import CheckinService, classify_checkin_response
from .coaching import CoachingService
from .prayers import PrayerService
from .sessions import SessionService
from .todo import TodoService
from .users import UserService
from .voice import VoiceService

__all__ = [
    "CheckinService",
    "CoachingService",
    "PrayerService",
    "SessionService",
    "TodoService",
    "UserService",
    "VoiceService",
    "classify_checkin_response",
]
