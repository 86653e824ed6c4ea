"""
Database entity models.

Modules:
- users: Accounts and their preferences
- focus_sessions: Timed focus sessions
- checkins: Accountability check-ins within a session
- ai_interactions: Log of coaching exchanges
- prayer_checkins: Per-day, per-prayer completion records
- todo_tasks: Local mirror of Microsoft To-Do tasks
"""

from .ai_interactions import AIInteraction
from .checkins import Checkin
from .focus_sessions import FocusSession
from .prayer_checkins import PrayerCheckin
from .todo_tasks import TodoTask
from .users import User

__all__ = [
    "AIInteraction",
    "Checkin",
    "FocusSession",
    "PrayerCheckin",
    "TodoTask",
    "User",
]
