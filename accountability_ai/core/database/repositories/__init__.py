"""
Database repository layer using SQLModel.

Each module provides async data access operations for its corresponding
SQLModel entity; ``bundle`` groups them for dependency injection.
"""

from .ai_interactions import AIInteractionRepository
from .base import AsyncBaseRepository
from .bundle import SqlRepoBundle, build_sql_repos_from_session
from .checkins import CheckinRepository
from .focus_sessions import FocusSessionRepository
from .prayer_checkins import PrayerCheckinRepository
from .todo_tasks import TodoTaskRepository
from .users import UserRepository

__all__ = [
    "AIInteractionRepository",
    "AsyncBaseRepository",
    "CheckinRepository",
    "FocusSessionRepository",
    "PrayerCheckinRepository",
    "SqlRepoBundle",
    "TodoTaskRepository",
    "UserRepository",
    "build_sql_repos_from_session",
]
