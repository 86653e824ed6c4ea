"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances
sharing one session, for use by services and API dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlmodel.ext.asyncio.session import AsyncSession

from .ai_interactions import AIInteractionRepository
from .checkins import CheckinRepository
from .focus_sessions import FocusSessionRepository
from .prayer_checkins import PrayerCheckinRepository
from .todo_tasks import TodoTaskRepository
from .users import UserRepository


@dataclass(frozen=True)
class SqlRepoBundle:
    """Convenience bundle of all SQL repositories for dependency injection."""

    users: UserRepository
    sessions: FocusSessionRepository
    checkins: CheckinRepository
    ai_interactions: AIInteractionRepository
    prayer_checkins: PrayerCheckinRepository
    todo_tasks: TodoTaskRepository


def build_sql_repos_from_session(*, session: AsyncSession) -> SqlRepoBundle:
    """Build a SqlRepoBundle from an existing session.

    Args:
        session: Existing async session

    Returns:
        Bundle containing all repository instances
    """
    return SqlRepoBundle(
        users=UserRepository(session),
        sessions=FocusSessionRepository(session),
        checkins=CheckinRepository(session),
        ai_interactions=AIInteractionRepository(session),
        prayer_checkins=PrayerCheckinRepository(session),
        todo_tasks=TodoTaskRepository(session),
    )
