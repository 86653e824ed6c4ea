"""
Focus session service.

A user has at most one active session: starting a new one abandons any that
are still active.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional

from accountability_ai.core.database import utc_now
from accountability_ai.core.database.entities import FocusSession, User
from accountability_ai.core.database.repositories import SqlRepoBundle
from accountability_ai.core.errors import NotFoundError
from accountability_ai.core.logging_config import get_logger
from accountability_ai.core.models.domain import SessionStatus
from accountability_ai.core.models.io import (
    CheckinDue,
    FocusSessionCreate,
    FocusSessionStatusUpdate,
    SessionStats,
)

from .common import percent, round_half_up

logger = get_logger(__name__)


class SessionService:
    """Lifecycle and statistics of focus sessions."""

    def __init__(self, repos: SqlRepoBundle, clock: Callable[[], datetime] = utc_now) -> None:
        self.repos = repos
        self.clock = clock

    async def get_owned_session(self, user: User, session_id: int) -> FocusSession:
        """Return the session if it exists and belongs to ``user``.

        Raises:
            NotFoundError: If the session is missing or owned by someone else
        """
        session = await self.repos.sessions.get_by_id(session_id)
        if session is None or session.user_id != user.id:
            raise NotFoundError("Session", session_id)
        return session

    async def create_session(self, user: User, data: FocusSessionCreate) -> FocusSession:
        """Abandon any active sessions, then start a new one."""
        now = self.clock()
        for active in await self.repos.sessions.list_by_status(user.id, SessionStatus.active):
            active.close(SessionStatus.abandoned, now)
            await self.repos.sessions.update(active)
            logger.info(f"Abandoned session {active.id} for user {user.id}")

        session = FocusSession(
            user_id=user.id,
            title=data.title,
            description=data.description,
            tasks=list(data.tasks),
            planned_duration=data.planned_duration,
            status=SessionStatus.active,
            start_time=now,
        )
        session = await self.repos.sessions.create(session)
        logger.info(f"Started session {session.id} for user {user.id}")
        return session

    async def get_current_session(self, user: User) -> Optional[FocusSession]:
        return await self.repos.sessions.get_active(user.id)

    async def update_session_status(
        self, user: User, session_id: int, update: FocusSessionStatusUpdate
    ) -> FocusSession:
        """Change a session's status; terminal statuses stamp end time and duration.

        Raises:
            NotFoundError: If the session is missing or owned by someone else
        """
        session = await self.get_owned_session(user, session_id)
        if update.status.is_terminal:
            session.close(update.status, self.clock())
        else:
            session.status = update.status
        if update.productivity is not None:
            session.productivity = update.productivity
        if update.notes is not None:
            session.notes = update.notes
        return await self.repos.sessions.update(session)

    async def get_user_sessions(self, user: User, limit: int = 20) -> List[FocusSession]:
        return await self.repos.sessions.list_for_user(user.id, limit=limit)

    async def get_session_stats(self, user: User) -> SessionStats:
        """Totals over all of the user's sessions.

        Minutes and average productivity only count completed sessions; a
        completed session without a productivity score counts as 0.
        """
        sessions = await self.repos.sessions.list_for_user(user.id)
        completed = [s for s in sessions if s.status == SessionStatus.completed]
        total_minutes = sum(s.actual_duration or 0 for s in completed)
        avg = sum(s.productivity or 0 for s in completed) / len(completed) if completed else 0.0
        return SessionStats(
            total_sessions=len(sessions),
            completed_sessions=len(completed),
            total_minutes=total_minutes,
            avg_productivity=round_half_up(avg, 1),
            completion_rate=percent(len(completed), len(sessions)),
        )

    async def checkin_due(self, user: User) -> CheckinDue:
        """Whether the active session has gone a full check-in interval without a check-in."""
        frequency = user.effective_checkin_frequency
        session = await self.repos.sessions.get_active(user.id)
        if session is None:
            return CheckinDue(session_id=None, due=False, minutes_since_last=0, frequency=frequency)

        last = await self.repos.checkins.latest_for_session(session.id)
        since = last.timestamp if last is not None else session.start_time
        minutes = int((self.clock() - since).total_seconds() // 60)
        return CheckinDue(
            session_id=session.id, due=minutes >= frequency, minutes_since_last=minutes, frequency=frequency
        )
