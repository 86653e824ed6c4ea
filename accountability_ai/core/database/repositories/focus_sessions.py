"""
Focus session repository.

Data access for focus sessions, including the per-user active session
lookup used when starting a new one.
"""

from __future__ import annotations

from typing import List, Optional

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from accountability_ai.core.models.domain.enums import SessionStatus

from ..entities.focus_sessions import FocusSession
from .base import AsyncBaseRepository


class FocusSessionRepository(AsyncBaseRepository[FocusSession]):
    """Repository for focus session data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, FocusSession)

    async def list_by_status(self, user_id: int, status: SessionStatus) -> List[FocusSession]:
        """All of a user's sessions with the given status, oldest first."""
        stmt = (
            select(FocusSession)
            .where(FocusSession.user_id == user_id, FocusSession.status == status)
            .order_by(col(FocusSession.start_time).asc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_active(self, user_id: int) -> Optional[FocusSession]:
        """The user's most recently started active session, if any."""
        stmt = (
            select(FocusSession)
            .where(FocusSession.user_id == user_id, FocusSession.status == SessionStatus.active)
            .order_by(col(FocusSession.start_time).desc())
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_for_user(self, user_id: int, limit: Optional[int] = None) -> List[FocusSession]:
        """A user's sessions, newest first.

        Args:
            user_id: Owner of the sessions
            limit: Maximum number of sessions to return

        Returns:
            List of FocusSession instances
        """
        stmt = (
            select(FocusSession)
            .where(FocusSession.user_id == user_id)
            .order_by(col(FocusSession.start_time).desc(), col(FocusSession.id).desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all())
