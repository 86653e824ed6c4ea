"""Check-in repository."""

from __future__ import annotations

from typing import List, Optional

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.checkins import Checkin
from .base import AsyncBaseRepository


class CheckinRepository(AsyncBaseRepository[Checkin]):
    """Repository for check-in data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Checkin)

    async def list_for_session(self, session_id: int) -> List[Checkin]:
        """Check-ins of a session, newest first."""
        stmt = (
            select(Checkin)
            .where(Checkin.session_id == session_id)
            .order_by(col(Checkin.timestamp).desc(), col(Checkin.id).desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def latest_for_session(self, session_id: int) -> Optional[Checkin]:
        """The most recent check-in of a session, if any."""
        stmt = (
            select(Checkin)
            .where(Checkin.session_id == session_id)
            .order_by(col(Checkin.timestamp).desc(), col(Checkin.id).desc())
        )
        result = await self.session.exec(stmt)
        return result.first()
