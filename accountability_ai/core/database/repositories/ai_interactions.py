"""AI interaction log repository."""

from __future__ import annotations

from typing import List

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.ai_interactions import AIInteraction
from .base import AsyncBaseRepository


class AIInteractionRepository(AsyncBaseRepository[AIInteraction]):
    """Repository for the coaching exchange log."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, AIInteraction)

    async def list_for_user(self, user_id: int, limit: int = 50) -> List[AIInteraction]:
        """A user's interactions, newest first."""
        stmt = (
            select(AIInteraction)
            .where(AIInteraction.user_id == user_id)
            .order_by(col(AIInteraction.timestamp).desc(), col(AIInteraction.id).desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
