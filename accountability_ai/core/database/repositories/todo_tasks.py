"""To-Do task mirror repository."""

from __future__ import annotations

from typing import List

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.todo_tasks import TodoTask
from .base import AsyncBaseRepository


class TodoTaskRepository(AsyncBaseRepository[TodoTask]):
    """Repository for locally mirrored To-Do tasks."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, TodoTask)

    async def list_for_user(self, user_id: int) -> List[TodoTask]:
        """A user's mirrored tasks, newest first."""
        stmt = (
            select(TodoTask)
            .where(TodoTask.user_id == user_id)
            .order_by(col(TodoTask.last_synced).desc(), col(TodoTask.id).desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())
