"""
To-Do task mirror entity.

Local copy of tasks created in Microsoft To-Do through the assistant.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from accountability_ai.core.models.domain.enums import TaskPriority, TaskStatus

from ..base import Base, utc_now


class TodoTask(Base, table=True):
    """Entity for a synced To-Do task.

    Table: todo_tasks
    """

    __tablename__ = "todo_tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    microsoft_task_id: Optional[str] = Field(default=None, max_length=256)
    title: str
    description: Optional[str] = Field(default=None)
    status: TaskStatus = Field(default=TaskStatus.not_started)
    priority: Optional[TaskPriority] = Field(default=None)
    due_date: Optional[datetime] = Field(default=None)
    created_from_ai: Optional[bool] = Field(default=None)
    session_id: Optional[int] = Field(default=None, foreign_key="focus_sessions.id")
    last_synced: datetime = Field(default_factory=utc_now, index=True)

    def __repr__(self) -> str:
        return f"TodoTask(id={self.id}, microsoft_task_id={self.microsoft_task_id})"
