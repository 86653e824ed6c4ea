"""
Microsoft To-Do task I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from accountability_ai.core.models.domain.enums import TaskPriority, TaskStatus


class TaskCreate(BaseModel):
    """Schema for creating a task in the default To-Do list."""

    title: str = Field(min_length=1)
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    priority: Optional[TaskPriority] = None
    session_id: Optional[int] = None


class TaskCreateResult(BaseModel):
    """Outcome of a task creation."""

    success: bool
    task_id: Optional[str] = None
    local_task_id: Optional[int] = None
    error: Optional[str] = None


class TaskListResult(BaseModel):
    """Tasks of the default To-Do list as returned by Graph."""

    success: bool
    tasks: List[Dict[str, Any]] = Field(default_factory=list)
    error: Optional[str] = None


class TodoTaskRead(BaseModel):
    """Schema for reading a locally mirrored task."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    microsoft_task_id: Optional[str] = None
    title: str
    description: Optional[str] = None
    status: TaskStatus
    priority: Optional[TaskPriority] = None
    due_date: Optional[datetime] = None
    created_from_ai: Optional[bool] = None
    session_id: Optional[int] = None
    last_synced: datetime
