"""
Focus session entity models.

A focus session is a user-defined work interval with a planned duration and
a task list. Its status moves from ``active`` (or ``paused``) to one of the
terminal states ``completed`` / ``abandoned``.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import List, Optional

from sqlalchemy import JSON
from sqlmodel import Field

from accountability_ai.core.models.domain.enums import SessionStatus

from ..base import Base, utc_now


class FocusSessionBase(Base):
    """Base fields for focus session entity."""

    title: str = Field(description="Session title or goal")
    description: Optional[str] = Field(default=None, description="Detailed description of the work")
    tasks: List[str] = Field(default_factory=list, sa_type=JSON, description="Specific tasks to accomplish")
    planned_duration: int = Field(description="Planned duration in minutes")


class FocusSession(FocusSessionBase, table=True):
    """Entity for a focus session.

    Table: focus_sessions
    """

    __tablename__ = "focus_sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    status: SessionStatus = Field(default=SessionStatus.active, index=True)

    start_time: datetime = Field(default_factory=utc_now, index=True)
    end_time: Optional[datetime] = Field(default=None)
    actual_duration: Optional[int] = Field(default=None, description="Actual duration in minutes")
    productivity: Optional[int] = Field(default=None, description="Productivity score 1-10")
    notes: Optional[str] = Field(default=None, description="Session summary notes")

    def elapsed_minutes(self, now: datetime) -> int:
        """Whole minutes between the session start and ``now``, halves rounding up."""
        return math.floor((now - self.start_time).total_seconds() / 60 + 0.5)

    def close(self, status: SessionStatus, now: datetime) -> None:
        """Move the session into a terminal status, stamping end time and actual duration."""
        self.status = status
        self.end_time = now
        self.actual_duration = self.elapsed_minutes(now)

    def __repr__(self) -> str:
        return f"FocusSession(id={self.id}, user_id={self.user_id}, status={self.status})"
