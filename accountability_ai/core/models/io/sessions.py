"""
Focus session I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from accountability_ai.core.models.domain.enums import SessionStatus


class FocusSessionCreate(BaseModel):
    """Schema for starting a focus session via API."""

    title: str = Field(min_length=1, description="Session title or goal")
    description: Optional[str] = Field(default=None, description="Detailed description of the work")
    tasks: List[str] = Field(default_factory=list, description="Specific tasks to accomplish")
    planned_duration: int = Field(gt=0, description="Planned duration in minutes")


class FocusSessionStatusUpdate(BaseModel):
    """Schema for changing a session's status."""

    status: SessionStatus
    productivity: Optional[int] = Field(default=None, ge=1, le=10)
    notes: Optional[str] = None


class FocusSessionRead(BaseModel):
    """Schema for reading a focus session from API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    tasks: List[str] = Field(default_factory=list)
    status: SessionStatus
    start_time: datetime
    end_time: Optional[datetime] = None
    planned_duration: int
    actual_duration: Optional[int] = None
    productivity: Optional[int] = None
    notes: Optional[str] = None


class SessionStats(BaseModel):
    """Aggregate statistics over all of a user's sessions."""

    total_sessions: int
    completed_sessions: int
    total_minutes: int
    avg_productivity: float
    completion_rate: int = Field(description="Completed sessions as a rounded percentage")


class CheckinDue(BaseModel):
    """Whether the active session is due for a check-in."""

    session_id: Optional[int] = None
    due: bool
    minutes_since_last: int
    frequency: int
