"""
Check-in entity models.

A check-in is a periodic status report inside a focus session, optionally
paired with the AI coach's prompt and reply.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from accountability_ai.core.models.domain.enums import CheckinResponse

from ..base import Base, utc_now


class Checkin(Base, table=True):
    """Entity for an accountability check-in.

    Table: checkins
    """

    __tablename__ = "checkins"

    id: Optional[int] = Field(default=None, primary_key=True)
    session_id: int = Field(foreign_key="focus_sessions.id", index=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    timestamp: datetime = Field(default_factory=utc_now, index=True)

    response: CheckinResponse = Field(description="What the user was doing")
    description: Optional[str] = Field(default=None, description="User's description of current activity")
    ai_prompt: Optional[str] = Field(default=None, description="Question asked by the assistant")
    ai_response: Optional[str] = Field(default=None, description="Assistant feedback")
    voice_input: Optional[bool] = Field(default=None)
    voice_output: Optional[bool] = Field(default=None)
    mood: Optional[int] = Field(default=None, description="Mood 1-10")
    focus: Optional[int] = Field(default=None, description="Focus level 1-10")

    def __repr__(self) -> str:
        return f"Checkin(id={self.id}, session_id={self.session_id}, response={self.response})"
