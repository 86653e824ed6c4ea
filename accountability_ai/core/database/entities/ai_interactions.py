"""
AI interaction log entity.

Append-only record of every successful coaching exchange, with the provider
that answered and its latency.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now


class AIInteraction(Base, table=True):
    """Entity for a logged prompt/response pair.

    Table: ai_interactions
    """

    __tablename__ = "ai_interactions"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    session_id: Optional[int] = Field(default=None, foreign_key="focus_sessions.id", index=True)
    checkin_id: Optional[int] = Field(default=None, foreign_key="checkins.id")

    prompt: str = Field(description="User input")
    response: str = Field(description="AI response")
    provider: str = Field(max_length=32, description="Provider that answered")
    model: str = Field(max_length=128, description="Model used")

    timestamp: datetime = Field(default_factory=utc_now, index=True)
    response_time_ms: Optional[int] = Field(default=None)
    tokens: Optional[int] = Field(default=None)

    def __repr__(self) -> str:
        return f"AIInteraction(id={self.id}, provider={self.provider}, model={self.model})"
