"""
Check-in I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from accountability_ai.core.models.domain.enums import CheckinResponse


class CheckinCreate(BaseModel):
    """Schema for recording a check-in via API."""

    session_id: int
    response: CheckinResponse
    description: Optional[str] = None
    ai_prompt: Optional[str] = None
    ai_response: Optional[str] = None
    voice_input: Optional[bool] = None
    voice_output: Optional[bool] = None
    mood: Optional[int] = Field(default=None, ge=1, le=10)
    focus: Optional[int] = Field(default=None, ge=1, le=10)


class CheckinRead(BaseModel):
    """Schema for reading a check-in from API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    session_id: int
    user_id: int
    timestamp: datetime
    response: CheckinResponse
    description: Optional[str] = None
    ai_prompt: Optional[str] = None
    ai_response: Optional[str] = None
    voice_input: Optional[bool] = None
    voice_output: Optional[bool] = None
    mood: Optional[int] = None
    focus: Optional[int] = None


class CheckinReply(BaseModel):
    """Schema for a free-text answer to a check-in prompt."""

    session_id: int
    text: str = Field(min_length=1, description="What the user said or typed")
    prompt: Optional[str] = Field(default=None, description="The question that was asked")
    voice: bool = Field(default=False, description="Whether the answer was spoken")


class CheckinReplyResult(BaseModel):
    """Stored check-in together with the coach's reply."""

    checkin: CheckinRead
    ai_response: str
    ai_success: bool
