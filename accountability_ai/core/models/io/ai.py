"""
AI coaching I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from accountability_ai.core.models.domain.enums import LLMProviderName


class ChatRequest(BaseModel):
    """Schema for sending a message to the coach."""

    prompt: str = Field(min_length=1)
    session_id: Optional[int] = None
    checkin_id: Optional[int] = None
    context: Optional[str] = Field(default=None, description="Situation summary added to the system prompt")
    provider: Optional[LLMProviderName] = Field(default=None, description="Provider to try first")


class ChatResult(BaseModel):
    """Outcome of a coaching request."""

    response: str
    response_time_ms: int
    success: bool
    provider: Optional[str] = None
    model: Optional[str] = None
    error: Optional[str] = None


class AccountabilityPromptRequest(BaseModel):
    """Schema for generating the next check-in question."""

    session_id: int
    last_checkin_response: Optional[str] = None
    time_elapsed: int = Field(ge=0, description="Minutes since the session started")


class AccountabilityPrompt(BaseModel):
    """A generated check-in question and the context it was built from."""

    prompt: str
    context: str
    success: bool
    error: Optional[str] = None


class AIInteractionRead(BaseModel):
    """Schema for reading a logged coaching exchange."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    session_id: Optional[int] = None
    checkin_id: Optional[int] = None
    prompt: str
    response: str
    provider: Optional[str] = None
    model: Optional[str] = None
    timestamp: datetime
    response_time_ms: Optional[int] = None
    tokens: Optional[int] = None
