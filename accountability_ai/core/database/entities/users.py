"""
User entity models.

A user row carries the account identity together with every preference the
assistant reads: check-in cadence, voice settings, prayer schedule and the
optional Microsoft Graph credentials saved from the settings screen.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON
from sqlmodel import Field

from accountability_ai.core.models.domain.enums import UserRole

from ..base import Base, utc_now

DEFAULT_CHECKIN_FREQUENCY = 25


class UserBase(Base):
    """Base fields for user entity."""

    name: Optional[str] = Field(default=None, description="Display name")
    email: Optional[str] = Field(default=None, index=True, unique=True, description="Email address")
    role: UserRole = Field(default=UserRole.user, description="Account role")

    # Check-in and voice preferences
    checkin_frequency: Optional[int] = Field(default=None, description="Minutes between check-ins")
    voice_enabled: Optional[bool] = Field(default=None, description="Enable speech input/output")
    preferred_voice: Optional[str] = Field(default=None, description="Voice id for speech synthesis")
    speech_rate: Optional[float] = Field(default=None)
    speech_pitch: Optional[float] = Field(default=None)
    speech_volume: Optional[float] = Field(default=None)
    timezone: Optional[str] = Field(default=None, description="IANA timezone name")

    # Prayer preferences
    prayer_reminders_enabled: Optional[bool] = Field(default=None)
    prayer_times: Optional[List[Dict[str, Any]]] = Field(
        default=None, sa_type=JSON, description="List of {name, time, enabled} entries"
    )
    latitude: Optional[float] = Field(default=None)
    longitude: Optional[float] = Field(default=None)
    prayer_calculation_method: Optional[int] = Field(default=None)

    # Microsoft To-Do credentials
    microsoft_client_id: Optional[str] = Field(default=None)
    microsoft_client_secret: Optional[str] = Field(default=None)
    microsoft_tenant_id: Optional[str] = Field(default=None)


class User(UserBase, table=True):
    """Entity for an application user.

    Table: users
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    @property
    def effective_checkin_frequency(self) -> int:
        return self.checkin_frequency or DEFAULT_CHECKIN_FREQUENCY

    @property
    def microsoft_configured(self) -> bool:
        return bool(self.microsoft_client_id and self.microsoft_client_secret and self.microsoft_tenant_id)

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email})"
