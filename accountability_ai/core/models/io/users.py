"""
User I/O models for API requests and responses.

Preference fields are all optional on update so that a patch only touches
what the client sends.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from accountability_ai.core.models.domain.enums import UserRole


HHMM_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class PrayerTimeEntry(BaseModel):
    """One configured daily prayer."""

    name: str = Field(description="Prayer name, e.g. Fajr")
    time: str = Field(pattern=HHMM_PATTERN, description="Local time as HH:MM")
    enabled: bool = Field(default=True)


class UserRead(BaseModel):
    """Schema for reading a user from API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    role: UserRole
    checkin_frequency: Optional[int] = None
    voice_enabled: Optional[bool] = None
    preferred_voice: Optional[str] = None
    speech_rate: Optional[float] = None
    speech_pitch: Optional[float] = None
    speech_volume: Optional[float] = None
    timezone: Optional[str] = None
    prayer_reminders_enabled: Optional[bool] = None
    prayer_times: Optional[List[PrayerTimeEntry]] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    prayer_calculation_method: Optional[int] = None
    microsoft_client_id: Optional[str] = None
    microsoft_tenant_id: Optional[str] = None
    microsoft_configured: bool = Field(default=False, description="Whether To-Do credentials are saved")
    created_at: datetime
    updated_at: datetime


class UserPreferencesUpdate(BaseModel):
    """Schema for a partial update of any user preference."""

    name: Optional[str] = None
    checkin_frequency: Optional[int] = Field(default=None, ge=1, description="Minutes between check-ins")
    voice_enabled: Optional[bool] = None
    preferred_voice: Optional[str] = None
    speech_rate: Optional[float] = Field(default=None, gt=0)
    speech_pitch: Optional[float] = Field(default=None, gt=0)
    speech_volume: Optional[float] = Field(default=None, ge=0, le=1)
    timezone: Optional[str] = None
    prayer_reminders_enabled: Optional[bool] = None
    prayer_times: Optional[List[PrayerTimeEntry]] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    prayer_calculation_method: Optional[int] = None
    microsoft_client_id: Optional[str] = None
    microsoft_client_secret: Optional[str] = None
    microsoft_tenant_id: Optional[str] = None


class CheckinPreferencesUpdate(BaseModel):
    """Schema for updating check-in preferences."""

    checkin_frequency: Optional[int] = Field(default=None, ge=1)
    voice_enabled: Optional[bool] = None
    preferred_voice: Optional[str] = None
    timezone: Optional[str] = None
