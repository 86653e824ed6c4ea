"""
Prayer tracking I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from accountability_ai.core.models.domain.enums import PrayerDayStatus, PrayerStatus

from .users import HHMM_PATTERN, PrayerTimeEntry


class PrayerPreferences(BaseModel):
    """A user's prayer settings with defaults filled in."""

    enabled: bool
    prayer_times: List[PrayerTimeEntry]
    timezone: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    method: Optional[int] = None


class PrayerPreferencesUpdate(BaseModel):
    """Schema for updating prayer settings; omitted times reset to the defaults."""

    enabled: Optional[bool] = None
    prayer_times: Optional[List[PrayerTimeEntry]] = None
    timezone: Optional[str] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    method: Optional[int] = None


class PrayerCheckinCreate(BaseModel):
    """Schema for recording today's outcome for one prayer."""

    prayer_name: str = Field(min_length=1)
    scheduled_time: str = Field(pattern=HHMM_PATTERN)
    status: PrayerStatus
    notes: Optional[str] = None


class PrayerCheckinRead(BaseModel):
    """Schema for reading a prayer check-in."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    prayer_name: str
    scheduled_time: str
    actual_time: Optional[datetime] = None
    status: PrayerStatus
    date: str
    notes: Optional[str] = None


class TodayPrayerStatus(BaseModel):
    """Today's state of one configured prayer."""

    name: str
    time: str
    enabled: bool
    status: PrayerDayStatus
    actual_time: Optional[datetime] = None
    notes: Optional[str] = None


class PrayerStats(BaseModel):
    """Completion statistics over a trailing window of days."""

    total_prayers: int
    completed_prayers: int
    missed_prayers: int
    completion_rate: int
    streak: int


class NextPrayer(BaseModel):
    """The upcoming prayer in the user's timezone."""

    name: str
    time: str
    scheduled_at: datetime
    seconds_remaining: int


class PrayerTimingsRequest(BaseModel):
    """Coordinates for a prayer-time lookup."""

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    date: Optional[str] = Field(default=None, description="Date as YYYY-MM-DD; today when omitted")
    method: Optional[int] = None


class PrayerTimingsResult(BaseModel):
    """Result of a prayer-time lookup."""

    success: bool
    timings: Dict[str, str] = Field(default_factory=dict)
    date: Optional[str] = None
    error: Optional[str] = None
