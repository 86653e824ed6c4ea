"""
Prayer check-in entity.

One row per (user, prayer, calendar date); recording the same prayer again on
the same day updates the row.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from accountability_ai.core.models.domain.enums import PrayerStatus

from ..base import Base


class PrayerCheckin(Base, table=True):
    """Entity for a per-day, per-prayer completion record.

    Table: prayer_checkins
    """

    __tablename__ = "prayer_checkins"
    __table_args__ = (UniqueConstraint("user_id", "prayer_name", "date", name="uq_prayer_checkin_user_prayer_date"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    prayer_name: str = Field(max_length=32)
    scheduled_time: str = Field(max_length=5, description="HH:MM")
    actual_time: Optional[datetime] = Field(default=None)
    status: PrayerStatus
    date: str = Field(max_length=10, index=True, description="YYYY-MM-DD in the user's timezone")
    notes: Optional[str] = Field(default=None)

    def __repr__(self) -> str:
        return f"PrayerCheckin(user_id={self.user_id}, prayer={self.prayer_name}, date={self.date})"
