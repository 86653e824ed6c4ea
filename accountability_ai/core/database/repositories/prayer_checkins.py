"""
Prayer check-in repository.

Dates are stored as ``YYYY-MM-DD`` strings, so range queries compare
lexicographically.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.prayer_checkins import PrayerCheckin
from .base import AsyncBaseRepository


class PrayerCheckinRepository(AsyncBaseRepository[PrayerCheckin]):
    """Repository for prayer check-in data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, PrayerCheckin)

    async def find(self, user_id: int, prayer_name: str, date: str) -> Optional[PrayerCheckin]:
        """The record for one prayer on one day."""
        stmt = select(PrayerCheckin).where(
            PrayerCheckin.user_id == user_id,
            PrayerCheckin.date == date,
            PrayerCheckin.prayer_name == prayer_name,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_for_date(self, user_id: int, date: str) -> List[PrayerCheckin]:
        """All of a user's records for one day."""
        stmt = select(PrayerCheckin).where(PrayerCheckin.user_id == user_id, PrayerCheckin.date == date)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_since(self, user_id: int, start_date: str) -> List[PrayerCheckin]:
        """All of a user's records dated on or after ``start_date``."""
        stmt = select(PrayerCheckin).where(PrayerCheckin.user_id == user_id, PrayerCheckin.date >= start_date)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def upsert(self, checkin: PrayerCheckin) -> PrayerCheckin:
        """Insert ``checkin``, or overwrite the outcome of the existing record for the same prayer and day.

        Only status, actual time and notes are overwritten. Losing an insert
        race on the unique key falls back to overwriting the winner's row.
        """
        key = (checkin.user_id, checkin.prayer_name, checkin.date)
        outcome = {"status": checkin.status, "actual_time": checkin.actual_time, "notes": checkin.notes}

        existing = await self.find(*key)
        if existing is None:
            try:
                return await self.create(checkin)
            except IntegrityError:
                await self.session.rollback()
                existing = await self.find(*key)
                if existing is None:
                    raise

        for field, value in outcome.items():
            setattr(existing, field, value)
        return await self.update(existing)
