"""
Prayer tracking service.

Dates are calendar days in the user's timezone; timestamps stay naive UTC
like every other column.
"""

from __future__ import annotations

from collections import Counter
from datetime import date, datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional

from accountability_ai.core.database import utc_now
from accountability_ai.core.database.entities import PrayerCheckin, User
from accountability_ai.core.database.repositories import SqlRepoBundle
from accountability_ai.core.logging_config import get_logger
from accountability_ai.core.models.domain import PrayerDayStatus, PrayerStatus
from accountability_ai.core.models.io import (
    NextPrayer,
    PrayerCheckinCreate,
    PrayerPreferences,
    PrayerPreferencesUpdate,
    PrayerStats,
    PrayerTimeEntry,
    PrayerTimingsRequest,
    PrayerTimingsResult,
    TodayPrayerStatus,
)
from accountability_ai.integrations.errors import IntegrationError
from accountability_ai.integrations.prayer_times import PrayerTimesClient

from .common import DEFAULT_TIMEZONE, percent, resolve_zone, to_local

logger = get_logger(__name__)

DEFAULT_PRAYER_TIMES: List[Dict[str, Any]] = [
    {"name": "Fajr", "time": "05:30", "enabled": True},
    {"name": "Dhuhr", "time": "12:30", "enabled": True},
    {"name": "Asr", "time": "15:30", "enabled": True},
    {"name": "Maghrib", "time": "18:00", "enabled": True},
    {"name": "Isha", "time": "19:30", "enabled": True},
]

PRAYERS_PER_DAY = 5
STREAK_MIN_COMPLETED = 3
STREAK_MAX_DAYS = 30


def prayer_schedule(user: User) -> List[PrayerTimeEntry]:
    """The user's configured prayers, or the defaults."""
    return [PrayerTimeEntry.model_validate(p) for p in (user.prayer_times or DEFAULT_PRAYER_TIMES)]


def calculate_streak(checkins: List[PrayerCheckin], today: date, max_days: int = STREAK_MAX_DAYS) -> int:
    """Consecutive days, ending today, with at least three completed prayers."""
    completed_per_day = Counter(c.date for c in checkins if c.status == PrayerStatus.completed)
    streak = 0
    for offset in range(max_days):
        day = (today - timedelta(days=offset)).isoformat()
        if completed_per_day[day] < STREAK_MIN_COMPLETED:
            break
        streak += 1
    return streak


def _parse_hhmm(value: str) -> tuple[int, int]:
    hour, minute = value.split(":", 1)
    return int(hour), int(minute)


class PrayerService:
    """Prayer preferences, daily check-ins and statistics."""

    def __init__(
        self,
        repos: SqlRepoBundle,
        client: PrayerTimesClient,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.repos = repos
        self.client = client
        self.clock = clock

    def _local_now(self, user: User) -> datetime:
        return to_local(self.clock(), resolve_zone(user.timezone))

    async def get_prayer_preferences(self, user: User) -> PrayerPreferences:
        return PrayerPreferences(
            enabled=True if user.prayer_reminders_enabled is None else user.prayer_reminders_enabled,
            prayer_times=prayer_schedule(user),
            timezone=user.timezone or DEFAULT_TIMEZONE,
            latitude=user.latitude,
            longitude=user.longitude,
            method=user.prayer_calculation_method,
        )

    async def update_prayer_preferences(self, user: User, update: PrayerPreferencesUpdate) -> PrayerPreferences:
        """Save prayer settings; prayer times reset to the defaults when not given."""
        changes: Dict[str, Any] = {
            "prayer_times": [p.model_dump() for p in update.prayer_times]
            if update.prayer_times is not None
            else [dict(p) for p in DEFAULT_PRAYER_TIMES],
        }
        if update.enabled is not None:
            changes["prayer_reminders_enabled"] = update.enabled
        if update.timezone is not None:
            changes["timezone"] = update.timezone
        if update.latitude is not None:
            changes["latitude"] = update.latitude
        if update.longitude is not None:
            changes["longitude"] = update.longitude
        if update.method is not None:
            changes["prayer_calculation_method"] = update.method
        user = await self.repos.users.patch(user, changes)
        return await self.get_prayer_preferences(user)

    async def record_prayer_checkin(self, user: User, data: PrayerCheckinCreate) -> PrayerCheckin:
        """Insert or overwrite today's record for one prayer."""
        today = self._local_now(user).date().isoformat()
        actual_time = self.clock() if data.status == PrayerStatus.completed else None
        return await self.repos.prayer_checkins.upsert(
            PrayerCheckin(
                user_id=user.id,
                prayer_name=data.prayer_name,
                scheduled_time=data.scheduled_time,
                actual_time=actual_time,
                status=data.status,
                date=today,
                notes=data.notes,
            )
        )

    async def get_todays_prayer_status(self, user: User) -> List[TodayPrayerStatus]:
        today = self._local_now(user).date().isoformat()
        by_name = {c.prayer_name: c for c in await self.repos.prayer_checkins.list_for_date(user.id, today)}
        statuses = []
        for prayer in prayer_schedule(user):
            checkin = by_name.get(prayer.name)
            statuses.append(
                TodayPrayerStatus(
                    name=prayer.name,
                    time=prayer.time,
                    enabled=prayer.enabled,
                    status=PrayerDayStatus(checkin.status.value) if checkin else PrayerDayStatus.pending,
                    actual_time=checkin.actual_time if checkin else None,
                    notes=checkin.notes if checkin else None,
                )
            )
        return statuses

    async def get_prayer_stats(self, user: User, days: int = 7) -> PrayerStats:
        """Completion statistics over the last ``days`` days, today included.

        The total assumes five prayers a day regardless of which are enabled.
        """
        today = self._local_now(user).date()
        window_start = (today - timedelta(days=max(days, 1) - 1)).isoformat()
        streak_start = (today - timedelta(days=STREAK_MAX_DAYS - 1)).isoformat()

        checkins = await self.repos.prayer_checkins.list_since(user.id, min(window_start, streak_start))
        in_window = [c for c in checkins if c.date >= window_start]
        total = days * PRAYERS_PER_DAY
        completed = sum(1 for c in in_window if c.status == PrayerStatus.completed)
        missed = sum(1 for c in in_window if c.status == PrayerStatus.missed)
        return PrayerStats(
            total_prayers=total,
            completed_prayers=completed,
            missed_prayers=missed,
            completion_rate=percent(completed, total),
            streak=calculate_streak(checkins, today),
        )

    async def next_prayer(self, user: User, now: Optional[datetime] = None) -> Optional[NextPrayer]:
        """The next enabled prayer after ``now`` (naive UTC), wrapping to tomorrow.

        Returns:
            NextPrayer, or None when no prayer is enabled
        """
        zone = resolve_zone(user.timezone)
        local_now = to_local(now or self.clock(), zone)
        enabled = sorted((p for p in prayer_schedule(user) if p.enabled), key=lambda p: _parse_hhmm(p.time))
        if not enabled:
            return None

        def at(prayer: PrayerTimeEntry, day: date) -> datetime:
            hour, minute = _parse_hhmm(prayer.time)
            return datetime(day.year, day.month, day.day, hour, minute, tzinfo=zone)

        today = local_now.date()
        for prayer in enabled:
            scheduled = at(prayer, today)
            if scheduled > local_now:
                break
        else:
            prayer = enabled[0]
            scheduled = at(prayer, today + timedelta(days=1))

        remaining = scheduled.astimezone(timezone.utc) - local_now.astimezone(timezone.utc)
        return NextPrayer(
            name=prayer.name,
            time=prayer.time,
            scheduled_at=scheduled,
            seconds_remaining=int(remaining.total_seconds()),
        )

    async def fetch_prayer_timings(self, request: PrayerTimingsRequest) -> PrayerTimingsResult:
        """Look up prayer timings for coordinates; failures come back as ``success: false``."""
        try:
            on = date.fromisoformat(request.date) if request.date else self.clock().date()
        except ValueError:
            return PrayerTimingsResult(success=False, error=f"Invalid date: {request.date}")
        try:
            timings = await self.client.get_timings(request.latitude, request.longitude, on, request.method)
        except IntegrationError as e:
            logger.error(f"Prayer timings lookup failed: {e}")
            return PrayerTimingsResult(success=False, date=on.isoformat(), error=str(e))
        return PrayerTimingsResult(success=True, timings=timings, date=on.isoformat())

    async def sync_prayer_times(self, user: User) -> PrayerTimingsResult:
        """Refresh the user's prayer times from the API using their saved coordinates.

        Each prayer keeps its enabled flag; prayers the API does not know are left as they were.
        """
        if user.latitude is None or user.longitude is None:
            return PrayerTimingsResult(success=False, error="Location not configured")

        result = await self.fetch_prayer_timings(
            PrayerTimingsRequest(
                latitude=user.latitude,
                longitude=user.longitude,
                date=self._local_now(user).date().isoformat(),
                method=user.prayer_calculation_method,
            )
        )
        if not result.success:
            return result

        updated = [
            {"name": p.name, "time": result.timings.get(p.name, p.time), "enabled": p.enabled}
            for p in prayer_schedule(user)
        ]
        await self.repos.users.patch(user, {"prayer_times": updated})
        logger.info(f"Synced prayer times for user {user.id}")
        return result
