"""
Prayer Tracking Endpoints.

Prayer preferences, daily check-ins, statistics, the next-prayer countdown
and prayer-time lookups.
"""

from typing import List, Optional

from fastapi import APIRouter, Query, status

from accountability_ai.core.models.io import (
    NextPrayer,
    PrayerCheckinCreate,
    PrayerCheckinRead,
    PrayerPreferences,
    PrayerPreferencesUpdate,
    PrayerStats,
    PrayerTimingsRequest,
    PrayerTimingsResult,
    TodayPrayerStatus,
)
from accountability_ai.server.services.deps import CurrentUserDep, PrayerServiceDep

router = APIRouter()


@router.get(
    "/preferences",
    response_model=PrayerPreferences,
    summary="Get Prayer Preferences",
    description="Prayer settings with defaults: reminders on, five default prayer times, UTC.",
)
async def get_prayer_preferences(user: CurrentUserDep, service: PrayerServiceDep) -> PrayerPreferences:
    return await service.get_prayer_preferences(user)


@router.put(
    "/preferences",
    response_model=PrayerPreferences,
    summary="Update Prayer Preferences",
    description="Save prayer settings. Prayer times reset to the defaults when omitted.",
)
async def update_prayer_preferences(
    update: PrayerPreferencesUpdate, user: CurrentUserDep, service: PrayerServiceDep
) -> PrayerPreferences:
    return await service.update_prayer_preferences(user, update)


@router.post(
    "/checkins",
    response_model=PrayerCheckinRead,
    status_code=status.HTTP_201_CREATED,
    summary="Record Prayer",
    description="Record today's outcome for a prayer, replacing any earlier record for the same prayer today.",
)
async def record_prayer_checkin(
    data: PrayerCheckinCreate, user: CurrentUserDep, service: PrayerServiceDep
) -> PrayerCheckinRead:
    checkin = await service.record_prayer_checkin(user, data)
    return PrayerCheckinRead.model_validate(checkin)


@router.get(
    "/today",
    response_model=List[TodayPrayerStatus],
    summary="Today's Prayer Status",
    description="Every configured prayer with today's status; unrecorded prayers are pending.",
)
async def get_todays_prayer_status(user: CurrentUserDep, service: PrayerServiceDep) -> List[TodayPrayerStatus]:
    return await service.get_todays_prayer_status(user)


@router.get(
    "/stats",
    response_model=PrayerStats,
    summary="Prayer Statistics",
    description="Completion counts and rate over the last N days, and the current streak.",
)
async def get_prayer_stats(
    user: CurrentUserDep, service: PrayerServiceDep, days: int = Query(default=7, ge=1, le=365)
) -> PrayerStats:
    return await service.get_prayer_stats(user, days=days)


@router.get(
    "/next",
    response_model=Optional[NextPrayer],
    summary="Next Prayer",
    description="The next enabled prayer in the user's timezone, or null when none is enabled.",
)
async def next_prayer(user: CurrentUserDep, service: PrayerServiceDep) -> Optional[NextPrayer]:
    return await service.next_prayer(user)


@router.post(
    "/timings",
    response_model=PrayerTimingsResult,
    summary="Fetch Prayer Timings",
    description="Look up the five daily prayer times for a coordinate pair.",
)
async def fetch_prayer_timings(
    request: PrayerTimingsRequest, user: CurrentUserDep, service: PrayerServiceDep
) -> PrayerTimingsResult:
    return await service.fetch_prayer_timings(request)


@router.post(
    "/sync",
    response_model=PrayerTimingsResult,
    summary="Sync Prayer Times",
    description="Fetch timings for the user's saved location and store them as the user's prayer times.",
)
async def sync_prayer_times(user: CurrentUserDep, service: PrayerServiceDep) -> PrayerTimingsResult:
    return await service.sync_prayer_times(user)
