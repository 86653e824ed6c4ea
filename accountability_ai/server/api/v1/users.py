"""
User Endpoints.

Read the acting user's profile and patch their preferences.
"""

from fastapi import APIRouter

from accountability_ai.core.logging_config import get_logger
from accountability_ai.core.models.io import CheckinPreferencesUpdate, UserPreferencesUpdate, UserRead
from accountability_ai.server.services.deps import CurrentUserDep, UserServiceDep

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "/me",
    response_model=UserRead,
    summary="Get Current User",
    description="Return the acting user. Without an X-User-Id header the default single-user account is used.",
    responses={401: {"description": "Unknown user id"}},
)
async def get_me(user: CurrentUserDep) -> UserRead:
    return UserRead.model_validate(user)


@router.patch(
    "/me/preferences",
    response_model=UserRead,
    summary="Update User Preferences",
    description="Partially update any preference field. Only fields present in the body change.",
)
async def update_user_preferences(
    update: UserPreferencesUpdate, user: CurrentUserDep, service: UserServiceDep
) -> UserRead:
    """
    Update user preferences.

    - **checkin_frequency**: minutes between check-ins.
    - **timezone**: IANA timezone name used for prayer dates.
    - **microsoft_client_id / secret / tenant_id**: To-Do credentials overriding server configuration.
    """
    user = await service.update_user_preferences(user, update)
    return UserRead.model_validate(user)


@router.patch(
    "/me/checkin-preferences",
    response_model=UserRead,
    summary="Update Check-in Preferences",
    description="Update check-in frequency, voice toggle, preferred voice and timezone.",
)
async def update_checkin_preferences(
    update: CheckinPreferencesUpdate, user: CurrentUserDep, service: UserServiceDep
) -> UserRead:
    user = await service.update_checkin_preferences(user, update)
    return UserRead.model_validate(user)
