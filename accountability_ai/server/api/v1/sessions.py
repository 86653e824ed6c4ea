"""
Focus Session Endpoints.

Start, inspect and finish focus sessions, plus aggregate statistics and the
check-in reminder.
"""

from typing import List, Optional

from fastapi import APIRouter, Query, status

from accountability_ai.core.logging_config import get_logger
from accountability_ai.core.models.io import (
    CheckinDue,
    FocusSessionCreate,
    FocusSessionRead,
    FocusSessionStatusUpdate,
    SessionStats,
)
from accountability_ai.server.services.deps import CurrentUserDep, SessionServiceDep

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=FocusSessionRead,
    status_code=status.HTTP_201_CREATED,
    summary="Start Focus Session",
    description="Start a new focus session. Any session still active for the user is marked abandoned first.",
    response_description="The newly started session.",
)
async def create_session(
    data: FocusSessionCreate, user: CurrentUserDep, service: SessionServiceDep
) -> FocusSessionRead:
    """
    Start a focus session.

    - **title**: What the session is about.
    - **tasks**: Specific tasks to get done.
    - **planned_duration**: Planned length in minutes.
    """
    session = await service.create_session(user, data)
    return FocusSessionRead.model_validate(session)


@router.get(
    "",
    response_model=List[FocusSessionRead],
    summary="List Sessions",
    description="The user's sessions, newest first.",
)
async def get_user_sessions(
    user: CurrentUserDep, service: SessionServiceDep, limit: int = Query(default=20, ge=1, le=200)
) -> List[FocusSessionRead]:
    sessions = await service.get_user_sessions(user, limit=limit)
    return [FocusSessionRead.model_validate(s) for s in sessions]


@router.get(
    "/current",
    response_model=Optional[FocusSessionRead],
    summary="Get Current Session",
    description="The user's active session, or null when none is running.",
)
async def get_current_session(user: CurrentUserDep, service: SessionServiceDep) -> Optional[FocusSessionRead]:
    session = await service.get_current_session(user)
    return FocusSessionRead.model_validate(session) if session else None


@router.get(
    "/stats",
    response_model=SessionStats,
    summary="Get Session Statistics",
    description="Totals, completed minutes, average productivity and completion rate.",
)
async def get_session_stats(user: CurrentUserDep, service: SessionServiceDep) -> SessionStats:
    return await service.get_session_stats(user)


@router.get(
    "/checkin-due",
    response_model=CheckinDue,
    summary="Check-in Reminder",
    description="Whether the active session has gone a full check-in interval without a check-in.",
)
async def checkin_due(user: CurrentUserDep, service: SessionServiceDep) -> CheckinDue:
    return await service.checkin_due(user)


@router.patch(
    "/{session_id}/status",
    response_model=FocusSessionRead,
    summary="Update Session Status",
    description="Pause, resume, complete or abandon a session. Completing or abandoning stamps end time and duration.",
    responses={404: {"description": "Session not found or owned by another user"}},
)
async def update_session_status(
    session_id: int, update: FocusSessionStatusUpdate, user: CurrentUserDep, service: SessionServiceDep
) -> FocusSessionRead:
    session = await service.update_session_status(user, session_id, update)
    logger.info(f"Session {session_id} moved to {session.status.value}")
    return FocusSessionRead.model_validate(session)
