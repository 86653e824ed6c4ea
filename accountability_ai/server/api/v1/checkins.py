"""
Check-in Endpoints.

Record check-ins inside a focus session, list them, and submit free-text
answers that are classified and answered by the coach.
"""

from typing import List

from fastapi import APIRouter, status
from pydantic import BaseModel

from accountability_ai.core.models.domain import CheckinResponse
from accountability_ai.core.models.io import CheckinCreate, CheckinRead, CheckinReply, CheckinReplyResult
from accountability_ai.server.services.deps import CheckinServiceDep, CurrentUserDep
from accountability_ai.services import classify_checkin_response

router = APIRouter()


class ClassifyRequest(BaseModel):
    text: str


class ClassifyResult(BaseModel):
    response: CheckinResponse


@router.post(
    "",
    response_model=CheckinRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Check-in",
    description="Record a check-in for one of the user's sessions.",
    responses={404: {"description": "Session not found or owned by another user"}},
)
async def create_checkin(data: CheckinCreate, user: CurrentUserDep, service: CheckinServiceDep) -> CheckinRead:
    checkin = await service.create_checkin(user, data)
    return CheckinRead.model_validate(checkin)


@router.get(
    "/session/{session_id}",
    response_model=List[CheckinRead],
    summary="List Session Check-ins",
    description="Check-ins of a session, newest first. Sessions of other users yield an empty list.",
)
async def get_session_checkins(
    session_id: int, user: CurrentUserDep, service: CheckinServiceDep
) -> List[CheckinRead]:
    checkins = await service.get_session_checkins(user, session_id)
    return [CheckinRead.model_validate(c) for c in checkins]


@router.post(
    "/respond",
    response_model=CheckinReplyResult,
    status_code=status.HTTP_201_CREATED,
    summary="Answer a Check-in",
    description="Classify a free-text answer, ask the coach for a reply and store both as a check-in.",
    responses={404: {"description": "Session not found or owned by another user"}},
)
async def respond_to_checkin(
    reply: CheckinReply, user: CurrentUserDep, service: CheckinServiceDep
) -> CheckinReplyResult:
    return await service.respond_to_checkin(user, reply)


@router.post(
    "/classify",
    response_model=ClassifyResult,
    summary="Classify Answer",
    description="Map a free-text answer onto a check-in response by keyword.",
)
async def classify(request: ClassifyRequest) -> ClassifyResult:
    return ClassifyResult(response=classify_checkin_response(request.text))
