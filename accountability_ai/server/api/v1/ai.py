"""
AI Coaching Endpoints.

Chat with the accountability coach, generate check-in questions and read the
interaction log.
"""

from typing import List

from fastapi import APIRouter, Query

from accountability_ai.core.models.io import (
    AccountabilityPrompt,
    AccountabilityPromptRequest,
    AIInteractionRead,
    ChatRequest,
    ChatResult,
)
from accountability_ai.server.services.deps import CoachingServiceDep, CurrentUserDep

router = APIRouter()


@router.post(
    "/chat",
    response_model=ChatResult,
    summary="Chat With Coach",
    description=(
        "Send a message to the accountability coach. Providers are tried in configured order; "
        "when none answers, a fixed encouragement is returned with success=false."
    ),
)
async def chat(request: ChatRequest, user: CurrentUserDep, service: CoachingServiceDep) -> ChatResult:
    """
    Chat with the coach.

    - **prompt**: The user's message.
    - **context**: Optional situation summary for the system prompt.
    - **provider**: Optional provider to try first.
    """
    return await service.chat(user, request)


@router.post(
    "/prompt",
    response_model=AccountabilityPrompt,
    summary="Generate Check-in Question",
    description="Pick a check-in question and build the session context it refers to.",
)
async def generate_accountability_prompt(
    request: AccountabilityPromptRequest, user: CurrentUserDep, service: CoachingServiceDep
) -> AccountabilityPrompt:
    return await service.generate_accountability_prompt(user, request)


@router.get(
    "/interactions",
    response_model=List[AIInteractionRead],
    summary="List Coaching Interactions",
    description="The user's logged coaching exchanges, newest first.",
)
async def get_user_interactions(
    user: CurrentUserDep, service: CoachingServiceDep, limit: int = Query(default=50, ge=1, le=500)
) -> List[AIInteractionRead]:
    interactions = await service.get_user_interactions(user, limit=limit)
    return [AIInteractionRead.model_validate(i) for i in interactions]
