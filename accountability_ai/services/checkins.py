"""
Check-in service.

Records check-ins inside a focus session and turns a free-text answer into a
classified check-in with the coach's reply attached.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, List

from accountability_ai.core.database import utc_now
from accountability_ai.core.database.entities import Checkin, FocusSession, User
from accountability_ai.core.database.repositories import SqlRepoBundle
from accountability_ai.core.errors import NotFoundError
from accountability_ai.core.logging_config import get_logger
from accountability_ai.core.models.domain import CheckinResponse
from accountability_ai.core.models.io import ChatRequest, CheckinCreate, CheckinRead, CheckinReply, CheckinReplyResult

from .coaching import CoachingService

logger = get_logger(__name__)

# Checked in order; the first group with a matching substring wins.
_KEYWORDS = (
    (("done", "finished", "completed"), CheckinResponse.on_task),
    (("distracted", "unfocused"), CheckinResponse.distracted),
    (("procrastinat", "avoiding"), CheckinResponse.procrastinating),
    (("break", "rest"), CheckinResponse.on_break),
)


def classify_checkin_response(text: str) -> CheckinResponse:
    """Map a free-text answer onto a check-in response by keyword.

    >>> classify_checkin_response("I keep avoiding the report")
    <CheckinResponse.procrastinating: 'procrastinating'>
    """
    lowered = text.lower()
    for keywords, response in _KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return response
    return CheckinResponse.on_task


def session_context(session: FocusSession) -> str:
    """One-line description of a session used as coaching context."""
    return f"Session: {session.title}, Tasks: {', '.join(session.tasks)}"


class CheckinService:
    """Creation and listing of check-ins."""

    def __init__(
        self, repos: SqlRepoBundle, coach: CoachingService, clock: Callable[[], datetime] = utc_now
    ) -> None:
        self.repos = repos
        self.coach = coach
        self.clock = clock

    async def _owned_session(self, user: User, session_id: int) -> FocusSession:
        session = await self.repos.sessions.get_by_id(session_id)
        if session is None or session.user_id != user.id:
            raise NotFoundError("Session", session_id)
        return session

    async def create_checkin(self, user: User, data: CheckinCreate) -> Checkin:
        """Record a check-in in one of the user's sessions.

        Raises:
            NotFoundError: If the session is missing or owned by someone else
        """
        await self._owned_session(user, data.session_id)
        checkin = Checkin(user_id=user.id, timestamp=self.clock(), **data.model_dump())
        return await self.repos.checkins.create(checkin)

    async def get_session_checkins(self, user: User, session_id: int) -> List[Checkin]:
        """Check-ins of a session, newest first; empty for sessions the user does not own."""
        session = await self.repos.sessions.get_by_id(session_id)
        if session is None or session.user_id != user.id:
            return []
        return await self.repos.checkins.list_for_session(session_id)

    async def respond_to_checkin(self, user: User, reply: CheckinReply) -> CheckinReplyResult:
        """Classify a free-text answer, get the coach's reply and store both.

        The coach failing is not an error here: its fallback message is stored
        as the reply and ``ai_success`` is False.

        Raises:
            NotFoundError: If the session is missing or owned by someone else
        """
        session = await self._owned_session(user, reply.session_id)
        response = classify_checkin_response(reply.text)
        checkin = await self.repos.checkins.create(
            Checkin(
                session_id=session.id,
                user_id=user.id,
                timestamp=self.clock(),
                response=response,
                description=reply.text,
                ai_prompt=reply.prompt,
                voice_input=reply.voice,
                voice_output=reply.voice,
            )
        )

        chat = await self.coach.chat(
            user,
            ChatRequest(
                prompt=reply.text,
                session_id=session.id,
                checkin_id=checkin.id,
                context=session_context(session),
            ),
        )
        checkin.ai_response = chat.response
        checkin = await self.repos.checkins.update(checkin)
        logger.info(f"Check-in {checkin.id} recorded as {response.value} for session {session.id}")
        return CheckinReplyResult(
            checkin=CheckinRead.model_validate(checkin), ai_response=chat.response, ai_success=chat.success
        )
