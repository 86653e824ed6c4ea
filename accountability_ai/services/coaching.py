"""
AI coaching service.

Builds the accountability system prompt, routes the request through the
configured LLM providers and logs successful exchanges. A failed request
never raises: the caller gets a fixed encouragement message instead.
"""

from __future__ import annotations

import random
import time
from typing import List, Optional

from accountability_ai.core.database.entities import AIInteraction, User
from accountability_ai.core.database.repositories import SqlRepoBundle
from accountability_ai.core.errors import NotFoundError
from accountability_ai.core.logging_config import get_logger
from accountability_ai.core.models.io import (
    AccountabilityPrompt,
    AccountabilityPromptRequest,
    ChatRequest,
    ChatResult,
)
from accountability_ai.integrations.errors import IntegrationError
from accountability_ai.integrations.llm import LLMRouter

logger = get_logger(__name__)

DEFAULT_CONTEXT = "General productivity check-in"

SYSTEM_PROMPT_TEMPLATE = """You are an AI accountability assistant helping users stay focused and productive. Your role is to:
1. Provide gentle but firm nudges when users are procrastinating
2. Offer specific, actionable advice to get back on track
3. Celebrate progress and maintain motivation
4. Ask follow-up questions to understand the user's current state
5. Keep responses concise and encouraging (2-3 sentences max)

Context: {context}

Respond in a supportive, understanding tone while being direct about accountability."""

FALLBACK_RESPONSE = (
    "I'm having trouble connecting right now, but remember: small progress is still progress. "
    "What's one tiny step you can take right now?"
)

CHECKIN_PROMPTS = (
    "How are you progressing on your current task?",
    "What's your current focus level from 1-10?",
    "Are you staying on track with your goals?",
    "What's been your biggest challenge in the last few minutes?",
    "How can I help you maintain focus right now?",
)

DEFAULT_CHECKIN_PROMPT = "How are you doing with your current task?"


def build_system_prompt(context: Optional[str] = None) -> str:
    return SYSTEM_PROMPT_TEMPLATE.format(context=context or DEFAULT_CONTEXT)


class CoachingService:
    """Accountability chat on top of ``LLMRouter``."""

    def __init__(self, repos: SqlRepoBundle, router: LLMRouter, rng: Optional[random.Random] = None) -> None:
        self.repos = repos
        self.router = router
        self.rng = rng or random.Random()

    async def chat(self, user: User, request: ChatRequest) -> ChatResult:
        """Ask the coach and log the exchange.

        Args:
            user: Acting user
            request: Prompt plus optional session/check-in links, context and provider

        Returns:
            ChatResult; ``success`` is False and ``response`` holds the fallback
            message when no provider could answer
        """
        started = time.perf_counter()
        requested = str(request.provider) if request.provider else None
        try:
            result = await self.router.complete(build_system_prompt(request.context), request.prompt, requested=requested)
        except IntegrationError as e:
            elapsed = int((time.perf_counter() - started) * 1000)
            logger.error(f"AI chat failed for user {user.id}: {e}")
            return ChatResult(response=FALLBACK_RESPONSE, response_time_ms=elapsed, success=False, error=str(e))

        elapsed = int((time.perf_counter() - started) * 1000)
        await self.repos.ai_interactions.create(
            AIInteraction(
                user_id=user.id,
                session_id=request.session_id,
                checkin_id=request.checkin_id,
                prompt=request.prompt,
                response=result.text,
                provider=result.provider,
                model=result.model,
                response_time_ms=elapsed,
                tokens=result.tokens,
            )
        )
        return ChatResult(
            response=result.text,
            response_time_ms=elapsed,
            success=True,
            provider=result.provider,
            model=result.model,
        )

    async def generate_accountability_prompt(
        self, user: User, request: AccountabilityPromptRequest
    ) -> AccountabilityPrompt:
        """Pick a check-in question and describe the session it is about.

        Returns:
            The question plus a context block for the coach; on a missing or
            foreign session a generic question with empty context
        """
        session = await self.repos.sessions.get_by_id(request.session_id)
        if session is None or session.user_id != user.id:
            error = NotFoundError("Session", request.session_id)
            logger.warning(f"Prompt generation failed: {error}")
            return AccountabilityPrompt(prompt=DEFAULT_CHECKIN_PROMPT, context="", success=False, error=str(error))

        lines = [f'Session: "{session.title}"']
        if session.tasks:
            lines.append(f"Tasks: {', '.join(session.tasks)}")
        if request.last_checkin_response:
            lines.append(f"Last check-in: {request.last_checkin_response}")
        lines.append(f"Time elapsed: {request.time_elapsed} minutes")
        return AccountabilityPrompt(prompt=self.rng.choice(CHECKIN_PROMPTS), context="\n".join(lines), success=True)

    async def get_user_interactions(self, user: User, limit: int = 50) -> List[AIInteraction]:
        return await self.repos.ai_interactions.list_for_user(user.id, limit=limit)
