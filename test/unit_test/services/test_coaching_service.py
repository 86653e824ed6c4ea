"""Unit tests for CoachingService."""

import random

import pytest

from accountability_ai.core.database.entities import FocusSession
from accountability_ai.core.models.domain import LLMProviderName
from accountability_ai.core.models.io import AccountabilityPromptRequest, ChatRequest
from accountability_ai.services.coaching import (
    CHECKIN_PROMPTS,
    DEFAULT_CHECKIN_PROMPT,
    DEFAULT_CONTEXT,
    FALLBACK_RESPONSE,
    build_system_prompt,
)

pytestmark = pytest.mark.asyncio


def test_build_system_prompt_embeds_context():
    prompt = build_system_prompt("Session: Thesis")
    assert "Context: Session: Thesis" in prompt
    assert prompt.startswith("You are an AI accountability assistant")
    assert f"Context: {DEFAULT_CONTEXT}" in build_system_prompt(None)


class TestChat:
    async def test_success_is_logged(self, coach, user, router, repos):
        result = await coach.chat(user, ChatRequest(prompt="I can't start", provider=LLMProviderName.anthropic))

        assert result.success is True
        assert result.response == "Great focus, keep going."
        assert result.provider == "openai"
        assert result.response_time_ms >= 0
        assert router.calls[0]["requested"] == "anthropic"
        assert router.calls[0]["prompt"] == "I can't start"

        logged = await repos.ai_interactions.list_for_user(user.id)
        assert len(logged) == 1
        assert logged[0].prompt == "I can't start"
        assert logged[0].tokens == 12

    async def test_failure_returns_fallback_and_logs_nothing(self, coach, user, router, repos):
        router.reply = None
        result = await coach.chat(user, ChatRequest(prompt="help"))

        assert result.success is False
        assert result.response == FALLBACK_RESPONSE
        assert result.error == "All AI providers failed"
        assert await repos.ai_interactions.list_for_user(user.id) == []

    async def test_interactions_are_limited(self, coach, user):
        for i in range(3):
            await coach.chat(user, ChatRequest(prompt=f"q{i}"))
        assert len(await coach.get_user_interactions(user, limit=2)) == 2


class TestAccountabilityPrompt:
    async def test_context_describes_session(self, coach, user, repos, now):
        session = await repos.sessions.create(
            FocusSession(user_id=user.id, title="Thesis", planned_duration=50, tasks=["draft", "edit"], start_time=now)
        )
        result = await coach.generate_accountability_prompt(
            user,
            AccountabilityPromptRequest(session_id=session.id, last_checkin_response="distracted", time_elapsed=20),
        )
        assert result.success is True
        assert result.prompt in CHECKIN_PROMPTS
        assert result.context == (
            'Session: "Thesis"\nTasks: draft, edit\nLast check-in: distracted\nTime elapsed: 20 minutes'
        )

    async def test_question_comes_from_rng(self, coach, user, repos, now):
        session = await repos.sessions.create(
            FocusSession(user_id=user.id, title="T", planned_duration=25, start_time=now)
        )
        expected = random.Random(7).choice(CHECKIN_PROMPTS)
        result = await coach.generate_accountability_prompt(
            user, AccountabilityPromptRequest(session_id=session.id, time_elapsed=5)
        )
        assert result.prompt == expected
        assert result.context == 'Session: "T"\nTime elapsed: 5 minutes'

    async def test_foreign_session_gets_default_prompt(self, coach, other_user, repos, user, now):
        session = await repos.sessions.create(
            FocusSession(user_id=user.id, title="Mine", planned_duration=25, start_time=now)
        )
        result = await coach.generate_accountability_prompt(
            other_user, AccountabilityPromptRequest(session_id=session.id, time_elapsed=5)
        )
        assert result.success is False
        assert result.prompt == DEFAULT_CHECKIN_PROMPT
        assert result.context == ""
