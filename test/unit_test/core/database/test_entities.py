"""Unit tests for entity helpers."""

from datetime import datetime, timedelta

from accountability_ai.core.database.entities import FocusSession, User
from accountability_ai.core.database.base import utc_now
from accountability_ai.core.models.domain import SessionStatus


class TestFocusSession:
    def test_elapsed_minutes_rounds_half_up(self):
        start = datetime(2025, 3, 10, 9, 0, 0)
        session = FocusSession(user_id=1, title="t", planned_duration=25, start_time=start)
        assert session.elapsed_minutes(start + timedelta(minutes=12, seconds=29)) == 12
        assert session.elapsed_minutes(start + timedelta(minutes=12, seconds=30)) == 13

    def test_close_stamps_end_and_duration(self):
        start = datetime(2025, 3, 10, 9, 0, 0)
        session = FocusSession(user_id=1, title="t", planned_duration=25, start_time=start)
        end = start + timedelta(minutes=40)
        session.close(SessionStatus.completed, end)
        assert session.status == SessionStatus.completed
        assert session.end_time == end
        assert session.actual_duration == 40


class TestUser:
    def test_effective_checkin_frequency_defaults_to_25(self):
        assert User(email="a@b.c").effective_checkin_frequency == 25
        assert User(email="a@b.c", checkin_frequency=10).effective_checkin_frequency == 10

    def test_microsoft_configured_needs_all_three(self):
        assert not User(microsoft_client_id="id", microsoft_client_secret="secret").microsoft_configured
        assert User(
            microsoft_client_id="id", microsoft_client_secret="secret", microsoft_tenant_id="tenant"
        ).microsoft_configured


def test_utc_now_is_naive():
    assert utc_now().tzinfo is None
