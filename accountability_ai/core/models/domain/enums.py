"""Domain enums shared by entities, I/O models and services."""

from __future__ import annotations

from enum import Enum


class UserRole(str, Enum):
    """Account role."""

    admin = "admin"
    user = "user"
    member = "member"


class SessionStatus(str, Enum):
    """
    Lifecycle status of a focus session.

    At most one session per user is ``active``; starting a new one abandons the rest.
    """

    active = "active"
    paused = "paused"
    completed = "completed"
    abandoned = "abandoned"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionStatus.completed, SessionStatus.abandoned)


class CheckinResponse(str, Enum):
    """What the user reported doing at a check-in."""

    on_task = "on_task"
    distracted = "distracted"
    procrastinating = "procrastinating"
    on_break = "break"


class PrayerStatus(str, Enum):
    """Recorded outcome for a single prayer on a given day."""

    completed = "completed"
    missed = "missed"


class PrayerDayStatus(str, Enum):
    """Status reported for today's prayers, including unrecorded ones."""

    pending = "pending"
    completed = "completed"
    missed = "missed"


class TaskStatus(str, Enum):
    """Microsoft To-Do task status values."""

    not_started = "notStarted"
    in_progress = "inProgress"
    completed = "completed"


class TaskPriority(str, Enum):
    """Task importance, mapped one-to-one onto Graph ``importance``."""

    low = "low"
    normal = "normal"
    high = "high"


class LLMProviderName(str, Enum):
    """LLM providers the coaching router can dispatch to."""

    openai = "openai"
    anthropic = "anthropic"
    google = "google"
    ollama = "ollama"

    def __str__(self) -> str:
        return self.value
