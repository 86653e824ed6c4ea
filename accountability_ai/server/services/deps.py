"""
API Dependencies.

Provides the per-request database session, repository bundle, acting user
and service instances for API endpoints. Tests replace ``get_settings``,
``get_http_client`` and ``get_llm_router`` through ``app.dependency_overrides``.
"""

from typing import Annotated, Optional

import httpx
from fastapi import Depends, Header
from sqlmodel.ext.asyncio.session import AsyncSession

from accountability_ai.core.database import get_session
from accountability_ai.core.database.entities import User
from accountability_ai.core.database.repositories import SqlRepoBundle, build_sql_repos_from_session
from accountability_ai.integrations.llm import LLMRouter
from accountability_ai.integrations.prayer_times import PrayerTimesClient
from accountability_ai.server.core import constant
from accountability_ai.server.core.config import Settings, settings
from accountability_ai.services import (
    CheckinService,
    CoachingService,
    PrayerService,
    SessionService,
    TodoService,
    UserService,
    VoiceService,
)


def get_settings() -> Settings:
    return settings


def get_http_client() -> Optional[httpx.AsyncClient]:
    """Shared outbound HTTP client; ``None`` means each call opens its own."""
    return None


SettingsDep = Annotated[Settings, Depends(get_settings)]
HttpClientDep = Annotated[Optional[httpx.AsyncClient], Depends(get_http_client)]
SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_repos(session: SessionDep) -> SqlRepoBundle:
    return build_sql_repos_from_session(session=session)


ReposDep = Annotated[SqlRepoBundle, Depends(get_repos)]


def get_llm_router(app_settings: SettingsDep, http_client: HttpClientDep) -> LLMRouter:
    return LLMRouter.from_settings(app_settings, client=http_client)


def get_prayer_times_client(app_settings: SettingsDep, http_client: HttpClientDep) -> PrayerTimesClient:
    config = app_settings.prayer_times
    return PrayerTimesClient(config.base_url, method=config.method, timeout=config.timeout, client=http_client)


def get_user_service(repos: ReposDep, app_settings: SettingsDep) -> UserService:
    return UserService(repos.users, app_settings.single_user)


async def get_current_user(
    user_service: Annotated[UserService, Depends(get_user_service)],
    x_user_id: Annotated[Optional[int], Header(alias=constant.USER_ID_HEADER)] = None,
) -> User:
    """
    Resolve the acting user.

    Without an ``X-User-Id`` header the server runs in single-user mode.
    """
    return await user_service.current_user(x_user_id)


CurrentUserDep = Annotated[User, Depends(get_current_user)]


def get_session_service(repos: ReposDep) -> SessionService:
    return SessionService(repos)


def get_coaching_service(repos: ReposDep, router: Annotated[LLMRouter, Depends(get_llm_router)]) -> CoachingService:
    return CoachingService(repos, router)


def get_checkin_service(
    repos: ReposDep, coach: Annotated[CoachingService, Depends(get_coaching_service)]
) -> CheckinService:
    return CheckinService(repos, coach)


def get_prayer_service(
    repos: ReposDep, client: Annotated[PrayerTimesClient, Depends(get_prayer_times_client)]
) -> PrayerService:
    return PrayerService(repos, client)


def get_todo_service(repos: ReposDep, app_settings: SettingsDep, http_client: HttpClientDep) -> TodoService:
    return TodoService(repos, app_settings.microsoft_graph, http_client=http_client)


def get_voice_service(repos: ReposDep, app_settings: SettingsDep, http_client: HttpClientDep) -> VoiceService:
    return VoiceService(repos, app_settings.coqui_tts, http_client=http_client)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
SessionServiceDep = Annotated[SessionService, Depends(get_session_service)]
CoachingServiceDep = Annotated[CoachingService, Depends(get_coaching_service)]
CheckinServiceDep = Annotated[CheckinService, Depends(get_checkin_service)]
PrayerServiceDep = Annotated[PrayerService, Depends(get_prayer_service)]
TodoServiceDep = Annotated[TodoService, Depends(get_todo_service)]
VoiceServiceDep = Annotated[VoiceService, Depends(get_voice_service)]
