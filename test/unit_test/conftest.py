"""Shared fixtures for unit tests: in-memory database, repositories and users."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlmodel.pool import StaticPool

from accountability_ai.core.database.base import Base
from accountability_ai.core.database.entities import User
from accountability_ai.core.database.repositories import SqlRepoBundle, build_sql_repos_from_session
from accountability_ai.core.database.utils import create_sessionmaker


@pytest_asyncio.fixture
async def in_memory_engine():
    """Fresh in-memory SQLite engine with all tables created."""
    import accountability_ai.core.database.entities  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def db_session(in_memory_engine):
    async with create_sessionmaker(in_memory_engine)() as session:
        yield session


@pytest_asyncio.fixture
async def repos(db_session) -> SqlRepoBundle:
    return build_sql_repos_from_session(session=db_session)


@pytest_asyncio.fixture
async def user(repos: SqlRepoBundle) -> User:
    return await repos.users.create(User(email="alice@example.com", name="Alice"))


@pytest_asyncio.fixture
async def other_user(repos: SqlRepoBundle) -> User:
    return await repos.users.create(User(email="bob@example.com", name="Bob"))


@pytest.fixture
def now() -> datetime:
    """Fixed naive-UTC "now" for clock-injected services."""
    return datetime(2025, 3, 10, 9, 0, 0)


@pytest.fixture
def mock_http() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Factory for an ``httpx.AsyncClient`` whose requests are answered by a handler."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory


