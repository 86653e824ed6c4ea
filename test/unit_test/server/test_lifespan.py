"""
Unit tests for FastAPI application lifespan management.

Startup creates missing tables; a failing database must not prevent the
server from starting.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI

from accountability_ai.server.main import lifespan

pytestmark = pytest.mark.asyncio


async def test_startup_initializes_database():
    with patch("accountability_ai.server.main.init_db", new_callable=AsyncMock) as mock_init:
        async with lifespan(FastAPI()):
            mock_init.assert_awaited_once()


async def test_startup_survives_database_failure():
    with patch("accountability_ai.server.main.init_db", new_callable=AsyncMock) as mock_init:
        mock_init.side_effect = ConnectionError("database unavailable")
        with patch("accountability_ai.server.main.logger") as mock_logger:
            async with lifespan(FastAPI()):
                pass
    mock_logger.error.assert_called_once()


async def test_create_all_creates_every_table(tmp_path):
    from sqlalchemy import inspect

    from accountability_ai.core.database.utils import create_all, create_engine

    engine = create_engine(f"sqlite:///{tmp_path / 'app.db'}")
    try:
        await create_all(engine)
        async with engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
    finally:
        await engine.dispose()
    assert {"users", "focus_sessions", "checkins", "ai_interactions", "prayer_checkins", "todo_tasks"} <= set(tables)
