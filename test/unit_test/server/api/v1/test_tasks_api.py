"""API tests for the Microsoft To-Do endpoints."""

import json

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

BASE = "/api/v1/tasks"


async def test_create_task_with_server_credentials(client: AsyncClient, user, as_user, upstream):
    response = await client.post(
        BASE, headers=as_user(user), json={"title": "Outline", "description": "chapter 1", "priority": "high"}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["task_id"] == "task-1"

    token_request = next(r for r in upstream.requests if r.url.host == "mock-login")
    assert token_request.url.path == "/tenant/oauth2/v2.0/token"
    created = json.loads(upstream.requests[-1].content)
    assert created["importance"] == "high"

    local = (await client.get(f"{BASE}/local", headers=as_user(user))).json()
    assert local[0]["microsoft_task_id"] == "task-1"
    assert local[0]["created_from_ai"] is True
    assert local[0]["status"] == "notStarted"


async def test_user_credentials_override_server(client: AsyncClient, user, as_user, upstream):
    await client.patch("/api/v1/users/me/preferences", headers=as_user(user), json={"microsoft_tenant_id": "mine"})
    await client.post(BASE, headers=as_user(user), json={"title": "Outline"})
    token_request = next(r for r in upstream.requests if r.url.host == "mock-login")
    assert token_request.url.path == "/mine/oauth2/v2.0/token"


async def test_list_tasks(client: AsyncClient, user, as_user):
    body = (await client.get(BASE, headers=as_user(user))).json()
    assert body["success"] is True
    assert body["tasks"][0]["title"] == "Outline"
    assert body["tasks"][0]["dueDateTime"] is None


async def test_missing_title_is_422(client: AsyncClient, user, as_user):
    response = await client.post(BASE, headers=as_user(user), json={"description": "no title"})
    assert response.status_code == 422
