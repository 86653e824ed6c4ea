"""Unit tests for the Microsoft Graph To-Do client."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from urllib.parse import parse_qs

import httpx
import pytest

from accountability_ai.integrations.errors import GraphApiError
from accountability_ai.integrations.microsoft_graph import GRAPH_SCOPE, GraphCredentials, GraphTodoClient

pytestmark = pytest.mark.asyncio

CREDS = GraphCredentials(client_id="cid", client_secret="secret", tenant_id="tenant")


class FakeGraph:
    """Minimal Graph endpoint recording the requests it receives."""

    def __init__(self, lists=None):
        self.requests = []
        self.token_calls = 0
        self.lists = lists if lists is not None else [
            {"id": "L1", "displayName": "Work"},
            {"id": "L2", "displayName": "Tasks", "wellknownListName": "defaultList"},
        ]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.endswith("/oauth2/v2.0/token"):
            self.token_calls += 1
            return httpx.Response(200, json={"access_token": "tok", "expires_in": 3600})
        if request.headers.get("Authorization") != "Bearer tok":
            return httpx.Response(401, json={"error": "unauthorized"})
        if path == "/v1.0/me/todo/lists":
            return httpx.Response(200, json={"value": self.lists})
        if path.endswith("/tasks") and request.method == "POST":
            body = json.loads(request.content)
            return httpx.Response(201, json={"id": "T1", **body})
        if path.endswith("/tasks"):
            return httpx.Response(200, json={"value": [{"id": "T1", "title": "Write"}]})
        return httpx.Response(404)


def _client(mock_http, graph: FakeGraph) -> GraphTodoClient:
    return GraphTodoClient(
        CREDS,
        base_url="https://mock-graph/v1.0",
        authority_url="https://mock-login",
        client=mock_http(graph),
    )


async def test_token_request_uses_client_credentials(mock_http):
    graph = FakeGraph()
    client = _client(mock_http, graph)

    assert await client.get_access_token() == "tok"
    request = graph.requests[0]
    assert str(request.url) == "https://mock-login/tenant/oauth2/v2.0/token"
    form = parse_qs(request.content.decode())
    assert form["grant_type"] == ["client_credentials"]
    assert form["scope"] == [GRAPH_SCOPE]
    assert form["client_id"] == ["cid"]


async def test_token_is_reused(mock_http):
    graph = FakeGraph()
    client = _client(mock_http, graph)
    await client.list_task_lists()
    await client.list_tasks("L2")
    assert graph.token_calls == 1


async def test_token_failure_raises(mock_http):
    client = GraphTodoClient(
        CREDS,
        base_url="https://mock-graph/v1.0",
        authority_url="https://mock-login",
        client=mock_http(lambda request: httpx.Response(400, json={"error": "invalid_client"})),
    )
    with pytest.raises(GraphApiError) as exc_info:
        await client.get_access_token()
    assert exc_info.value.status_code == 400


async def test_default_list_prefers_wellknown(mock_http):
    client = _client(mock_http, FakeGraph())
    default = await client.get_default_list()
    assert default["id"] == "L2"


async def test_default_list_falls_back_to_first_or_none(mock_http):
    assert (await _client(mock_http, FakeGraph(lists=[{"id": "only"}])).get_default_list())["id"] == "only"
    assert await _client(mock_http, FakeGraph(lists=[])).get_default_list() is None


async def test_create_task_payload(mock_http):
    graph = FakeGraph()
    client = _client(mock_http, graph)
    due = datetime(2025, 3, 10, 12, 0, tzinfo=timezone(timedelta(hours=2)))

    created = await client.create_task("L2", "Write report", body="Intro first", due=due, importance="high")

    body = json.loads(graph.requests[-1].content)
    assert graph.requests[-1].url.path == "/v1.0/me/todo/lists/L2/tasks"
    assert body["title"] == "Write report"
    assert body["importance"] == "high"
    assert body["body"] == {"content": "Intro first", "contentType": "text"}
    assert body["dueDateTime"] == {"dateTime": "2025-03-10T10:00:00", "timeZone": "UTC"}
    assert created["id"] == "T1"


async def test_create_task_minimal_payload(mock_http):
    graph = FakeGraph()
    await _client(mock_http, graph).create_task("L2", "Plain")
    body = json.loads(graph.requests[-1].content)
    assert body == {"title": "Plain", "importance": "normal"}


async def test_list_tasks(mock_http):
    tasks = await _client(mock_http, FakeGraph()).list_tasks("L2")
    assert tasks == [{"id": "T1", "title": "Write"}]
