"""Unit tests for TodoService."""

import json
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from accountability_ai.core.models.domain import TaskPriority, TaskStatus
from accountability_ai.core.models.io import TaskCreate
from accountability_ai.integrations.errors import GraphApiError
from accountability_ai.server.core.config import MicrosoftGraphConfig
from accountability_ai.services import TodoService
from accountability_ai.services.todo import CREDENTIALS_MISSING

pytestmark = pytest.mark.asyncio


class GraphStub:
    def __init__(self, lists=None, fail_tasks: bool = False):
        self.lists = [{"id": "L1", "wellknownListName": "defaultList"}] if lists is None else lists
        self.fail_tasks = fail_tasks
        self.created = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path.endswith("/token"):
            return httpx.Response(200, json={"access_token": "tok"})
        if path.endswith("/me/todo/lists"):
            return httpx.Response(200, json={"value": self.lists})
        if self.fail_tasks:
            return httpx.Response(403, json={"error": {"code": "Forbidden"}})
        if request.method == "POST":
            body = json.loads(request.content)
            self.created.append(body)
            return httpx.Response(201, json={"id": "graph-1", **body})
        return httpx.Response(
            200,
            json={
                "value": [
                    {
                        "id": "graph-1",
                        "title": "Outline",
                        "status": "notStarted",
                        "importance": "high",
                        "createdDateTime": "2025-03-10T09:00:00Z",
                        "dueDateTime": {"dateTime": "2025-03-11T00:00:00.0000000", "timeZone": "UTC"},
                        "body": {"content": "ignored"},
                    },
                    {"id": "graph-2", "title": "No due", "status": "completed", "importance": "normal"},
                ]
            },
        )


SERVER_CONFIG = MicrosoftGraphConfig(
    client_id="server-id",
    client_secret="server-secret",
    tenant_id="server-tenant",
    base_url="https://mock-graph/v1.0",
    authority_url="https://mock-login",
)


@pytest.fixture
def graph() -> GraphStub:
    return GraphStub()


@pytest.fixture
def service(repos, graph, mock_http, now) -> TodoService:
    return TodoService(repos, SERVER_CONFIG, http_client=mock_http(graph), clock=lambda: now)


class TestCredentials:
    def test_user_values_win_per_field(self, service, user):
        user.microsoft_client_id = "user-id"
        creds = service.resolve_credentials(user)
        assert creds.client_id == "user-id"
        assert creds.client_secret == "server-secret"
        assert creds.tenant_id == "server-tenant"

    def test_missing_everywhere(self, repos, user):
        service = TodoService(repos, MicrosoftGraphConfig())
        with pytest.raises(GraphApiError, match=CREDENTIALS_MISSING):
            service.resolve_credentials(user)


class TestCreateTask:
    async def test_creates_remote_and_local(self, service, user, graph, repos, now):
        due = datetime(2025, 3, 11, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        result = await service.create_task(
            user, TaskCreate(title="Outline", description="chapter 1", due_date=due, priority=TaskPriority.high)
        )

        assert result.success is True
        assert result.task_id == "graph-1"
        assert graph.created[0]["importance"] == "high"
        assert graph.created[0]["dueDateTime"]["dateTime"] == "2025-03-11T10:00:00"

        local = await repos.todo_tasks.get_by_id(result.local_task_id)
        assert local.microsoft_task_id == "graph-1"
        assert local.status == TaskStatus.not_started
        assert local.created_from_ai is True
        assert local.due_date == datetime(2025, 3, 11, 10, 0)
        assert local.last_synced == now

    async def test_default_priority_is_normal(self, service, user, graph):
        await service.create_task(user, TaskCreate(title="Plain"))
        assert graph.created[0]["importance"] == "normal"

    async def test_no_list(self, repos, user, mock_http):
        service = TodoService(repos, SERVER_CONFIG, http_client=mock_http(GraphStub(lists=[])))
        result = await service.create_task(user, TaskCreate(title="x"))
        assert result.success is False
        assert result.error == "No task list found"
        assert await repos.todo_tasks.list_for_user(user.id) == []

    async def test_missing_credentials_is_reported(self, repos, user):
        result = await TodoService(repos, MicrosoftGraphConfig()).create_task(user, TaskCreate(title="x"))
        assert result.success is False
        assert result.error == CREDENTIALS_MISSING

    async def test_graph_error_is_reported(self, repos, user, mock_http):
        service = TodoService(repos, SERVER_CONFIG, http_client=mock_http(GraphStub(fail_tasks=True)))
        result = await service.create_task(user, TaskCreate(title="x"))
        assert result.success is False
        assert "403" in result.error


class TestListTasks:
    async def test_maps_graph_tasks(self, service, user):
        result = await service.list_tasks(user)
        assert result.success is True
        assert result.tasks[0] == {
            "id": "graph-1",
            "title": "Outline",
            "status": "notStarted",
            "importance": "high",
            "createdDateTime": "2025-03-10T09:00:00Z",
            "dueDateTime": "2025-03-11T00:00:00.0000000",
        }
        assert result.tasks[1]["dueDateTime"] is None

    async def test_no_list_is_empty_success(self, repos, user, mock_http):
        service = TodoService(repos, SERVER_CONFIG, http_client=mock_http(GraphStub(lists=[])))
        result = await service.list_tasks(user)
        assert result.success is True
        assert result.tasks == []

    async def test_local_tasks(self, service, user):
        await service.create_task(user, TaskCreate(title="Outline"))
        assert [t.title for t in await service.get_local_tasks(user)] == ["Outline"]
