"""
Microsoft To-Do service.

Creates tasks in the user's default To-Do list and keeps a local mirror of
the tasks created through the assistant. Every Graph failure is reported as
``success: false`` with the error text.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, List, Optional

import httpx

from accountability_ai.core.database import utc_now
from accountability_ai.core.database.entities import TodoTask, User
from accountability_ai.core.database.repositories import SqlRepoBundle
from accountability_ai.core.logging_config import get_logger
from accountability_ai.core.models.domain import TaskPriority, TaskStatus
from accountability_ai.core.models.io import TaskCreate, TaskCreateResult, TaskListResult
from accountability_ai.integrations.errors import GraphApiError, IntegrationError
from accountability_ai.integrations.microsoft_graph import GraphCredentials, GraphTodoClient
from accountability_ai.server.core.config import MicrosoftGraphConfig

logger = get_logger(__name__)

CREDENTIALS_MISSING = "Microsoft Graph credentials not configured"


class TodoService:
    """To-Do task creation, listing and the local mirror."""

    def __init__(
        self,
        repos: SqlRepoBundle,
        config: MicrosoftGraphConfig,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.repos = repos
        self.config = config
        self.http_client = http_client
        self.clock = clock

    def resolve_credentials(self, user: User) -> GraphCredentials:
        """Credentials saved on the user win field by field over server configuration.

        Raises:
            GraphApiError: If any of client id, secret or tenant is missing
        """
        secret = self.config.client_secret.get_secret_value() if self.config.client_secret else None
        client_id = user.microsoft_client_id or self.config.client_id
        client_secret = user.microsoft_client_secret or secret
        tenant_id = user.microsoft_tenant_id or self.config.tenant_id
        if not (client_id and client_secret and tenant_id):
            raise GraphApiError(CREDENTIALS_MISSING)
        return GraphCredentials(client_id=client_id, client_secret=client_secret, tenant_id=tenant_id)

    def _client(self, user: User) -> GraphTodoClient:
        return GraphTodoClient(
            self.resolve_credentials(user),
            base_url=self.config.base_url,
            authority_url=self.config.authority_url,
            timeout=self.config.timeout,
            client=self.http_client,
        )

    async def create_task(self, user: User, data: TaskCreate) -> TaskCreateResult:
        """Create a task in the default list and mirror it locally."""
        priority = data.priority or TaskPriority.normal
        due = data.due_date
        if due is not None and due.tzinfo is not None:
            due = due.astimezone(timezone.utc).replace(tzinfo=None)
        try:
            client = self._client(user)
            task_list = await client.get_default_list()
            if task_list is None:
                raise GraphApiError("No task list found")
            created = await client.create_task(
                task_list["id"], data.title, body=data.description, due=due, importance=priority.value
            )
        except IntegrationError as e:
            logger.error(f"Creating To-Do task failed for user {user.id}: {e}")
            return TaskCreateResult(success=False, error=str(e))

        local = await self.repos.todo_tasks.create(
            TodoTask(
                user_id=user.id,
                microsoft_task_id=created.get("id"),
                title=data.title,
                description=data.description,
                status=TaskStatus.not_started,
                priority=priority,
                due_date=due,
                created_from_ai=True,
                session_id=data.session_id,
                last_synced=self.clock(),
            )
        )
        return TaskCreateResult(success=True, task_id=created.get("id"), local_task_id=local.id)

    async def list_tasks(self, user: User) -> TaskListResult:
        """Tasks of the default list; a user with no lists gets an empty success."""
        try:
            client = self._client(user)
            task_list = await client.get_default_list()
            if task_list is None:
                return TaskListResult(success=True, tasks=[])
            tasks = await client.list_tasks(task_list["id"])
        except IntegrationError as e:
            logger.error(f"Listing To-Do tasks failed for user {user.id}: {e}")
            return TaskListResult(success=False, error=str(e))

        return TaskListResult(
            success=True,
            tasks=[
                {
                    "id": task.get("id"),
                    "title": task.get("title"),
                    "status": task.get("status"),
                    "importance": task.get("importance"),
                    "createdDateTime": task.get("createdDateTime"),
                    "dueDateTime": (task.get("dueDateTime") or {}).get("dateTime"),
                }
                for task in tasks
            ],
        )

    async def get_local_tasks(self, user: User) -> List[TodoTask]:
        return await self.repos.todo_tasks.list_for_user(user.id)
