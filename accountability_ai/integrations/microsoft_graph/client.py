"""Microsoft Graph To-Do client.

Overview
--------
Thin async client for the parts of Microsoft Graph the assistant needs:
acquiring an app-only token through the OAuth 2.0 client-credentials flow,
finding the default To-Do list, and creating or listing its tasks.

Errors
------
All failures are raised as ``GraphApiError`` with the HTTP status code and
response body where available.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import httpx

from ..base import AsyncApiClient
from ..errors import GraphApiError

GRAPH_SCOPE = "https://graph.microsoft.com/.default"


@dataclass(frozen=True)
class GraphCredentials:
    """App registration used for the client-credentials flow."""

    client_id: str
    client_secret: str
    tenant_id: str


class GraphTodoClient(AsyncApiClient):
    """Async client for Microsoft To-Do via Graph v1.0."""

    error_class = GraphApiError

    def __init__(
        self,
        credentials: GraphCredentials,
        *,
        base_url: str = "https://graph.microsoft.com/v1.0",
        authority_url: str = "https://login.microsoftonline.com",
        timeout: float = 15.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__(base_url, timeout=timeout, client=client)
        self.credentials = credentials
        self.authority_url = authority_url.rstrip("/")
        self._token: Optional[str] = None

    async def get_access_token(self) -> str:
        """Acquire an access token, reusing the one already fetched by this instance.

        API
        ---
        - Method/Path: ``POST {authority}/{tenant}/oauth2/v2.0/token``
        - Form: ``client_id``, ``client_secret``, ``scope``, ``grant_type=client_credentials``
        """
        if self._token:
            return self._token
        response = await self._request(
            "POST",
            f"{self.authority_url}/{self.credentials.tenant_id}/oauth2/v2.0/token",
            what="Graph token request",
            data={
                "client_id": self.credentials.client_id,
                "client_secret": self.credentials.client_secret,
                "scope": GRAPH_SCOPE,
                "grant_type": "client_credentials",
            },
        )
        data = self._json(response, what="Graph token request")
        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            raise GraphApiError("Graph token response missing access_token", details=data)
        self._token = token
        return token

    async def _headers(self) -> Dict[str, str]:
        token = await self.get_access_token()
        return {"Authorization": f"Bearer {token}", "Content-Type": "application/json"}

    async def list_task_lists(self) -> List[Dict[str, Any]]:
        """All To-Do lists (``GET /me/todo/lists``)."""
        response = await self._request(
            "GET", self._url("me/todo/lists"), what="Graph list task lists", headers=await self._headers()
        )
        return self._json(response, what="Graph list task lists").get("value", [])

    async def get_default_list(self) -> Optional[Dict[str, Any]]:
        """The list marked ``defaultList``, else the first list, else ``None``."""
        lists = await self.list_task_lists()
        for task_list in lists:
            if task_list.get("wellknownListName") == "defaultList":
                return task_list
        return lists[0] if lists else None

    async def create_task(
        self,
        list_id: str,
        title: str,
        *,
        body: Optional[str] = None,
        due: Optional[datetime] = None,
        importance: str = "normal",
    ) -> Dict[str, Any]:
        """Create a task (``POST /me/todo/lists/{list_id}/tasks``).

        Args:
            list_id: Target list
            title: Task title
            body: Plain-text body
            due: Due date; naive datetimes are taken as UTC
            importance: ``low``, ``normal`` or ``high``

        Returns:
            The created Graph task resource
        """
        payload: Dict[str, Any] = {"title": title, "importance": importance}
        if body:
            payload["body"] = {"content": body, "contentType": "text"}
        if due is not None:
            if due.tzinfo is not None:
                due = due.astimezone(timezone.utc).replace(tzinfo=None)
            payload["dueDateTime"] = {"dateTime": due.isoformat(), "timeZone": "UTC"}
        response = await self._request(
            "POST",
            self._url(f"me/todo/lists/{list_id}/tasks"),
            what="Graph create task",
            json=payload,
            headers=await self._headers(),
        )
        return self._json(response, what="Graph create task")

    async def list_tasks(self, list_id: str) -> List[Dict[str, Any]]:
        """Tasks of a list (``GET /me/todo/lists/{list_id}/tasks``)."""
        response = await self._request(
            "GET",
            self._url(f"me/todo/lists/{list_id}/tasks"),
            what="Graph list tasks",
            headers=await self._headers(),
        )
        return self._json(response, what="Graph list tasks").get("value", [])
