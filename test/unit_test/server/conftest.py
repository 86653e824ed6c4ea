"""Fixtures for API tests: the app wired to an in-memory database and mocked upstream services."""

import json
from typing import Any, AsyncGenerator, Dict, List

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from accountability_ai.core.database import get_session
from accountability_ai.server.core.config import Settings
from accountability_ai.server.main import app
from accountability_ai.server.services.deps import get_http_client, get_settings

TIMINGS = {
    "Fajr": "05:01 (EET)",
    "Sunrise": "06:30 (EET)",
    "Dhuhr": "12:02 (EET)",
    "Asr": "15:23 (EET)",
    "Maghrib": "18:04 (EET)",
    "Isha": "19:25 (EET)",
}


class Upstream:
    """Answers every outbound call the services make, keyed by host."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.llm_reply: Any = "You've got this. What is the very next step?"
        self.llm_status: int = 200

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        host = request.url.host
        if host == "mock-openai":
            if self.llm_status != 200:
                return httpx.Response(self.llm_status, json={"error": "unavailable"})
            return httpx.Response(
                200,
                json={"choices": [{"message": {"content": self.llm_reply}}], "usage": {"total_tokens": 30}},
            )
        if host == "mock-aladhan":
            return httpx.Response(200, json={"code": 200, "data": {"timings": TIMINGS}})
        if host == "mock-login":
            return httpx.Response(200, json={"access_token": "graph-token"})
        if host == "mock-graph":
            return self._graph(request)
        if host == "mock-coqui":
            if request.method == "HEAD":
                return httpx.Response(200)
            if request.url.path == "/api/tts/models":
                return httpx.Response(200, json={"models": ["tts_models/en/vctk/vits"]})
            return httpx.Response(200, content=b"RIFF....WAVE")
        return httpx.Response(404)

    def _graph(self, request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/me/todo/lists"):
            return httpx.Response(200, json={"value": [{"id": "default", "wellknownListName": "defaultList"}]})
        if request.method == "POST":
            return httpx.Response(201, json={"id": "task-1", **json.loads(request.content)})
        return httpx.Response(
            200, json={"value": [{"id": "task-1", "title": "Outline", "status": "notStarted", "importance": "normal"}]}
        )


@pytest.fixture
def upstream() -> Upstream:
    return Upstream()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        OPENAI_API_KEY="sk-test",
        OPENAI_BASE_URL="https://mock-openai/v1",
        ANTHROPIC_API_KEY=None,
        GOOGLE_API_KEY=None,
        OLLAMA_ENABLED=False,
        AI_PREFERRED_PROVIDER=None,
        PRAYER_TIMES_API_URL="https://mock-aladhan/v1",
        GRAPH_CLIENT_ID="client",
        GRAPH_CLIENT_SECRET="secret",
        GRAPH_TENANT_ID="tenant",
        GRAPH_AUTHORITY_URL="https://mock-login",
        GRAPH_BASE_URL="https://mock-graph/v1.0",
        COQUI_TTS_SERVER_URL="http://mock-coqui:5002",
        DEFAULT_USER_EMAIL="owner@mock.test",
        DEFAULT_USER_NAME="Owner",
    )


@pytest_asyncio.fixture
async def client(db_session, test_settings, upstream) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against the app with database and upstream services replaced."""
    outbound = httpx.AsyncClient(transport=httpx.MockTransport(upstream))

    async def get_session_override():
        yield db_session

    overrides: Dict = {
        get_session: get_session_override,
        get_settings: lambda: test_settings,
        get_http_client: lambda: outbound,
    }
    app.dependency_overrides.update(overrides)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as ac:
        yield ac
    app.dependency_overrides.clear()
    await outbound.aclose()


@pytest.fixture
def as_user():
    """Headers acting as a specific user id."""

    def headers(user) -> Dict[str, str]:
        return {"X-User-Id": str(user.id)}

    return headers
