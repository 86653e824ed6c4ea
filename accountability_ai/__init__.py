"""Accountability AI.

Backend for a personal-productivity assistant: timed focus sessions,
periodic accountability check-ins with AI coaching replies, daily prayer
tracking and Microsoft To-Do task sync.

Core subpackages
----------------

- ``accountability_ai.core``: logging, monitoring, persistence (SQLModel
  entities and repositories) and the API I/O models.
- ``accountability_ai.integrations``: thin httpx clients for the outbound
  APIs (LLM providers, prayer-time API, Microsoft Graph, Coqui TTS).
- ``accountability_ai.services``: the domain operations used by the API.
- ``accountability_ai.server``: the FastAPI application.
"""

__version__ = "0.1.0"
