"""Shared plumbing for the httpx-based integration clients."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional, Type

import httpx

from .errors import IntegrationError


class AsyncApiClient:
    """Base for thin async HTTP clients.

    Each call opens its own ``httpx.AsyncClient`` unless one was injected at
    construction (tests pass a client backed by ``httpx.MockTransport``).
    """

    error_class: Type[IntegrationError] = IntegrationError

    def __init__(self, base_url: str, *, timeout: float = 10.0, client: Optional[httpx.AsyncClient] = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client
        self._logger = logging.getLogger(type(self).__module__)

    @asynccontextmanager
    async def _http(self, timeout: Optional[float] = None) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=timeout or self.timeout, follow_redirects=True) as client:
            yield client

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def _request(self, method: str, url: str, *, what: str, **kwargs: Any) -> httpx.Response:
        """Send a request and map transport or status failures onto ``error_class``.

        Args:
            method: HTTP method
            url: Absolute URL
            what: Short label used in error messages (e.g. ``"OpenAI chat"``)
            **kwargs: Passed through to ``httpx.AsyncClient.request``

        Returns:
            The successful response

        Raises:
            IntegrationError: Subclass given by ``error_class`` on any failure
        """
        timeout = kwargs.pop("timeout", None)
        self._logger.debug("%s request: %s %s", what, method, url)
        try:
            async with self._http(timeout) as client:
                response = await client.request(method, url, **kwargs)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self.error_class(
                f"{what} failed: {e.response.status_code}",
                status_code=e.response.status_code,
                details=e.response.text,
            ) from e
        except httpx.HTTPError as e:
            raise self.error_class(f"{what} failed: {e}") from e
        return response

    def _json(self, response: httpx.Response, *, what: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise self.error_class(
                f"{what} returned invalid JSON", status_code=response.status_code, details=response.text
            ) from e
