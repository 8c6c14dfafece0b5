"""HTTP client wrapper for the GitHub API.

This module provides a thin wrapper around ``httpx.AsyncClient`` that handles:
- Base URL configuration
- Bearer token injection
- Request/response logging

Responses are handed back untouched. Non-success statuses raise
``httpx.HTTPStatusError`` and network failures raise the ``httpx`` transport
exception; neither is retried or reclassified.

The HTTPClient is an internal implementation detail. Use GitHubClient instead.

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from github_user_client.config import ClientConfig

logger = logging.getLogger(__name__)


class HTTPClient:
    """Low-level asynchronous HTTP client for GitHub API requests.

    Note:
        This is an internal class. Use GitHubClient for the public API.

    """

    __slots__ = ("_client", "_config")

    def __init__(
        self,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            config: Client configuration.
            transport: Optional httpx transport, e.g. ``httpx.MockTransport``.

        """
        self._config = config
        self._client = self._create_client(transport)

    def _create_client(self, transport: httpx.AsyncBaseTransport | None) -> httpx.AsyncClient:
        """Create and configure the httpx client.

        The Authorization header is always attached. With an empty token it
        goes out as ``Bearer``: h11 refuses header values with trailing
        whitespace, and receivers strip that whitespace anyway, so the value
        GitHub sees for ``Bearer `` is the same.

        """
        return httpx.AsyncClient(
            base_url=self._config.base_url,
            headers={"Authorization": self._config.authorization.rstrip()},
            follow_redirects=True,
            transport=transport,
        )

    @property
    def is_closed(self) -> bool:
        """Whether the underlying connection pool has been closed."""
        return self._client.is_closed

    async def request(self, method: str, endpoint: str) -> httpx.Response:
        """Make an HTTP request to the GitHub API.

        Args:
            method: HTTP method.
            endpoint: API endpoint path (e.g., "/users/octocat"), used verbatim.

        Returns:
            The httpx response, unmodified.

        Raises:
            httpx.HTTPStatusError: If the response status is not a success.
            httpx.TransportError: For connection failures and timeouts.

        """
        logger.debug("Request: %s %s", method, endpoint)

        response = await self._client.request(method, endpoint)

        logger.debug(
            "Response: %d %s for %s %s",
            response.status_code,
            response.reason_phrase,
            method,
            response.url,
        )

        response.raise_for_status()
        return response

    async def get(self, endpoint: str) -> httpx.Response:
        """Make a GET request."""
        return await self.request("GET", endpoint)

    async def aclose(self) -> None:
        """Close the HTTP client and release resources."""
        await self._client.aclose()

    async def __aenter__(self) -> HTTPClient:
        """Enter async context manager."""
        return self

    async def __aexit__(self, *args: object) -> None:
        """Exit async context manager and close client."""
        await self.aclose()
