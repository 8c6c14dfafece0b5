"""Main GitHub Client class.

This module provides the main entry point for the GitHub user client.
The GitHubClient class wires the endpoint group to a shared HTTP client
and manages its lifecycle.

Example:
    >>> from github_user_client import GitHubClient
    >>>
    >>> async with GitHubClient() as client:
    ...     response = await client.users.get("octocat")

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from github_user_client.config import ClientConfig
from github_user_client.endpoints.users import UsersEndpoint
from github_user_client.http import HTTPClient

if TYPE_CHECKING:
    import httpx


class GitHubClient:
    """Asynchronous GitHub API client.

    Attributes:
        users: User-related API endpoints.

    Example:
        >>> client = GitHubClient(ClientConfig(token="ghp_xxx"))
        >>> response = await client.users.get("octocat")
        >>> print(response.json()["login"])
        >>>
        >>> # Clean up (or use async context manager)
        >>> await client.aclose()

    """

    __slots__ = ("_config", "_http", "_users")

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the GitHub client.

        Args:
            config: Client configuration. If not provided, one is built from
                    GITHUB_API_TOKEN / GITHUB_BASE_URL and the defaults.
            transport: Optional httpx transport replacing the network layer.

        """
        self._config = config if config is not None else ClientConfig()
        self._http = HTTPClient(self._config, transport=transport)
        self._users = UsersEndpoint(self._http, self._config)

    @property
    def users(self) -> UsersEndpoint:
        """Access user-related API endpoints.

        Example:
            >>> response = await client.users.get("octocat")

        """
        return self._users

    @property
    def config(self) -> ClientConfig:
        """Get the immutable client configuration."""
        return self._config

    @property
    def is_authenticated(self) -> bool:
        """Check if a non-empty token is configured."""
        return self._config.is_authenticated

    @property
    def is_closed(self) -> bool:
        """Check if the client has been closed."""
        return self._http.is_closed

    async def aclose(self) -> None:
        """Close the client and release pooled connections.

        Example:
            >>> client = GitHubClient()
            >>> try:
            ...     response = await client.users.get("octocat")
            ... finally:
            ...     await client.aclose()

        """
        await self._http.aclose()

    async def __aenter__(self) -> GitHubClient:
        """Enter async context manager."""
        return self

    async def __aexit__(self, *args: object) -> None:
        """Exit async context manager and close the client."""
        await self.aclose()

    def __repr__(self) -> str:
        """Return a string representation of the client."""
        auth_status = "authenticated" if self.is_authenticated else "anonymous"
        return f"GitHubClient(base_url={self._config.base_url!r}, {auth_status})"
