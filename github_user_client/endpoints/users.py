"""Users endpoint implementation.

API Reference: https://docs.github.com/en/rest/users/users#get-a-user

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from github_user_client.endpoints.base import BaseEndpoint

if TYPE_CHECKING:
    import httpx


class UsersEndpoint(BaseEndpoint):
    """Endpoint for user-related API calls.

    Example:
        >>> async with GitHubClient() as client:
        ...     response = await client.users.get("octocat")
        ...     print(response.json()["public_repos"])

    """

    __slots__ = ()

    resource = "users"

    async def get(self, username: str) -> httpx.Response:
        """Get a user's profile.

        The username is placed in the path as given. Empty or malformed
        usernames are not rejected locally; GitHub answers them itself.
        Every call issues its own request.

        Args:
            username: The GitHub username (login).

        Returns:
            The response from GitHub, unmodified.

        Raises:
            httpx.HTTPStatusError: If GitHub responds with a non-success status.
            httpx.TransportError: If the request fails at the network level.

        Example:
            >>> response = await client.users.get("octocat")
            >>> response.status_code
            200

        """
        return await self._http.get(self._path(username))
