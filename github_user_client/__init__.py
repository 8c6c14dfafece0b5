"""GitHub User Client - an async accessor for GitHub user profiles.

Wraps ``GET /users/{username}`` so calling code does not hardcode the API
URL or the Authorization header.

Example:
    >>> from github_user_client import GitHubClient
    >>> async with GitHubClient() as client:
    ...     response = await client.users.get("octocat")
    ...     print(response.json()["login"])

"""

from github_user_client.client import GitHubClient
from github_user_client.config import ClientConfig
from github_user_client.endpoints.users import UsersEndpoint
from github_user_client.exceptions import ConfigurationError, GitHubClientError
from github_user_client.utils.logger import configure_logging

__version__ = "1.0.0"

__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "GitHubClient",
    "GitHubClientError",
    "UsersEndpoint",
    "configure_logging",
]
