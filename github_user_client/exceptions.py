"""Exceptions raised by the GitHub user client.

Request failures are not wrapped. Network errors and non-success responses
reach the caller as the ``httpx`` exception that produced them
(``httpx.TransportError`` subclasses and ``httpx.HTTPStatusError``), with the
original response attached.

Exception Hierarchy:
    GitHubClientError (base)
    └── ConfigurationError     - Invalid client configuration

Example:
    >>> try:
    ...     response = await client.users.get("nonexistent-user-12345")
    ... except httpx.HTTPStatusError as e:
    ...     print(e.response.status_code)

"""

from __future__ import annotations


class GitHubClientError(Exception):
    """Base exception for errors raised by this library itself.

    Attributes:
        message: Human-readable error description.

    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        """Return a detailed representation for debugging."""
        return f"{self.__class__.__name__}(message={self.message!r})"


class ConfigurationError(GitHubClientError):
    """Raised when client configuration is invalid.

    Example:
        >>> ClientConfig(base_url="not-a-url")
        ConfigurationError: Invalid base_url: not-a-url (must start with http:// or https://)

    """
