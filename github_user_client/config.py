"""Configuration management for the GitHub user client.

Configuration Precedence (highest to lowest):
    1. Constructor arguments
    2. Environment variables
    3. Default values

Environment Variables:
    GITHUB_API_TOKEN: Bearer token sent with every request (default: empty)
    GITHUB_BASE_URL: API base URL (default: https://api.github.com)

Example:
    >>> # Read the token from the environment / .env file
    >>> config = ClientConfig()
    >>>
    >>> # Explicit configuration, e.g. in tests
    >>> config = ClientConfig(token="ghp_xxx")

"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import ClassVar

from dotenv import load_dotenv

from github_user_client.exceptions import ConfigurationError

# Auto-load .env file if it exists (searches current dir and parents)
_env_file = Path.cwd() / ".env"
if _env_file.exists():
    load_dotenv(_env_file)
else:
    load_dotenv()


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Immutable configuration for the GitHub user client.

    The token is not validated. An empty token still produces an
    ``Authorization: Bearer `` header and the remote service decides
    what to do with it.

    Attributes:
        base_url: GitHub API base URL.
        token: Bearer token for the Authorization header.

    """

    DEFAULT_BASE_URL: ClassVar[str] = "https://api.github.com"
    TOKEN_ENV_VAR: ClassVar[str] = "GITHUB_API_TOKEN"
    BASE_URL_ENV_VAR: ClassVar[str] = "GITHUB_BASE_URL"

    base_url: str = field(
        default_factory=lambda: _get_env(ClientConfig.BASE_URL_ENV_VAR, ClientConfig.DEFAULT_BASE_URL)
    )
    token: str = field(default_factory=lambda: os.environ.get(ClientConfig.TOKEN_ENV_VAR, ""))

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate the base URL.

        Raises:
            ConfigurationError: If base_url is empty or has no http(s) scheme.

        """
        if not self.base_url:
            raise ConfigurationError("base_url cannot be empty")
        if not self.base_url.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"Invalid base_url: {self.base_url} (must start with http:// or https://)"
            )

        # Remove trailing slash for consistency
        if self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

        if self.token is None:
            object.__setattr__(self, "token", "")

    @property
    def is_authenticated(self) -> bool:
        """Check if a non-empty token is configured."""
        return len(self.token) > 0

    @property
    def authorization(self) -> str:
        """Value of the Authorization header, sent even when the token is empty."""
        return f"Bearer {self.token}"

    def with_overrides(self, **kwargs: str) -> ClientConfig:
        """Create a new configuration with specified overrides.

        Example:
            >>> base_config = ClientConfig(token="ghp_xxx")
            >>> enterprise = base_config.with_overrides(base_url="https://github.example.com/api/v3")

        """
        return replace(self, **kwargs)

    def __repr__(self) -> str:
        """Return a representation without exposing the token."""
        masked = f"{self.token[:4]}..." if len(self.token) > 4 else "***"
        return f"ClientConfig(base_url={self.base_url!r}, token={masked!r})"


def _get_env(key: str, default: str) -> str:
    """Get environment variable, treating an empty value as unset."""
    value = os.environ.get(key)
    if value is None or value == "":
        return default
    return value
