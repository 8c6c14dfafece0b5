"""Base class for API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from github_user_client.config import ClientConfig
    from github_user_client.http import HTTPClient


class BaseEndpoint:
    """Base class for API endpoint groups.

    Each endpoint group names the resource it serves and gets access to the
    shared HTTP client.

    Attributes:
        resource: API path segment for the entity type, e.g. ``users``.
        _http: The HTTP client for making requests.
        _config: Client configuration.

    """

    __slots__ = ("_config", "_http")

    resource: ClassVar[str] = ""

    def __init__(self, http: HTTPClient, config: ClientConfig) -> None:
        self._http = http
        self._config = config

    def _path(self, *segments: str) -> str:
        """Build ``/<resource>/<segment>...`` with segments interpolated verbatim.

        No escaping, trimming or validation is applied here.

        """
        return "/" + "/".join((self.resource, *segments))
