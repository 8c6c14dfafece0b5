"""Test configuration and shared fixtures."""

from __future__ import annotations

import json
import threading
from collections.abc import Callable, Iterator
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any
from urllib.parse import unquote

import httpx
import pytest

from github_user_client import ClientConfig, GitHubClient

# =============================================================================
# Sample API Responses
# =============================================================================


@pytest.fixture
def sample_user_response() -> dict[str, Any]:
    """Sample GitHub user API response."""
    return {
        "login": "octocat",
        "id": 1,
        "node_id": "MDQ6VXNlcjE=",
        "avatar_url": "https://github.com/images/error/octocat_happy.gif",
        "url": "https://api.github.com/users/octocat",
        "html_url": "https://github.com/octocat",
        "repos_url": "https://api.github.com/users/octocat/repos",
        "type": "User",
        "site_admin": False,
        "name": "The Octocat",
        "company": "@github",
        "blog": "https://github.blog",
        "location": "San Francisco",
        "email": None,
        "hireable": None,
        "bio": None,
        "public_repos": 8,
        "public_gists": 8,
        "followers": 20,
        "following": 0,
        "created_at": "2008-01-14T04:33:35Z",
        "updated_at": "2008-01-14T04:33:35Z",
    }


# =============================================================================
# Client Fixtures
# =============================================================================


@pytest.fixture
def config() -> ClientConfig:
    """Create a test configuration."""
    return ClientConfig(token="test_token_12345")


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests seen by the mock transport, in arrival order."""
    return []


@pytest.fixture
def make_client(
    config: ClientConfig,
    recorded_requests: list[httpx.Request],
) -> Callable[..., GitHubClient]:
    """Build a GitHubClient whose network is an httpx.MockTransport.

    The handler receives each request after it has been recorded.
    """

    def factory(
        handler: Callable[[httpx.Request], Any],
        client_config: ClientConfig | None = None,
    ) -> GitHubClient:
        async def recording_handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            result = handler(request)
            if not isinstance(result, httpx.Response):
                result = await result
            return result

        return GitHubClient(
            client_config or config,
            transport=httpx.MockTransport(recording_handler),
        )

    return factory


# =============================================================================
# Loopback Server
# =============================================================================


class _RecordingHandler(BaseHTTPRequestHandler):
    """Answers /users/<name> and remembers what arrived on the socket."""

    def do_GET(self) -> None:
        self.server.received.append(  # type: ignore[attr-defined]
            {"path": unquote(self.path), "authorization": self.headers.get("Authorization")}
        )
        login = unquote(self.path).rsplit("/", 1)[-1]
        status = 404 if login == "missing" else 200
        body = json.dumps({"login": login} if status == 200 else {"message": "Not Found"}).encode()

        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:
        pass


@pytest.fixture
def loopback_server() -> Iterator[ThreadingHTTPServer]:
    """Real HTTP server on 127.0.0.1, so requests go through httpx's socket transport."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), _RecordingHandler)
    server.received = []  # type: ignore[attr-defined]
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.shutdown()
    server.server_close()
    thread.join()
