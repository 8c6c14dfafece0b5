"""Endpoint modules for the GitHub API.

Available endpoint groups:
    - users: User profiles

"""

from github_user_client.endpoints.base import BaseEndpoint
from github_user_client.endpoints.users import UsersEndpoint

__all__ = [
    "BaseEndpoint",
    "UsersEndpoint",
]
