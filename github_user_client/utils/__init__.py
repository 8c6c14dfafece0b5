"""Utility modules for the GitHub user client."""

from github_user_client.utils.logger import configure_logging

__all__ = ["configure_logging"]
