#!/usr/bin/env python
"""Fetch GitHub user profiles with the async client.

Set GITHUB_API_TOKEN (or put it in a .env file) before running.

Run: python examples/fetch_user.py octocat torvalds
"""

import asyncio
import logging
import sys

import httpx

from github_user_client import GitHubClient, configure_logging


async def main(usernames: list[str]) -> int:
    """Look up each user concurrently and print a short summary."""
    configure_logging(level=logging.DEBUG)

    async with GitHubClient() as client:
        results = await asyncio.gather(
            *(client.users.get(name) for name in usernames),
            return_exceptions=True,
        )

    exit_code = 0
    for name, result in zip(usernames, results):
        if isinstance(result, httpx.HTTPStatusError):
            print(f"  {name}: HTTP {result.response.status_code}")
            exit_code = 1
        elif isinstance(result, httpx.HTTPError):
            print(f"  {name}: request failed ({result})")
            exit_code = 1
        elif isinstance(result, BaseException):
            raise result
        else:
            user = result.json()
            print(f"  {user['login']}: {user.get('name') or 'N/A'}, {user['public_repos']} public repos")

    return exit_code


if __name__ == "__main__":
    sys.exit(asyncio.run(main(sys.argv[1:] or ["octocat"])))
