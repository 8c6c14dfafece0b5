"""Logging setup for the GitHub user client.

Module loggers live under 'github_user_client' (e.g. 'github_user_client.http'
logs each request and response at DEBUG). The token is never logged.

Example:
    >>> import logging
    >>> logging.getLogger("github_user_client").setLevel(logging.DEBUG)

"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Name given to the handler installed by configure_logging()
_HANDLER_NAME = "github_user_client.stream"

logger = logging.getLogger("github_user_client")

# Quiet unless the application opts in
logger.setLevel(logging.WARNING)
logger.addHandler(logging.NullHandler())


def configure_logging(
    level: int = logging.INFO,
    format_string: str | None = None,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Send the client's log records to a stream.

    Calling this again replaces the handler installed by the previous call,
    so records are never written twice. Handlers added by the application
    are left alone.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO).
        format_string: Format string for log messages.
        stream: Output stream (defaults to sys.stderr).

    Returns:
        The installed handler.

    Example:
        >>> from github_user_client import configure_logging
        >>> configure_logging(level=logging.DEBUG)

    """
    for existing in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(existing)
        existing.close()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
