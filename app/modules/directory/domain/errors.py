"""Errors for the directory module."""

from typing import Any


class DirectoryError(Exception):
    """Base class for directory lookup errors."""


class TransportFailure(DirectoryError):
    """Raised by directory clients when a page fetch or write fails.

    Covers network, authorization, malformed filter and rate limit failures
    alike; the core does not retry or distinguish them.

    Attributes:
        message: human-friendly message
        response: the classified OperationResult reported by the client, if any
    """

    def __init__(self, message: str, response: Any = None):
        super().__init__(message)
        self.response = response


class PaginationError(DirectoryError):
    """Raised when the server hands back a continuation token already consumed."""


class InvalidFilterValue(DirectoryError, ValueError):
    """Raised when a filter value is blank or not a string."""
