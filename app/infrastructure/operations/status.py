"""Outcome codes for directory calls.

The classifiers map vendor HTTP failures onto these codes; the mutator hands
them back to callers unchanged.
"""

from enum import Enum


class OperationStatus(Enum):
    """Outcome of one directory request or membership write."""

    SUCCESS = "success"
    # 429, 5xx and connection failures
    TRANSIENT_ERROR = "transient_error"
    # rejected filter, conflicting write, malformed payload
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"

    @property
    def is_retryable(self) -> bool:
        """True when repeating the same request later may succeed."""
        return self is OperationStatus.TRANSIENT_ERROR
