"""Error classifiers for directory client exceptions.

Converts vendor exceptions (Google API client, ``requests`` against Microsoft
Graph) into standardized OperationResult objects so that directory adapters
report failures the same way regardless of the backing service.

Key Functions:
- classify_http_error(): Google API HTTP errors -> OperationResult
- classify_requests_error(): Microsoft Graph ``requests`` errors -> OperationResult

Usage:
    from infrastructure.operations.classifiers import classify_http_error

    try:
        response = service.members().list(groupKey=group_id).execute()
    except Exception as exc:
        return classify_http_error(exc)
"""

from typing import Any, Optional

import requests
from googleapiclient.errors import HttpError

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

DEFAULT_RETRY_AFTER = 60


def _parse_retry_after(header_value: Any) -> int:
    if not header_value:
        return DEFAULT_RETRY_AFTER
    try:
        return int(header_value)
    except (ValueError, TypeError):
        return DEFAULT_RETRY_AFTER


def _classify_status(
    vendor: str,
    status_code: Optional[int],
    detail: str,
    retry_after_header: Any = None,
) -> OperationResult:
    """Map an HTTP status code to an OperationResult.

    Status Code Mapping:
    - 429: Rate limiting -> TRANSIENT_ERROR with retry_after
    - 401: Unauthorized -> UNAUTHORIZED
    - 403: Forbidden -> UNAUTHORIZED
    - 404: Not found -> NOT_FOUND
    - 400: Bad request (e.g. malformed filter) -> PERMANENT_ERROR
    - 5xx: Server error -> TRANSIENT_ERROR
    - Other: PERMANENT_ERROR
    """
    if status_code == 429:
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            f"{vendor} API rate limited",
            error_code="RATE_LIMITED",
            retry_after=_parse_retry_after(retry_after_header),
        )

    if status_code == 401:
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            f"{vendor} API authentication failed",
            error_code="UNAUTHORIZED",
        )

    if status_code == 403:
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            f"{vendor} API authorization denied",
            error_code="FORBIDDEN",
        )

    if status_code == 404:
        return OperationResult.error(
            OperationStatus.NOT_FOUND,
            f"{vendor} resource not found",
            error_code="NOT_FOUND",
        )

    if status_code == 400:
        return OperationResult.permanent_error(
            f"{vendor} API rejected the request: {detail}",
            error_code="BAD_REQUEST",
        )

    if status_code and 500 <= status_code < 600:
        return OperationResult.transient_error(
            f"{vendor} API server error ({status_code})",
            error_code="SERVER_ERROR",
        )

    if status_code and 400 <= status_code < 500:
        return OperationResult.permanent_error(
            f"{vendor} API client error ({status_code}): {detail}",
            error_code="HTTP_ERROR",
        )

    return OperationResult.permanent_error(
        f"{vendor} API error: {detail}",
        error_code="UNKNOWN_ERROR",
    )


def classify_http_error(exc: Exception) -> OperationResult:
    """Classify Google API HTTP errors into OperationResult.

    Handles googleapiclient.errors.HttpError by mapping its status code.
    Anything else (socket errors, timeouts) is treated as a transient
    connection error.

    Args:
        exc: Exception raised by the Google API client

    Returns:
        OperationResult with appropriate status, message, error_code, and
        retry_after (if applicable)
    """
    if not isinstance(exc, HttpError):
        return OperationResult.transient_error(
            f"Connection error: {type(exc).__name__}: {str(exc)}",
            error_code="CONNECTION_ERROR",
        )

    status_code: Optional[int] = None
    retry_after = None
    if hasattr(exc, "resp") and exc.resp:
        status_code = int(exc.resp.status) if exc.resp.status else None
        if hasattr(exc.resp, "get"):
            retry_after = exc.resp.get("retry-after")

    return _classify_status("Google", status_code, str(exc), retry_after)


def classify_requests_error(exc: Exception) -> OperationResult:
    """Classify Microsoft Graph errors raised through ``requests``.

    ``requests.HTTPError`` is mapped by status code; the Graph error message
    from the JSON body is preferred over the generic exception text.
    Timeouts and connection errors are transient.

    Args:
        exc: Exception raised while calling Microsoft Graph

    Returns:
        OperationResult with appropriate status and error code
    """
    if isinstance(exc, requests.Timeout):
        return OperationResult.transient_error(
            f"Timeout: {str(exc)}",
            error_code="TIMEOUT",
        )

    response = getattr(exc, "response", None)
    if not isinstance(exc, requests.HTTPError) or response is None:
        return OperationResult.transient_error(
            f"Connection error: {type(exc).__name__}: {str(exc)}",
            error_code="CONNECTION_ERROR",
        )

    detail = str(exc)
    try:
        payload = response.json()
    except ValueError:
        payload = None  # non-JSON body, keep the exception text
    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        detail = payload["error"].get("message") or detail

    return _classify_status(
        "Microsoft Graph",
        response.status_code,
        detail,
        response.headers.get("Retry-After"),
    )
