"""Low-level Microsoft Graph execution utilities with retry and error handling."""

import time
from typing import Any, Callable, Optional

import requests
import structlog

from infrastructure.operations.classifiers import classify_requests_error
from infrastructure.operations.result import OperationResult

logger = structlog.get_logger()


ERROR_CONFIG: dict[str, Any] = {
    "retry_errors": [429, 500, 502, 503, 504],
    "rate_limit_delay": 60,
    "default_max_retries": 3,
    "default_backoff_factor": 1.0,
}


def _calculate_retry_delay(
    attempt: int, status_code: int, retry_after: Optional[str] = None
) -> float:
    """Calculate retry delay, honouring Graph's Retry-After header on 429.

    Args:
        attempt: Current attempt number (0-indexed)
        status_code: HTTP status code from error response
        retry_after: Raw Retry-After header value, if any

    Returns:
        Delay in seconds before next retry
    """
    if status_code == 429:
        if retry_after and retry_after.isdigit():
            return float(retry_after)
        return float(ERROR_CONFIG["rate_limit_delay"])
    return float(ERROR_CONFIG["default_backoff_factor"]) * (2**attempt)


def execute_graph_call(
    operation_name: str,
    api_callable: Callable[[], Any],
    max_retries: Optional[int] = None,
) -> OperationResult:
    """Execute a Microsoft Graph call with retry logic and error handling.

    Args:
        operation_name: Name of operation for logging (e.g., "list_members_page")
        api_callable: Callable performing the HTTP request and returning the body
        max_retries: Maximum retry attempts (uses default if None)

    Returns:
        OperationResult with standardized status, message, data, error_code
    """
    max_attempts = (
        max_retries if max_retries is not None else ERROR_CONFIG["default_max_retries"]
    )
    retry_codes = set(ERROR_CONFIG["retry_errors"])

    for attempt in range(max_attempts + 1):
        try:
            logger.debug(
                "graph_call_attempt",
                operation=operation_name,
                attempt=attempt + 1,
                max_attempts=max_attempts + 1,
            )

            result = api_callable()

            if attempt > 0:
                logger.info(
                    "graph_retry_success",
                    operation=operation_name,
                    attempt=attempt + 1,
                )

            return OperationResult.success(
                data=result,
                message=f"{operation_name} succeeded",
            )

        except requests.HTTPError as e:
            response = e.response
            status_code = response.status_code if response is not None else None

            if status_code in retry_codes and attempt < max_attempts:
                delay = _calculate_retry_delay(
                    attempt, status_code, response.headers.get("Retry-After")
                )
                logger.warning(
                    "graph_retrying",
                    operation=operation_name,
                    attempt=attempt + 1,
                    status_code=status_code,
                    delay=delay,
                )
                time.sleep(delay)
                continue

            logger.error(
                "graph_api_error",
                operation=operation_name,
                status_code=status_code,
                error=str(e),
            )
            return classify_requests_error(e)

        except requests.RequestException as e:
            logger.error(
                "graph_request_failed",
                operation=operation_name,
                error=str(e),
            )
            return classify_requests_error(e)

        except Exception as e:
            logger.error(
                "graph_unexpected_error",
                operation=operation_name,
                error=str(e),
            )
            return OperationResult.permanent_error(
                message=str(e),
                error_code="GRAPH_API_ERROR",
            )

    # Fallback if loop exits without return
    return OperationResult.permanent_error(
        message=f"{operation_name} exhausted retries",
        error_code="GRAPH_API_ERROR",
    )
