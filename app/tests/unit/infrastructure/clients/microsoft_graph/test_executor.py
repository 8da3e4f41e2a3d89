"""Unit tests for Microsoft Graph executor module."""

from unittest.mock import Mock, patch

import pytest
import requests

from infrastructure.clients.microsoft_graph.executor import (
    ERROR_CONFIG,
    _calculate_retry_delay,
    execute_graph_call,
)
from infrastructure.operations.status import OperationStatus


@pytest.mark.unit
class TestCalculateRetryDelay:
    def test_rate_limit_honours_retry_after(self):
        assert _calculate_retry_delay(0, 429, "7") == 7.0

    @pytest.mark.parametrize("retry_after", [None, "", "Wed, 21 Oct 2026 07:28:00 GMT"])
    def test_rate_limit_default_delay(self, retry_after):
        delay = _calculate_retry_delay(0, 429, retry_after)
        assert delay == float(ERROR_CONFIG["rate_limit_delay"])

    def test_exponential_backoff(self):
        assert _calculate_retry_delay(2, 502) == 4.0


@pytest.mark.unit
class TestExecuteGraphCall:
    def test_successful_call(self):
        result = execute_graph_call("list_users_page", Mock(return_value={"value": []}))

        assert result.is_success
        assert result.data == {"value": []}

    def test_throttled_call_retried_after_header_delay(self, make_http_error):
        api_call = Mock(side_effect=[make_http_error(429, retry_after="3"), {"value": []}])

        with patch(
            "infrastructure.clients.microsoft_graph.executor.time.sleep"
        ) as mock_sleep:
            result = execute_graph_call("list_users_page", api_call)

        assert result.is_success
        mock_sleep.assert_called_once_with(3.0)

    def test_retries_exhausted_returns_classified_error(self, make_http_error):
        api_call = Mock(side_effect=make_http_error(503))

        with patch("infrastructure.clients.microsoft_graph.executor.time.sleep"):
            result = execute_graph_call("list_users_page", api_call, max_retries=1)

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "SERVER_ERROR"
        assert api_call.call_count == 2

    def test_bad_filter_not_retried(self, make_http_error):
        api_call = Mock(
            side_effect=make_http_error(400, message="Invalid filter clause")
        )

        result = execute_graph_call("list_users_page", api_call)

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "BAD_REQUEST"
        assert "Invalid filter clause" in result.message
        assert api_call.call_count == 1

    def test_connection_error_is_transient(self):
        api_call = Mock(side_effect=requests.ConnectionError("reset"))

        result = execute_graph_call("list_users_page", api_call)

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "CONNECTION_ERROR"
        assert api_call.call_count == 1

    def test_unexpected_error_is_permanent(self):
        api_call = Mock(side_effect=RuntimeError("token acquisition failed"))

        result = execute_graph_call("list_users_page", api_call)

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "GRAPH_API_ERROR"
