"""Shared fixtures for Microsoft Graph client tests."""

from typing import Any, Callable, Optional
from unittest.mock import MagicMock, Mock

import pytest
import requests


@pytest.fixture
def make_http_error() -> Callable:
    """Factory fixture for ``requests.HTTPError`` carrying a Graph error body.

    Example:
        error = make_http_error(429, retry_after="5")
    """

    def _make(
        status: int = 500,
        message: str = "Service unavailable",
        retry_after: Optional[str] = None,
    ) -> requests.HTTPError:
        response = Mock()
        response.status_code = status
        response.headers = {"Retry-After": retry_after} if retry_after else {}
        response.json.return_value = {
            "error": {"code": "Request_Failed", "message": message}
        }
        return requests.HTTPError(f"{status} Error", response=response)

    return _make


@pytest.fixture
def mock_graph_session():
    """Mock requests.Session usable as a context manager.

    ``session.get`` / ``session.post`` return a response that is itself a
    context manager yielding the same response.
    """
    session = MagicMock()
    session.__enter__.return_value = session

    def _response(payload: Any = None, error: Optional[Exception] = None) -> MagicMock:
        response = MagicMock()
        response.__enter__.return_value = response
        response.json.return_value = payload
        if error is not None:
            response.raise_for_status.side_effect = error
        return response

    session.make_response = _response
    return session


@pytest.fixture
def mock_graph_session_provider(mock_graph_session):
    provider = Mock()
    provider.session.return_value = mock_graph_session
    return provider
