import sys
from pathlib import Path
from unittest.mock import Mock

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `modules.directory`) works during pytest collection regardless
# of the invocation directory.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest
import structlog

from modules.directory.domain.models import ContinuationToken, Page
from modules.directory.providers.base import DirectoryClient


@pytest.fixture(autouse=True)
def clear_log_context():
    """Keep structlog contextvars from leaking between tests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


class FakeDirectoryClient:
    """In-memory DirectoryClient that records every call.

    Args:
        first_pages: Page returned by fetch_page(), or a callable taking the
            query and returning one
        pages_by_token: Mapping of token value -> Page for fetch_next()
        failures: Mapping of token value -> exception raised by fetch_next()
    """

    def __init__(self, first_pages=None, pages_by_token=None, failures=None):
        self.first_pages = first_pages if first_pages is not None else Page()
        self.pages_by_token = pages_by_token or {}
        self.failures = failures or {}
        self.queries = []
        self.tokens = []
        self.writes = []
        self.write_error = None

    @property
    def fetch_count(self):
        return len(self.queries) + len(self.tokens)

    def fetch_page(self, query):
        self.queries.append(query)
        if callable(self.first_pages):
            return self.first_pages(query)
        return self.first_pages

    def fetch_next(self, token: ContinuationToken):
        self.tokens.append(token)
        if token.value in self.failures:
            raise self.failures[token.value]
        return self.pages_by_token[token.value]

    def add_member_reference(self, group_id, member_id):
        self.writes.append((group_id, member_id))
        if self.write_error is not None:
            raise self.write_error


@pytest.fixture
def fake_client_factory():
    """Factory for FakeDirectoryClient instances.

    Example:
        def test_walk(fake_client_factory):
            first, by_token = make_pages([a, b], [c])
            client = fake_client_factory(first, by_token)
    """

    def _make(first_pages=None, pages_by_token=None, failures=None):
        client = FakeDirectoryClient(first_pages, pages_by_token, failures)
        assert isinstance(client, DirectoryClient)
        return client

    return _make


@pytest.fixture
def mock_directory_client():
    """Mock satisfying the DirectoryClient protocol."""
    return Mock(spec=DirectoryClient)
