"""
Unit tests for application-scoped service providers.

Tests cover:
- get_settings() caching behavior
- get_membership_service() wiring from settings
"""

from unittest.mock import Mock, patch

import pytest

from infrastructure.configuration import Settings
from infrastructure.services.providers import get_membership_service, get_settings
from modules.directory.service import MembershipService


@pytest.fixture(autouse=True)
def clear_provider_caches():
    get_settings.cache_clear()
    get_membership_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_membership_service.cache_clear()


class TestGetSettings:
    def test_returns_settings_instance(self):
        assert isinstance(get_settings(), Settings)

    def test_returns_cached_instance(self):
        assert get_settings() is get_settings()

    def test_cache_can_be_cleared(self):
        first = get_settings()
        get_settings.cache_clear()
        assert get_settings() is not first


class TestGetMembershipService:
    def test_builds_service_for_configured_provider(self):
        settings = Mock()
        settings.directory.provider = "graph"
        settings.directory.page_size = 50
        client = Mock()

        with patch(
            "infrastructure.services.providers.get_settings", return_value=settings
        ), patch(
            "modules.directory.providers.build_directory_client", return_value=client
        ) as mock_build, patch(
            "infrastructure.services.providers.configure_logging"
        ) as mock_configure:
            service = get_membership_service()

        mock_configure.assert_called_once_with(settings=settings)
        mock_build.assert_called_once_with(settings)
        assert isinstance(service, MembershipService)
        assert service.client is client
        assert service.provider == "graph"

    def test_service_is_cached(self):
        settings = Mock()
        settings.directory.provider = "google"
        settings.directory.page_size = 100

        with patch(
            "infrastructure.services.providers.get_settings", return_value=settings
        ), patch(
            "modules.directory.providers.build_directory_client", return_value=Mock()
        ) as mock_build, patch("infrastructure.services.providers.configure_logging"):
            first = get_membership_service()
            second = get_membership_service()

        assert first is second
        mock_build.assert_called_once()
