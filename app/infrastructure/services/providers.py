"""
Factory functions for application-scoped services.

Provides process-wide singleton providers for settings and the directory
membership service.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.logging import configure_logging


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the application.
    The @lru_cache decorator ensures only ONE instance is created per process.

        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_membership_service():
    """Get application-scoped MembershipService singleton.

    Configures logging, then builds the directory adapter selected by
    DIRECTORY_PROVIDER. Credentials are exchanged per request by the vendor
    libraries, so caching the service does not hold stale tokens.

    Returns:
        MembershipService: Service bound to the configured directory client.

    Usage:
        service = get_membership_service()
        if service.is_member_by_mail("eng@example.com", "ada@example.com"):
            ...
    """
    from modules.directory.providers import build_directory_client
    from modules.directory.service import MembershipService

    settings = get_settings()
    configure_logging(settings=settings)
    client = build_directory_client(settings)
    return MembershipService(
        client,
        provider=settings.directory.provider,
        page_size=settings.directory.page_size,
    )
