"""
Application-scoped service providers.

Provides cached factory functions for settings and the membership service.
"""

from infrastructure.services.providers import (
    get_settings,
    get_membership_service,
)

__all__ = [
    "get_settings",
    "get_membership_service",
]
