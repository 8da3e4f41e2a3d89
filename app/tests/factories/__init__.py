"""Test data factories for deterministic test data generation."""

from tests.factories.directory import (
    make_google_members_payload,
    make_google_users_payload,
    make_graph_payload,
    make_group,
    make_pages,
    make_service_principal,
    make_user,
    make_users,
)

__all__ = [
    "make_google_members_payload",
    "make_google_users_payload",
    "make_graph_payload",
    "make_group",
    "make_pages",
    "make_service_principal",
    "make_user",
    "make_users",
]
