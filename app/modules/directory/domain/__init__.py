"""Domain models and errors for the directory module."""

from modules.directory.domain.errors import (
    DirectoryError,
    InvalidFilterValue,
    PaginationError,
    TransportFailure,
)
from modules.directory.domain.models import (
    CollectionKind,
    ContinuationToken,
    DirectoryObject,
    DirectoryQuery,
    EqualsFilter,
    MailLookup,
    MemberKind,
    MembershipQuery,
    Page,
)

__all__ = [
    "CollectionKind",
    "ContinuationToken",
    "DirectoryError",
    "DirectoryObject",
    "DirectoryQuery",
    "EqualsFilter",
    "InvalidFilterValue",
    "MailLookup",
    "MemberKind",
    "MembershipQuery",
    "Page",
    "PaginationError",
    "TransportFailure",
]
