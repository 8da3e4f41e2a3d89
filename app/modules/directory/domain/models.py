"""Provider-agnostic data models for the directory module.

Lightweight frozen dataclasses (not Pydantic) shared by the page walker, the
identity resolver, the membership checker and the directory adapters.
Provider payloads are validated with the Pydantic schemas in
``modules.directory.schemas`` and normalized into these structures.

Everything here is ephemeral: fetched fresh per call, never cached, never
written back.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple


class MemberKind(Enum):
    """Tag for the kind of directory object a member entry refers to."""

    USER = "user"
    GROUP = "group"
    SERVICE_PRINCIPAL = "service_principal"
    OTHER = "other"


class CollectionKind(Enum):
    """Remote collections the directory client can page through."""

    USERS = "users"
    GROUPS = "groups"
    GROUP_MEMBERS = "group_members"


@dataclass(frozen=True)
class DirectoryObject:
    """A user, group or service principal entry.

    Attributes:
        id: Opaque, server-assigned, immutable identifier. The only key used
            for membership comparison.
        display_name: Human-readable name, if the directory returned one.
        mail: Mail address; a lookup key only, not guaranteed unique.
        kind: What the object is.
    """

    id: str
    display_name: Optional[str] = None
    mail: Optional[str] = None
    kind: MemberKind = MemberKind.USER


@dataclass(frozen=True)
class ContinuationToken:
    """Opaque server-issued cursor for the next page.

    ``value`` is the server cursor (Google ``nextPageToken``, Graph
    ``@odata.nextLink``). ``context`` is private to the adapter that issued the
    token and takes no part in equality.
    """

    value: str
    context: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Page:
    """One page of results, in server order.

    A page without ``next_token`` is the final page.
    """

    items: Tuple[DirectoryObject, ...] = ()
    next_token: Optional[ContinuationToken] = None

    @property
    def is_last(self) -> bool:
        return self.next_token is None


@dataclass(frozen=True)
class EqualsFilter:
    """Exact-match filter on one attribute.

    Adapters render it into their query dialect through the escape functions
    in ``modules.directory.filters``; the raw value is never interpolated.
    """

    attribute: str
    value: str


@dataclass(frozen=True)
class DirectoryQuery:
    """Initial page request: collection, optional filter, selected fields.

    ``group_id`` is required for ``CollectionKind.GROUP_MEMBERS``.
    """

    collection: CollectionKind
    filter: Optional[EqualsFilter] = None
    select: Tuple[str, ...] = ("id", "displayName", "mail")
    group_id: Optional[str] = None
    page_size: Optional[int] = None

    def __post_init__(self):
        if self.collection is CollectionKind.GROUP_MEMBERS and not self.group_id:
            raise ValueError("group_id is required to list group members")


@dataclass(frozen=True)
class MembershipQuery:
    """A single "is this user in this group" question."""

    group_id: str
    user_id: str


@dataclass(frozen=True)
class MailLookup:
    """Outcome of a mail lookup against the first page of a collection.

    Attributes:
        mail: The mail address looked up.
        collection: The collection searched.
        candidates: First-page objects whose mail matches, in server order.
    """

    mail: str
    collection: CollectionKind
    candidates: Tuple[DirectoryObject, ...] = ()

    @property
    def match(self) -> Optional[DirectoryObject]:
        """First candidate in server order, or None when nothing matched."""
        return self.candidates[0] if self.candidates else None

    @property
    def is_ambiguous(self) -> bool:
        """True when more than one object carries the same mail."""
        return len(self.candidates) > 1
