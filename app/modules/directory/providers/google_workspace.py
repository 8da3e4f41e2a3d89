"""Google Workspace directory adapter.

Implements the DirectoryClient contract over the Admin SDK Directory API.
Google pages with ``pageToken``/``nextPageToken``; the adapter keeps the
original request parameters in the continuation token's private context so
fetch_next() can replay the same query for the next page.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

from pydantic import ValidationError

from infrastructure.clients.google_workspace import DirectoryClient, SessionProvider
from modules.directory.domain.errors import TransportFailure
from modules.directory.domain.models import (
    CollectionKind,
    ContinuationToken,
    DirectoryObject,
    DirectoryQuery,
    MemberKind,
    Page,
)
from modules.directory.filters import render_google_query
from modules.directory.providers import register_provider
from modules.directory.providers.base import DirectoryAdapter
from modules.directory.schemas import GoogleGroup, GoogleMember, GoogleUser

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

# Canonical select fields -> Google partial response fields, per collection
FIELD_MAP: Dict[CollectionKind, Dict[str, str]] = {
    CollectionKind.USERS: {
        "id": "id",
        "displayName": "name/fullName",
        "mail": "primaryEmail",
    },
    CollectionKind.GROUPS: {"id": "id", "displayName": "name", "mail": "email"},
    CollectionKind.GROUP_MEMBERS: {"id": "id", "mail": "email"},
}

ITEMS_KEY: Dict[CollectionKind, str] = {
    CollectionKind.USERS: "users",
    CollectionKind.GROUPS: "groups",
    CollectionKind.GROUP_MEMBERS: "members",
}

MEMBER_TYPES: Dict[str, MemberKind] = {
    "USER": MemberKind.USER,
    "GROUP": MemberKind.GROUP,
}

# Admin SDK upper bounds for maxResults
MAX_RESULTS: Dict[CollectionKind, int] = {
    CollectionKind.USERS: 500,
    CollectionKind.GROUPS: 200,
    CollectionKind.GROUP_MEMBERS: 200,
}


@register_provider("google")
class GoogleWorkspaceDirectory(DirectoryAdapter):
    """DirectoryClient backed by Google Workspace.

    Args:
        client: Page-level Admin SDK DirectoryClient
    """

    name = "google"

    def __init__(self, client: DirectoryClient) -> None:
        super().__init__()
        self._client = client

    @classmethod
    def from_settings(cls, settings: "Settings") -> "GoogleWorkspaceDirectory":
        google = settings.google_workspace
        session_provider = SessionProvider(
            credentials_json=google.GCP_SERVICE_ACCOUNT_KEY_FILE,
            default_delegated_email=google.GOOGLE_DELEGATED_ADMIN_EMAIL or None,
        )
        client = DirectoryClient(
            session_provider=session_provider,
            default_customer_id=google.GOOGLE_WORKSPACE_CUSTOMER_ID or "my_customer",
        )
        return cls(client)

    def _fields(self, collection: CollectionKind, select: Tuple[str, ...]) -> str:
        mapping = FIELD_MAP[collection]
        item_fields = [mapping[f] for f in select if f in mapping]
        if collection is CollectionKind.GROUP_MEMBERS:
            item_fields.append("type")
        if "id" not in item_fields:
            item_fields.insert(0, "id")
        return f"nextPageToken,{ITEMS_KEY[collection]}({','.join(item_fields)})"

    def _request(
        self,
        collection: CollectionKind,
        params: Dict[str, Any],
        page_token: Optional[str] = None,
    ) -> Page:
        if collection is CollectionKind.USERS:
            result = self._client.list_users_page(page_token=page_token, **params)
        elif collection is CollectionKind.GROUPS:
            result = self._client.list_groups_page(page_token=page_token, **params)
        else:
            result = self._client.list_members_page(page_token=page_token, **params)

        data = self._unwrap(result, f"list_{collection.value}") or {}
        raw_items = data.get(ITEMS_KEY[collection], []) or []
        items = tuple(
            obj
            for obj in (self._normalize(collection, raw) for raw in raw_items)
            if obj is not None
        )

        next_page_token = data.get("nextPageToken")
        next_token = None
        if next_page_token:
            next_token = ContinuationToken(
                value=next_page_token, context=(collection, dict(params))
            )
        return Page(items=items, next_token=next_token)

    def fetch_page(self, query: DirectoryQuery) -> Page:
        params: Dict[str, Any] = {"fields": self._fields(query.collection, query.select)}
        if query.page_size:
            params["maxResults"] = min(query.page_size, MAX_RESULTS[query.collection])
        if query.collection is CollectionKind.GROUP_MEMBERS:
            params["group_key"] = query.group_id
        if query.filter is not None:
            if query.collection is CollectionKind.GROUP_MEMBERS:
                raise ValueError("Google members listing does not support filters")
            params["query"] = render_google_query(query.filter)

        self._logger.debug(
            "fetching_first_page",
            collection=query.collection.value,
            group_id=query.group_id,
        )
        return self._request(query.collection, params)

    def fetch_next(self, token: ContinuationToken) -> Page:
        if not isinstance(token.context, tuple) or len(token.context) != 2:
            raise ValueError("continuation token was not issued by the google adapter")
        collection, params = token.context
        return self._request(collection, params, page_token=token.value)

    def add_member_reference(self, group_id: str, member_id: str) -> None:
        result = self._client.add_member(group_id, {"id": member_id, "role": "MEMBER"})
        self._unwrap(result, "add_member")

    def _normalize(
        self, collection: CollectionKind, raw: Dict[str, Any]
    ) -> Optional[DirectoryObject]:
        try:
            if collection is CollectionKind.USERS:
                user = GoogleUser.model_validate(raw)
                full_name = user.name.fullName if user.name else None
                return self._build(user.id, full_name, user.primaryEmail, MemberKind.USER)
            if collection is CollectionKind.GROUPS:
                group = GoogleGroup.model_validate(raw)
                return self._build(group.id, group.name, group.email, MemberKind.GROUP)
            member = GoogleMember.model_validate(raw)
        except ValidationError as exc:
            raise TransportFailure("google returned a malformed directory object") from exc

        kind = MEMBER_TYPES.get((member.type or "").upper(), MemberKind.OTHER)
        return self._build(member.id, None, member.email, kind)

    def _build(
        self,
        object_id: Optional[str],
        display_name: Optional[str],
        mail: Optional[str],
        kind: MemberKind,
    ) -> Optional[DirectoryObject]:
        if not object_id:
            self._logger.debug("skipping_object_without_id", mail=mail, kind=kind.value)
            return None
        return DirectoryObject(id=object_id, display_name=display_name, mail=mail, kind=kind)
