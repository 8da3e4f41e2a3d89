"""Microsoft Graph directory adapter.

Graph pages with ``@odata.nextLink``: an absolute URL that already encodes the
original query, so the continuation token carries it as its value and
fetch_next() requests it unchanged. Member entries are polymorphic and tagged
with ``@odata.type``.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional

from pydantic import ValidationError

from infrastructure.clients.microsoft_graph import (
    GraphDirectoryClient,
    GraphSessionProvider,
)
from modules.directory.domain.errors import TransportFailure
from modules.directory.domain.models import (
    CollectionKind,
    ContinuationToken,
    DirectoryObject,
    DirectoryQuery,
    MemberKind,
    Page,
)
from modules.directory.filters import render_odata_filter
from modules.directory.providers import register_provider
from modules.directory.providers.base import DirectoryAdapter
from modules.directory.schemas import GraphDirectoryObject

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

ODATA_TYPES: Dict[str, MemberKind] = {
    "#microsoft.graph.user": MemberKind.USER,
    "#microsoft.graph.group": MemberKind.GROUP,
    "#microsoft.graph.servicePrincipal": MemberKind.SERVICE_PRINCIPAL,
}

# Kind assumed when an item carries no @odata.type
DEFAULT_KINDS: Dict[CollectionKind, MemberKind] = {
    CollectionKind.USERS: MemberKind.USER,
    CollectionKind.GROUPS: MemberKind.GROUP,
    CollectionKind.GROUP_MEMBERS: MemberKind.OTHER,
}


@register_provider("graph")
class MicrosoftGraphDirectory(DirectoryAdapter):
    """DirectoryClient backed by Microsoft Graph.

    Args:
        client: Page-level GraphDirectoryClient
    """

    name = "graph"

    def __init__(self, client: GraphDirectoryClient) -> None:
        super().__init__()
        self._client = client

    @classmethod
    def from_settings(cls, settings: "Settings") -> "MicrosoftGraphDirectory":
        graph = settings.microsoft_graph
        session_provider = GraphSessionProvider(
            tenant_id=graph.GRAPH_TENANT_ID,
            client_id=graph.GRAPH_CLIENT_ID,
            client_secret=graph.GRAPH_CLIENT_SECRET,
        )
        client = GraphDirectoryClient(
            session_provider=session_provider,
            base_url=graph.GRAPH_BASE_URL,
            timeout=graph.GRAPH_REQUEST_TIMEOUT,
        )
        return cls(client)

    def fetch_page(self, query: DirectoryQuery) -> Page:
        filter_expression: Optional[str] = None
        if query.filter is not None:
            filter_expression = render_odata_filter(query.filter)

        self._logger.debug(
            "fetching_first_page",
            collection=query.collection.value,
            group_id=query.group_id,
        )
        if query.collection is CollectionKind.USERS:
            result = self._client.list_users_page(
                filter_expression, select=query.select, top=query.page_size
            )
        elif query.collection is CollectionKind.GROUPS:
            result = self._client.list_groups_page(
                filter_expression, select=query.select, top=query.page_size
            )
        else:
            if filter_expression:
                raise ValueError("Graph members listing does not support filters")
            result = self._client.list_members_page(
                query.group_id, select=query.select, top=query.page_size
            )
        data = self._unwrap(result, f"list_{query.collection.value}")
        return self._to_page(query.collection, data)

    def fetch_next(self, token: ContinuationToken) -> Page:
        collection = token.context
        if not isinstance(collection, CollectionKind):
            raise ValueError("continuation token was not issued by the graph adapter")
        result = self._client.list_next_page(token.value)
        data = self._unwrap(result, "list_next_page")
        return self._to_page(collection, data)

    def add_member_reference(self, group_id: str, member_id: str) -> None:
        result = self._client.add_member_reference(group_id, member_id)
        self._unwrap(result, "add_member_reference")

    def _to_page(self, collection: CollectionKind, data: Optional[Dict[str, Any]]) -> Page:
        data = data or {}
        items = []
        for raw in data.get("value", []) or []:
            obj = self._normalize(collection, raw)
            if obj is not None:
                items.append(obj)

        next_link = data.get("@odata.nextLink")
        next_token = ContinuationToken(next_link, context=collection) if next_link else None
        return Page(items=tuple(items), next_token=next_token)

    def _normalize(
        self, collection: CollectionKind, raw: Dict[str, Any]
    ) -> Optional[DirectoryObject]:
        try:
            entry = GraphDirectoryObject.model_validate(raw)
        except ValidationError as exc:
            raise TransportFailure("graph returned a malformed directory object") from exc

        if not entry.id:
            self._logger.debug("skipping_object_without_id", odata_type=entry.odata_type)
            return None

        if entry.odata_type:
            kind = ODATA_TYPES.get(entry.odata_type, MemberKind.OTHER)
        else:
            kind = DEFAULT_KINDS[collection]
        return DirectoryObject(
            id=entry.id, display_name=entry.displayName, mail=entry.mail, kind=kind
        )
