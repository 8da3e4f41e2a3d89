"""Directory client for Microsoft Graph operations.

Page-level access to the Graph ``/users``, ``/groups`` and
``/groups/{id}/members`` collections. List methods return exactly one page;
callers follow ``@odata.nextLink`` through list_next_page(), one request at a
time. All methods return OperationResult.
"""

from typing import Any, Iterable, Optional
from urllib.parse import quote

import structlog

from infrastructure.clients.microsoft_graph.executor import execute_graph_call
from infrastructure.clients.microsoft_graph.session_provider import (
    GraphSessionProvider,
)
from infrastructure.operations.result import OperationResult

logger = structlog.get_logger()

DEFAULT_BASE_URL = "https://graph.microsoft.com/v1.0"


class GraphDirectoryClient:
    """Client for Microsoft Graph directory operations.

    Args:
        session_provider: GraphSessionProvider for authenticated sessions
        base_url: Graph API root, without trailing slash
        timeout: Per-request timeout in seconds
    """

    def __init__(
        self,
        session_provider: GraphSessionProvider,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
    ) -> None:
        self._session_provider = session_provider
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._logger = logger.bind(component="graph_directory_client")

    def _get_json(
        self, url: str, params: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        with self._session_provider.session() as session:
            with session.get(url, params=params, timeout=self._timeout) as response:
                response.raise_for_status()
                return response.json()

    @staticmethod
    def _list_params(
        filter_expression: Optional[str],
        select: Optional[Iterable[str]],
        top: Optional[int],
    ) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if filter_expression:
            params["$filter"] = filter_expression
        if select:
            params["$select"] = ",".join(select)
        if top:
            params["$top"] = top
        return params

    def list_users_page(
        self,
        filter_expression: Optional[str] = None,
        select: Optional[Iterable[str]] = None,
        top: Optional[int] = None,
    ) -> OperationResult:
        """Fetch the first page of users.

        Args:
            filter_expression: Rendered OData ``$filter`` (values already escaped)
            select: Properties to return
            top: Page size

        Returns:
            OperationResult with the raw response dict (``value``,
            ``@odata.nextLink``) in data field
        """
        params = self._list_params(filter_expression, select, top)
        self._logger.debug("listing_users_page", filter=filter_expression)
        return execute_graph_call(
            "list_users_page",
            lambda: self._get_json(f"{self._base_url}/users", params),
        )

    def list_groups_page(
        self,
        filter_expression: Optional[str] = None,
        select: Optional[Iterable[str]] = None,
        top: Optional[int] = None,
    ) -> OperationResult:
        """Fetch the first page of groups.

        Returns:
            OperationResult with the raw response dict in data field
        """
        params = self._list_params(filter_expression, select, top)
        self._logger.debug("listing_groups_page", filter=filter_expression)
        return execute_graph_call(
            "list_groups_page",
            lambda: self._get_json(f"{self._base_url}/groups", params),
        )

    def list_members_page(
        self,
        group_id: str,
        select: Optional[Iterable[str]] = None,
        top: Optional[int] = None,
    ) -> OperationResult:
        """Fetch the first page of a group's direct members.

        Members are polymorphic; each item carries ``@odata.type``.

        Returns:
            OperationResult with the raw response dict in data field
        """
        params = self._list_params(None, select, top)
        url = f"{self._base_url}/groups/{quote(group_id, safe='')}/members"
        self._logger.debug("listing_members_page", group_id=group_id)
        return execute_graph_call(
            "list_members_page", lambda: self._get_json(url, params)
        )

    def list_next_page(self, next_link: str) -> OperationResult:
        """Fetch the page behind an ``@odata.nextLink``.

        The link already encodes the original query and is requested as-is.
        """
        self._logger.debug("listing_next_page")
        return execute_graph_call("list_next_page", lambda: self._get_json(next_link))

    def add_member_reference(self, group_id: str, member_id: str) -> OperationResult:
        """Add a directory object to a group's members.

        Single write, not retried.

        Args:
            group_id: Group object ID
            member_id: Directory object ID of the new member

        Returns:
            OperationResult with no data on success
        """
        url = f"{self._base_url}/groups/{quote(group_id, safe='')}/members/$ref"
        body = {"@odata.id": f"{self._base_url}/directoryObjects/{member_id}"}
        self._logger.info("adding_member_reference", group_id=group_id, member_id=member_id)

        def api_call() -> None:
            with self._session_provider.session() as session:
                with session.post(url, json=body, timeout=self._timeout) as response:
                    response.raise_for_status()
            return None

        return execute_graph_call("add_member_reference", api_call, max_retries=0)
