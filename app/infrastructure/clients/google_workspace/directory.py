"""Directory client for Google Workspace operations.

Page-level access to the Admin SDK Directory API (users, groups, members).
Every list method returns exactly one page; callers follow ``nextPageToken``
themselves, one request at a time. All methods return OperationResult.
"""

from typing import Any, Optional

import structlog

from infrastructure.clients.google_workspace.executor import execute_google_api_call
from infrastructure.clients.google_workspace.session_provider import SessionProvider
from infrastructure.operations.result import OperationResult

logger = structlog.get_logger()

USER_READONLY_SCOPE = "https://www.googleapis.com/auth/admin.directory.user.readonly"
GROUP_READONLY_SCOPE = "https://www.googleapis.com/auth/admin.directory.group.readonly"
MEMBER_READONLY_SCOPE = (
    "https://www.googleapis.com/auth/admin.directory.group.member.readonly"
)
MEMBER_SCOPE = "https://www.googleapis.com/auth/admin.directory.group.member"


class DirectoryClient:
    """Client for Google Workspace Directory API operations.

    Each method requests the narrowest OAuth scope the call needs.

    Args:
        session_provider: SessionProvider for authentication
        default_customer_id: Default customer ID (usually "my_customer")
    """

    def __init__(
        self,
        session_provider: SessionProvider,
        default_customer_id: str = "my_customer",
    ) -> None:
        self._session_provider = session_provider
        self._default_customer_id = default_customer_id
        self._logger = logger.bind(component="directory_client")

    def _service(self, scope: str, delegated_email: Optional[str]) -> Any:
        return self._session_provider.directory_service(
            scope, delegated_user_email=delegated_email
        )

    def list_users_page(
        self,
        page_token: Optional[str] = None,
        customer: Optional[str] = None,
        delegated_email: Optional[str] = None,
        **kwargs: Any,
    ) -> OperationResult:
        """Fetch one page of users.

        Args:
            page_token: ``nextPageToken`` from the previous page, if any
            customer: Customer ID (defaults to the configured customer)
            delegated_email: Email for domain-wide delegation
            **kwargs: Additional parameters (query, maxResults, fields, ...)

        Returns:
            OperationResult with the raw response dict (``users``,
            ``nextPageToken``) in data field
        """
        customer_id = customer or self._default_customer_id
        self._logger.debug(
            "listing_users_page", customer=customer_id, has_page_token=bool(page_token)
        )

        def api_call() -> dict[str, Any]:
            service = self._service(USER_READONLY_SCOPE, delegated_email)
            params = dict(kwargs, customer=customer_id)
            if page_token:
                params["pageToken"] = page_token
            return service.users().list(**params).execute()

        return execute_google_api_call("list_users_page", api_call)

    def list_groups_page(
        self,
        page_token: Optional[str] = None,
        customer: Optional[str] = None,
        delegated_email: Optional[str] = None,
        **kwargs: Any,
    ) -> OperationResult:
        """Fetch one page of groups.

        Args:
            page_token: ``nextPageToken`` from the previous page, if any
            customer: Customer ID (defaults to the configured customer)
            delegated_email: Email for domain-wide delegation
            **kwargs: Additional parameters (query, maxResults, fields, ...)

        Returns:
            OperationResult with the raw response dict (``groups``,
            ``nextPageToken``) in data field
        """
        customer_id = customer or self._default_customer_id
        self._logger.debug(
            "listing_groups_page", customer=customer_id, has_page_token=bool(page_token)
        )

        def api_call() -> dict[str, Any]:
            service = self._service(GROUP_READONLY_SCOPE, delegated_email)
            params = dict(kwargs, customer=customer_id)
            if page_token:
                params["pageToken"] = page_token
            return service.groups().list(**params).execute()

        return execute_google_api_call("list_groups_page", api_call)

    def list_members_page(
        self,
        group_key: str,
        page_token: Optional[str] = None,
        delegated_email: Optional[str] = None,
        **kwargs: Any,
    ) -> OperationResult:
        """Fetch one page of a group's direct members.

        Args:
            group_key: Group's email or unique ID
            page_token: ``nextPageToken`` from the previous page, if any
            delegated_email: Email for domain-wide delegation
            **kwargs: Additional parameters (maxResults, roles, fields, ...)

        Returns:
            OperationResult with the raw response dict (``members``,
            ``nextPageToken``) in data field
        """
        self._logger.debug(
            "listing_members_page",
            group_key=group_key,
            has_page_token=bool(page_token),
        )

        def api_call() -> dict[str, Any]:
            service = self._service(MEMBER_READONLY_SCOPE, delegated_email)
            params = dict(kwargs, groupKey=group_key)
            if page_token:
                params["pageToken"] = page_token
            return service.members().list(**params).execute()

        return execute_google_api_call("list_members_page", api_call)

    def add_member(
        self,
        group_key: str,
        body: dict[str, Any],
        delegated_email: Optional[str] = None,
    ) -> OperationResult:
        """Add a member to a group.

        Single write, not retried by callers.

        Args:
            group_key: Group's email or unique ID
            body: Member resource body (``id`` or ``email``, plus ``role``)
            delegated_email: Email for domain-wide delegation

        Returns:
            OperationResult with member data in data field
        """
        self._logger.info(
            "adding_member", group_key=group_key, member_id=body.get("id")
        )

        def api_call() -> dict[str, Any]:
            service = self._service(MEMBER_SCOPE, delegated_email)
            request = service.members().insert(groupKey=group_key, body=body)
            return request.execute()

        return execute_google_api_call("add_member", api_call, max_retries=0)
