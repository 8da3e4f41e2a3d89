"""Service layer for the directory module.

Thin, synchronous entry points over one DirectoryClient. Each call runs
inside its own operation logging context so the page fetches of one check
carry the same correlation id.
"""

from typing import TYPE_CHECKING, Optional, Union

from infrastructure.logging import bind_operation_context, get_module_logger
from infrastructure.operations import OperationResult
from modules.directory.domain.models import CollectionKind, DirectoryObject
from modules.directory.membership import MembershipChecker
from modules.directory.mutator import GroupMembershipMutator
from modules.directory.resolver import IdentityResolver

if TYPE_CHECKING:
    from modules.directory.providers.base import DirectoryClient

logger = get_module_logger()

__all__ = ["MembershipService"]


class MembershipService:
    """Facade composing resolver, checker and mutator over one client.

    Args:
        client: DirectoryClient every operation runs against
        provider: Provider name, bound into the logging context
        page_size: Optional page size hint for every query
    """

    def __init__(
        self,
        client: "DirectoryClient",
        provider: Optional[str] = None,
        page_size: Optional[int] = None,
    ):
        self.client = client
        self.provider = provider or getattr(client, "name", None)
        self.resolver = IdentityResolver(client, page_size=page_size)
        self.checker = MembershipChecker(
            client, resolver=self.resolver, page_size=page_size
        )
        self.mutator = GroupMembershipMutator(client, resolver=self.resolver)

    def find_user(self, mail: str) -> Optional[DirectoryObject]:
        with bind_operation_context(operation="find_user", provider=self.provider):
            return self.resolver.resolve_by_mail(CollectionKind.USERS, mail)

    def find_group(self, mail: str) -> Optional[DirectoryObject]:
        with bind_operation_context(operation="find_group", provider=self.provider):
            return self.resolver.resolve_by_mail(CollectionKind.GROUPS, mail)

    def is_member(self, group_id: str, user: Union[DirectoryObject, str]) -> bool:
        with bind_operation_context(
            operation="is_member", provider=self.provider, group_id=group_id
        ):
            return self.checker.is_member(group_id, user)

    def is_member_by_mail(self, group_mail: str, user_mail: str) -> bool:
        with bind_operation_context(
            operation="is_member_by_mail", provider=self.provider
        ):
            return self.checker.is_member_by_mail(group_mail, user_mail)

    def add_user_to_group(self, user_mail: str, group_mail: str) -> OperationResult:
        """Add a user to a group, both identified by mail.

        Returns:
            OperationResult from GroupMembershipMutator.add_user_to_group
        """
        with bind_operation_context(
            operation="add_user_to_group", provider=self.provider
        ):
            result = self.mutator.add_user_to_group(user_mail, group_mail)
            logger.info(
                "add_user_to_group_completed",
                status=result.status.value,
                error_code=result.error_code,
            )
            return result
