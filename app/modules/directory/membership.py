"""Group membership checks.

Walks a group's direct member collection page by page and stops at the first
user whose identifier equals the target's. Identifiers are the only comparison
key; mail is never compared. Members that are not users (nested groups,
service principals, other objects) are skipped, even when their identifier
equals the target's.
"""

from typing import TYPE_CHECKING, Optional, Union

import structlog

from modules.directory.domain.models import (
    CollectionKind,
    DirectoryObject,
    DirectoryQuery,
    MemberKind,
    MembershipQuery,
)
from modules.directory.pagination import walk
from modules.directory.resolver import IdentityResolver

if TYPE_CHECKING:
    from modules.directory.providers.base import DirectoryClient

logger = structlog.get_logger()

MEMBER_SELECT = ("id", "displayName", "mail")


class MembershipChecker:
    """Answer "is this user a member of this group".

    Args:
        client: DirectoryClient for member pages
        resolver: IdentityResolver for the mail-based variant. Built over the
            same client when omitted.
        page_size: Optional page size hint for member pages
    """

    def __init__(
        self,
        client: "DirectoryClient",
        resolver: Optional[IdentityResolver] = None,
        page_size: Optional[int] = None,
    ):
        self._client = client
        self._resolver = resolver or IdentityResolver(client, page_size=page_size)
        self._page_size = page_size

    def is_member(
        self, group_id: str, target_user: Union[DirectoryObject, str]
    ) -> bool:
        """Return True if target_user is a direct user member of group_id.

        Args:
            group_id: Identifier of the group
            target_user: A user DirectoryObject or a user identifier

        Raises:
            ValueError: If target_user is a DirectoryObject that is not a user,
                or an identifier is empty
            TransportFailure: If any page fetch fails; the check never
                degrades to False on error
        """
        membership = MembershipQuery(group_id=group_id, user_id=self._user_id(target_user))
        if not membership.group_id:
            raise ValueError("group_id must not be empty")

        query = DirectoryQuery(
            collection=CollectionKind.GROUP_MEMBERS,
            group_id=membership.group_id,
            select=MEMBER_SELECT,
            page_size=self._page_size,
        )
        first_page = self._client.fetch_page(query)

        scanned = 0
        for member in walk(first_page, self._client.fetch_next):
            scanned += 1
            if member.kind is not MemberKind.USER:
                continue
            if member.id == membership.user_id:
                logger.info(
                    "membership_found",
                    group_id=membership.group_id,
                    user_id=membership.user_id,
                    scanned=scanned,
                )
                return True

        logger.info(
            "membership_not_found",
            group_id=membership.group_id,
            user_id=membership.user_id,
            scanned=scanned,
        )
        return False

    def is_member_by_mail(self, group_mail: str, user_mail: str) -> bool:
        """Resolve group and user by mail, then check membership.

        Returns False when either mail does not resolve.
        """
        group = self._resolver.resolve_by_mail(CollectionKind.GROUPS, group_mail)
        if group is None:
            logger.info("membership_check_skipped", reason="group_not_found", mail=group_mail)
            return False

        user = self._resolver.resolve_by_mail(CollectionKind.USERS, user_mail)
        if user is None:
            logger.info("membership_check_skipped", reason="user_not_found", mail=user_mail)
            return False

        return self.is_member(group.id, user)

    @staticmethod
    def _user_id(target_user: Union[DirectoryObject, str]) -> str:
        if isinstance(target_user, DirectoryObject):
            if target_user.kind is not MemberKind.USER:
                raise ValueError(
                    f"membership target must be a user, got {target_user.kind.value}"
                )
            user_id = target_user.id
        else:
            user_id = target_user
        if not user_id:
            raise ValueError("user identifier must not be empty")
        return user_id
