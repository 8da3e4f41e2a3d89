"""Add a user to a group, both identified by mail."""

from typing import TYPE_CHECKING, Optional, Union

import structlog

from infrastructure.operations import OperationResult
from modules.directory.domain.errors import TransportFailure
from modules.directory.domain.models import CollectionKind, DirectoryObject
from modules.directory.resolver import IdentityResolver

if TYPE_CHECKING:
    from modules.directory.providers.base import DirectoryClient

logger = structlog.get_logger()


def _failure_result(exc: TransportFailure, error_code: str) -> OperationResult:
    if exc.response is not None:
        return exc.response
    return OperationResult.permanent_error(str(exc), error_code=error_code)


class GroupMembershipMutator:
    """Resolve a user and a group by mail and write one membership reference.

    The write is issued exactly once. It is neither retried nor deduplicated;
    a failed attempt is reported as one failed result.
    """

    def __init__(
        self,
        client: "DirectoryClient",
        resolver: Optional[IdentityResolver] = None,
    ):
        self._client = client
        self._resolver = resolver or IdentityResolver(client)

    def _resolve(
        self, collection: CollectionKind, mail: str
    ) -> Union[DirectoryObject, OperationResult]:
        try:
            found = self._resolver.resolve_by_mail(collection, mail)
        except TransportFailure as exc:
            result = _failure_result(exc, "LOOKUP_FAILED")
            logger.error(
                "add_member_lookup_failed",
                collection=collection.value,
                mail=mail,
                status=result.status.value,
                retryable=result.status.is_retryable,
                error=str(exc),
            )
            return result

        if found is None:
            if collection is CollectionKind.USERS:
                reason, label = "USER_NOT_FOUND", "User"
            else:
                reason, label = "GROUP_NOT_FOUND", "Group"
            logger.warning("add_member_aborted", reason=reason.lower(), mail=mail)
            return OperationResult.not_found(
                f"{label} not found: {mail}", error_code=reason
            )
        return found

    def add_user_to_group(self, user_mail: str, group_mail: str) -> OperationResult:
        """Add the user behind user_mail to the group behind group_mail.

        Every outcome is reported as an OperationResult; lookup and write
        failures alike carry the classified status of the failing call.

        Returns:
            OperationResult: SUCCESS with ``{"group_id", "user_id"}``,
            NOT_FOUND (``USER_NOT_FOUND`` / ``GROUP_NOT_FOUND``) when a mail
            does not resolve, or the classified failure of a lookup
            (``LOOKUP_FAILED`` when unclassified) or of the write
            (``ADD_MEMBER_FAILED`` when unclassified).

        Raises:
            InvalidFilterValue: If a mail is blank
        """
        user = self._resolve(CollectionKind.USERS, user_mail)
        if isinstance(user, OperationResult):
            return user

        group = self._resolve(CollectionKind.GROUPS, group_mail)
        if isinstance(group, OperationResult):
            return group

        try:
            self._client.add_member_reference(group.id, user.id)
        except TransportFailure as exc:
            result = _failure_result(exc, "ADD_MEMBER_FAILED")
            logger.error(
                "add_member_failed",
                group_id=group.id,
                user_id=user.id,
                status=result.status.value,
                retryable=result.status.is_retryable,
                error=str(exc),
            )
            return result

        logger.info("member_added", group_id=group.id, user_id=user.id)
        return OperationResult.success(
            data={"group_id": group.id, "user_id": user.id},
            message=f"Added {user_mail} to {group_mail}",
        )
