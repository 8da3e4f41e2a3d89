"""Identity resolution by mail address.

Looks up a user or group by mail with a single server-side filtered query.
Only the first page is examined: an empty first page is reported as not found
even if a later page could in theory hold a match. Exact-mail filters make that
impossible in practice, but it is a stated limitation of the lookup.

Candidates whose mail is not a case-insensitive match for the requested
address are discarded, whatever the server-side filter let through.

Mail is not guaranteed unique by the directory. When several objects match,
the first one in server order wins and an ``ambiguous_mail_match`` warning is
logged.
"""

from typing import TYPE_CHECKING, Optional

import structlog

from modules.directory.domain.models import (
    CollectionKind,
    DirectoryObject,
    DirectoryQuery,
    EqualsFilter,
    MailLookup,
)
from modules.directory.filters import validate_filter_value

if TYPE_CHECKING:
    from modules.directory.providers.base import DirectoryClient

logger = structlog.get_logger()

RESOLVABLE_COLLECTIONS = (CollectionKind.USERS, CollectionKind.GROUPS)


def _same_mail(candidate: Optional[str], mail: str) -> bool:
    return candidate is not None and candidate.casefold() == mail.casefold()


class IdentityResolver:
    """Resolve directory objects by mail against one directory client.

    Args:
        client: DirectoryClient used for the filtered first-page fetch
        page_size: Optional page size hint passed with the query
    """

    def __init__(self, client: "DirectoryClient", page_size: Optional[int] = None):
        self._client = client
        self._page_size = page_size

    def lookup(self, collection: CollectionKind, mail: str) -> MailLookup:
        """Fetch the first page of collection filtered on mail.

        Args:
            collection: USERS or GROUPS
            mail: Mail address to match exactly

        Returns:
            MailLookup holding the first-page candidates whose mail matches

        Raises:
            ValueError: If collection cannot be resolved by mail
            InvalidFilterValue: If mail is blank or not a string
            TransportFailure: If the fetch fails
        """
        if collection not in RESOLVABLE_COLLECTIONS:
            raise ValueError(f"cannot resolve by mail in collection {collection.value}")
        validate_filter_value(mail)

        query = DirectoryQuery(
            collection=collection,
            filter=EqualsFilter("mail", mail),
            page_size=self._page_size,
        )
        page = self._client.fetch_page(query)
        candidates = tuple(obj for obj in page.items if _same_mail(obj.mail, mail))
        if len(candidates) < len(page.items):
            logger.warning(
                "non_matching_candidates_discarded",
                collection=collection.value,
                mail=mail,
                discarded=len(page.items) - len(candidates),
            )
        result = MailLookup(mail=mail, collection=collection, candidates=candidates)

        if result.is_ambiguous:
            logger.warning(
                "ambiguous_mail_match",
                collection=collection.value,
                mail=mail,
                candidates=len(result.candidates),
                selected_id=result.match.id,
            )
        return result

    def resolve_by_mail(
        self, collection: CollectionKind, mail: str
    ) -> Optional[DirectoryObject]:
        """Return the first object of collection whose mail matches, or None."""
        match = self.lookup(collection, mail).match
        if match is None:
            logger.info("mail_not_found", collection=collection.value, mail=mail)
        return match
