"""Page walker over continuation-token paged collections.

walk() turns an already-fetched first page plus a ``fetch_next`` capability
into a lazy, forward-only sequence of directory objects:

- items come out in page order, then server order within a page, once each;
- the continuation token is inspected before any further fetch, and its
  absence is the only termination signal;
- page N+1 is requested only after the consumer has pulled every item of
  page N, so abandoning the iterator early never fetches another page;
- a failing ``fetch_next`` raises at the point of the pull. Items already
  yielded stay yielded.

The walk is not a snapshot: members added or removed between page fetches may
be missed or seen twice.
"""

from typing import Callable, Iterator, TYPE_CHECKING

import structlog

from modules.directory.domain.errors import PaginationError
from modules.directory.domain.models import (
    ContinuationToken,
    DirectoryObject,
    DirectoryQuery,
    Page,
)

if TYPE_CHECKING:
    from modules.directory.providers.base import DirectoryClient

logger = structlog.get_logger()

FetchNext = Callable[[ContinuationToken], Page]


def walk(first_page: Page, fetch_next: FetchNext) -> Iterator[DirectoryObject]:
    """Yield every item of first_page and of the pages that follow it.

    Args:
        first_page: Page already fetched by the caller.
        fetch_next: Performs one remote round trip for a continuation token.

    Yields:
        DirectoryObject items in page-then-intra-page order.

    Raises:
        PaginationError: If the server returns a token that was already consumed.
        TransportFailure: Propagated from fetch_next.
    """
    page = first_page
    page_number = 1
    consumed: set[str] = set()

    while True:
        yield from page.items

        token = page.next_token
        if token is None:
            logger.debug("walk_complete", pages=page_number)
            return

        consumed.add(token.value)
        page_number += 1
        logger.debug("fetching_next_page", page_number=page_number)
        page = fetch_next(token)

        if page.next_token is not None and page.next_token.value in consumed:
            raise PaginationError(
                f"continuation token replayed by server on page {page_number}"
            )


def iter_collection(
    client: "DirectoryClient", query: DirectoryQuery
) -> Iterator[DirectoryObject]:
    """Fetch the first page of query from client and walk the rest.

    The first fetch happens on the first pull, not on the call.
    """
    first_page = client.fetch_page(query)
    yield from walk(first_page, client.fetch_next)
