"""Directory client contract and shared adapter behaviour.

The core (page walker, identity resolver, membership checker, mutator) only
ever talks to a DirectoryClient. Concrete adapters translate the contract
into vendor calls and turn failed OperationResults into TransportFailure.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import structlog

from infrastructure.operations.result import OperationResult
from modules.directory.domain.errors import TransportFailure
from modules.directory.domain.models import ContinuationToken, DirectoryQuery, Page

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = structlog.get_logger()


@runtime_checkable
class DirectoryClient(Protocol):
    """Capability consumed by the core.

    fetch_page() issues the initial filtered query, fetch_next() follows a
    continuation token taken from the immediately preceding page, and
    add_member_reference() performs one membership write. Every failure is
    raised as TransportFailure.
    """

    def fetch_page(self, query: DirectoryQuery) -> Page:
        ...

    def fetch_next(self, token: ContinuationToken) -> Page:
        ...

    def add_member_reference(self, group_id: str, member_id: str) -> None:
        ...


class DirectoryAdapter(ABC):
    """Base class for vendor-backed DirectoryClient implementations.

    Subclasses register themselves with ``register_provider`` and are built
    from settings through ``from_settings``.
    """

    name: str = "directory"

    def __init__(self) -> None:
        self._logger = logger.bind(component=f"{self.name}_directory_adapter")

    @classmethod
    @abstractmethod
    def from_settings(cls, settings: "Settings") -> "DirectoryAdapter":
        """Build the adapter and its vendor client from application settings."""

    @abstractmethod
    def fetch_page(self, query: DirectoryQuery) -> Page:
        """Fetch the first page of a query."""

    @abstractmethod
    def fetch_next(self, token: ContinuationToken) -> Page:
        """Fetch the page behind a continuation token."""

    @abstractmethod
    def add_member_reference(self, group_id: str, member_id: str) -> None:
        """Add member_id to group_id's members."""

    def _unwrap(self, result: OperationResult, operation: str) -> Any:
        """Return result.data, or raise TransportFailure if the call failed."""
        if result.is_success:
            return result.data
        self._logger.warning(
            "directory_call_failed",
            operation=operation,
            status=result.status.value,
            error_code=result.error_code,
            message=result.message,
        )
        raise TransportFailure(
            f"{self.name} {operation} failed: {result.message}", response=result
        )
