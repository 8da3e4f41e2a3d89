"""Microsoft Graph clients for the infrastructure layer.

Public API (Package Level):
- GraphDirectoryClient: page-level Graph directory operations
- GraphSessionProvider: azure-identity backed authenticated sessions

Usage:
    from infrastructure.clients.microsoft_graph import (
        GraphDirectoryClient,
        GraphSessionProvider,
    )

    provider = GraphSessionProvider(tenant_id, client_id, client_secret)
    client = GraphDirectoryClient(session_provider=provider)
    result = client.list_members_page(group_id)
"""

from infrastructure.clients.microsoft_graph.directory import GraphDirectoryClient
from infrastructure.clients.microsoft_graph.session_provider import (
    GraphSessionProvider,
)

__all__ = [
    "GraphDirectoryClient",
    "GraphSessionProvider",
]
