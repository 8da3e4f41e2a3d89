"""Google Workspace clients for the infrastructure layer.

Public API (Package Level):
- DirectoryClient: page-level Admin SDK Directory operations
- SessionProvider: delegated service account Directory API resources

Usage:
    from infrastructure.clients.google_workspace import DirectoryClient, SessionProvider

    provider = SessionProvider(credentials_json, default_delegated_email=admin)
    client = DirectoryClient(session_provider=provider)
    result = client.list_members_page("eng@example.com")
    if result.is_success:
        members = result.data.get("members", [])
"""

from infrastructure.clients.google_workspace.directory import DirectoryClient
from infrastructure.clients.google_workspace.session_provider import SessionProvider

__all__ = [
    "DirectoryClient",
    "SessionProvider",
]
