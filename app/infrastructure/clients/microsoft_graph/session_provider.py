"""Microsoft Graph session provider for authentication and HTTP sessions."""

from typing import Optional

import requests
import structlog
from azure.identity import ClientSecretCredential

logger = structlog.get_logger()

GRAPH_SCOPE = "https://graph.microsoft.com/.default"


class GraphSessionProvider:
    """Hands out authenticated ``requests`` sessions for Microsoft Graph.

    Token acquisition and caching are delegated to ``azure-identity``; each
    call to session() returns a fresh Session carrying a current bearer
    token. Callers use it as a context manager so the connection pool is
    released on every exit path.

    Args:
        tenant_id: Entra tenant ID
        client_id: App registration client ID
        client_secret: App registration client secret
        credential: Pre-built azure-identity credential (overrides the above)
    """

    def __init__(
        self,
        tenant_id: str = "",
        client_id: str = "",
        client_secret: str = "",
        credential: Optional[object] = None,
    ) -> None:
        self._tenant_id = tenant_id
        self._client_id = client_id
        self._client_secret = client_secret
        self._credential = credential
        self._logger = logger.bind(component="graph_session_provider")

    def _get_credential(self):
        if self._credential is None:
            if not (self._tenant_id and self._client_id and self._client_secret):
                raise ValueError("Microsoft Graph credentials are not configured")
            self._credential = ClientSecretCredential(
                tenant_id=self._tenant_id,
                client_id=self._client_id,
                client_secret=self._client_secret,
            )
        return self._credential

    def session(self) -> requests.Session:
        """Create an authenticated Graph session.

        Returns:
            requests.Session with Authorization and Content-Type headers set

        Raises:
            ValueError: If credentials are not configured
        """
        credential = self._get_credential()
        try:
            access_token = credential.get_token(GRAPH_SCOPE)
        except Exception as e:
            self._logger.error("graph_token_acquisition_failed", error=str(e))
            raise

        session = requests.Session()
        session.headers.update(
            {
                "Authorization": f"Bearer {access_token.token}",
                "Content-Type": "application/json",
            }
        )
        return session
