"""Admin SDK Directory API resources for a delegated service account."""

import json
from typing import Optional

import structlog
from google.oauth2 import service_account
from googleapiclient.discovery import Resource, build

logger = structlog.get_logger()

DIRECTORY_API = ("admin", "directory_v1")


class SessionProvider:
    """Builds Directory API resources scoped to a single OAuth scope.

    The service account key is parsed on first use and reused afterwards.
    A new Resource is built per call since Resource objects must not be
    shared between threads.

    Args:
        credentials_json: Service account key (JSON text)
        default_delegated_email: Workspace admin impersonated when a call
            does not name one
    """

    def __init__(
        self,
        credentials_json: str,
        default_delegated_email: Optional[str] = None,
    ) -> None:
        self._credentials_json = credentials_json
        self._default_delegated_email = default_delegated_email
        self._base_credentials: Optional[service_account.Credentials] = None
        self._logger = logger.bind(component="google_session_provider")

    def _service_account_credentials(self) -> service_account.Credentials:
        if self._base_credentials is None:
            if not self._credentials_json:
                raise ValueError(
                    "Google service account credentials are not configured"
                )
            try:
                info = json.loads(self._credentials_json)
            except json.JSONDecodeError as e:
                self._logger.error("invalid_credentials_json", error=str(e))
                raise ValueError("Invalid credentials JSON") from e
            self._base_credentials = (
                service_account.Credentials.from_service_account_info(info)
            )
        return self._base_credentials

    def directory_service(
        self, scope: str, delegated_user_email: Optional[str] = None
    ) -> Resource:
        """Build a Directory API resource authorized for scope.

        Raises:
            ValueError: If the key is missing or is not valid JSON
        """
        creds = self._service_account_credentials()
        subject = delegated_user_email or self._default_delegated_email
        if subject:
            creds = creds.with_subject(subject)
        creds = creds.with_scopes([scope])

        return build(
            *DIRECTORY_API,
            credentials=creds,
            cache_discovery=False,
            static_discovery=False,
        )
