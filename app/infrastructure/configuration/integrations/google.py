"""Google Workspace integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class GoogleWorkspaceSettings(IntegrationSettings):
    """Google Workspace Admin SDK configuration settings.

    Environment Variables:
        GOOGLE_DELEGATED_ADMIN_EMAIL: Admin email for domain-wide delegation
        GOOGLE_WORKSPACE_CUSTOMER_ID: Google Workspace customer ID
        GCP_SERVICE_ACCOUNT_KEY_FILE: Service account key (JSON content)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        customer_id = settings.google_workspace.GOOGLE_WORKSPACE_CUSTOMER_ID
        ```
    """

    GOOGLE_DELEGATED_ADMIN_EMAIL: str = Field(
        default="", alias="GOOGLE_DELEGATED_ADMIN_EMAIL"
    )
    GOOGLE_WORKSPACE_CUSTOMER_ID: str = Field(
        default="my_customer", alias="GOOGLE_WORKSPACE_CUSTOMER_ID"
    )
    GCP_SERVICE_ACCOUNT_KEY_FILE: str = Field(
        default="", alias="GCP_SERVICE_ACCOUNT_KEY_FILE"
    )
