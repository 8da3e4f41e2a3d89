"""Microsoft Graph integration settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import IntegrationSettings


class MicrosoftGraphSettings(IntegrationSettings):
    """Microsoft Graph (Entra ID directory) configuration settings.

    Environment Variables:
        GRAPH_TENANT_ID: Entra tenant ID
        GRAPH_CLIENT_ID: App registration client ID
        GRAPH_CLIENT_SECRET: App registration client secret
        GRAPH_BASE_URL: Graph API root (default: https://graph.microsoft.com/v1.0)
        GRAPH_REQUEST_TIMEOUT: Per-request timeout in seconds (default: 30)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        tenant = settings.microsoft_graph.GRAPH_TENANT_ID
        ```
    """

    GRAPH_TENANT_ID: str = Field(default="", alias="GRAPH_TENANT_ID")
    GRAPH_CLIENT_ID: str = Field(default="", alias="GRAPH_CLIENT_ID")
    GRAPH_CLIENT_SECRET: str = Field(default="", alias="GRAPH_CLIENT_SECRET")
    GRAPH_BASE_URL: str = Field(
        default="https://graph.microsoft.com/v1.0", alias="GRAPH_BASE_URL"
    )
    GRAPH_REQUEST_TIMEOUT: float = Field(default=30.0, alias="GRAPH_REQUEST_TIMEOUT")

    @field_validator("GRAPH_BASE_URL")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("GRAPH_REQUEST_TIMEOUT")
    @classmethod
    def _positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("GRAPH_REQUEST_TIMEOUT must be positive")
        return v
