"""Configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Integration settings
from infrastructure.configuration.integrations import (
    GoogleWorkspaceSettings,
    MicrosoftGraphSettings,
)

# Feature settings
from infrastructure.configuration.features import DirectoryFeatureSettings


class Settings(BaseSettings):
    """Configuration settings - main aggregator.

    Aggregates the domain-specific settings into a single configuration object:

    - **Integrations**: Directory backends (Google Workspace, Microsoft Graph)
    - **Features**: Directory lookup behaviour (provider selection, page size)

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        provider = settings.directory.provider
        customer = settings.google_workspace.GOOGLE_WORKSPACE_CUSTOMER_ID
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    # Integration settings
    google_workspace: GoogleWorkspaceSettings
    microsoft_graph: MicrosoftGraphSettings

    # Feature settings
    directory: DirectoryFeatureSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "google_workspace": GoogleWorkspaceSettings,
            "microsoft_graph": MicrosoftGraphSettings,
            "directory": DirectoryFeatureSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
