"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    GoogleWorkspaceSettings, MicrosoftGraphSettings: Integration settings
    DirectoryFeatureSettings: Directory lookup settings

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()
    page_size = settings.directory.page_size
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.integrations import (
    GoogleWorkspaceSettings,
    MicrosoftGraphSettings,
)
from infrastructure.configuration.features import DirectoryFeatureSettings

__all__ = [
    "Settings",
    "GoogleWorkspaceSettings",
    "MicrosoftGraphSettings",
    "DirectoryFeatureSettings",
]
