"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.google import GoogleWorkspaceSettings
from infrastructure.configuration.integrations.microsoft_graph import (
    MicrosoftGraphSettings,
)

__all__ = [
    "GoogleWorkspaceSettings",
    "MicrosoftGraphSettings",
]
